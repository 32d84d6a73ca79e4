"""Central Configuration for VEDA Health Tools."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Base Directory (Root of the project)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load Environment Variables
load_dotenv(BASE_DIR / ".env")

# Logging
LOG_LEVEL = os.getenv("VEDA_LOG_LEVEL", "INFO").upper()

# Insurance Estimator Settings
DEFAULT_ZONE = os.getenv("VEDA_DEFAULT_ZONE", "Zone1")
CURRENCY_SYMBOL = os.getenv("VEDA_CURRENCY_SYMBOL", "₹")

# Calorie Counter Settings
DAILY_CALORIE_GOAL = int(os.getenv("VEDA_DAILY_CALORIE_GOAL", "2000"))
