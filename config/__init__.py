"""VEDA Configuration Module.

This module exposes environment-driven settings loaded from `.env`.

Settings:
    LOG_LEVEL: Root log level for the observability logger.
    DEFAULT_ZONE: City zone used when a premium request omits one.
    CURRENCY_SYMBOL: Prefix for sum-insured labels.
    DAILY_CALORIE_GOAL: Calorie counter goal when the caller gives none.
"""
from config.settings import (
    LOG_LEVEL,
    DEFAULT_ZONE,
    CURRENCY_SYMBOL,
    DAILY_CALORIE_GOAL,
)

__all__ = ["LOG_LEVEL", "DEFAULT_ZONE", "CURRENCY_SYMBOL", "DAILY_CALORIE_GOAL"]
