"""VEDA Data Models.

This module contains the dataclasses and enums passed between the form
intake layer and the calculators.

Models:
    BiometricInput / HealthMetricsResult: Health metrics calculator I/O.
    BMICategory, IdealWeightRange: Result parts of the health report.
    PremiumInput / PremiumResult: Insurance premium estimator I/O.
    CoverageOption: Sellable coverage tiers.
    FoodItem, FoodLogEntry, DailyLogSummary: Calorie counter values.
    Gender, ActivityLevel, Goal, Zone, MealType: Closed input enums.
"""
from models.health import (
    Gender,
    DEFAULT_GENDER,
    ActivityLevel,
    DEFAULT_ACTIVITY_LEVEL,
    Goal,
    BMICategory,
    IdealWeightRange,
    BiometricInput,
    HealthMetricsResult,
)
from models.insurance import (
    Zone,
    DEFAULT_ZONE,
    CoverageOption,
    PremiumInput,
    PremiumResult,
)
from models.nutrition import (
    MealType,
    DEFAULT_MEAL,
    FoodItem,
    FoodLogEntry,
    DailyLogSummary,
)

__all__ = [
    "Gender",
    "DEFAULT_GENDER",
    "ActivityLevel",
    "DEFAULT_ACTIVITY_LEVEL",
    "Goal",
    "BMICategory",
    "IdealWeightRange",
    "BiometricInput",
    "HealthMetricsResult",
    "Zone",
    "DEFAULT_ZONE",
    "CoverageOption",
    "PremiumInput",
    "PremiumResult",
    "MealType",
    "DEFAULT_MEAL",
    "FoodItem",
    "FoodLogEntry",
    "DailyLogSummary",
]
