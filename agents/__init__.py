"""VEDA Agent Module.

This module contains the agents that sit between raw form input and the
deterministic calculators.

Agents:
    IntakeAgent: Form parsing and validation.
    MetricsAgent: Health metrics report (BMI, BMR, TDEE, ...).
    InsuranceAgent: Health insurance premium estimate.
    NutritionAgent: Daily calorie log summary.
"""
from agents.intake_agent import IntakeAgent, InvalidInputError
from agents.metrics_agent import MetricsAgent
from agents.insurance_agent import InsuranceAgent
from agents.nutrition_agent import NutritionAgent

__all__ = [
    "IntakeAgent",
    "InvalidInputError",
    "MetricsAgent",
    "InsuranceAgent",
    "NutritionAgent",
]
