"""VEDA Tools Module.

This module contains the deterministic calculators behind the health tools page.

Tools:
    calc_bmi / classify_bmi: Body Mass Index and its WHO band.
    calc_bmr: Basal Metabolic Rate (Mifflin-St Jeor).
    calc_tdee / calc_target_calories: Daily energy expenditure and goal target.
    calc_ideal_weight_range: Weight range for a normal BMI.
    calc_water_intake / calc_protein_needs: Daily hydration and protein.
    build_health_report: Every health metric for one person.
    calculate_premium / estimate_premium: Health insurance premium estimate.
    get_insurance_tips: Rule-selected insurance advice.
    summarize_daily_log: Calorie counter totals.
"""
from tools.health_metrics import (
    calc_bmi,
    classify_bmi,
    calc_bmr,
    calc_tdee,
    calc_target_calories,
    calc_ideal_weight_range,
    calc_water_intake,
    calc_protein_needs,
    get_personalized_tips,
    build_health_report,
)
from tools.insurance import (
    calculate_premium,
    estimate_premium,
    get_insurance_tips,
    get_coverage_option,
)
from tools.calorie_counter import (
    search_foods,
    create_log_entry,
    summarize_daily_log,
)

__all__ = [
    "calc_bmi",
    "classify_bmi",
    "calc_bmr",
    "calc_tdee",
    "calc_target_calories",
    "calc_ideal_weight_range",
    "calc_water_intake",
    "calc_protein_needs",
    "get_personalized_tips",
    "build_health_report",
    "calculate_premium",
    "estimate_premium",
    "get_insurance_tips",
    "get_coverage_option",
    "search_foods",
    "create_log_entry",
    "summarize_daily_log",
]
