import logging
from typing import Dict, List, Tuple, Union

from models.health import (
    ActivityLevel,
    BiometricInput,
    BMICategory,
    Gender,
    HealthMetricsResult,
    IdealWeightRange,
)
from tools.rounding import round_half_up

logger = logging.getLogger(__name__)

# WHO adult bands, half-open [lower, upper)
BMI_CATEGORIES: Tuple[BMICategory, ...] = (
    BMICategory(
        lower=0.0, upper=18.5, category="Underweight", label="Underweight", color="#3B82F6",
        advice="Consider increasing calorie intake with nutritious foods like ghee, paneer, and nuts.",
    ),
    BMICategory(
        lower=18.5, upper=25.0, category="Normal", label="Normal Weight", color="#10B981",
        advice="Excellent! Maintain your weight with balanced meals and regular exercise.",
    ),
    BMICategory(
        lower=25.0, upper=30.0, category="Overweight", label="Overweight", color="#F59E0B",
        advice="Reduce fried foods, increase fiber intake. Try walking and yoga daily.",
    ),
    BMICategory(
        lower=30.0, upper=float("inf"), category="Obese", label="Obese", color="#EF4444",
        advice="Consult a doctor. Switch to whole grains, reduce sugar, and start light exercise.",
    ),
)

ACTIVITY_MULTIPLIERS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# grams of protein per kg of body weight
PROTEIN_RATIOS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 0.8,
    ActivityLevel.LIGHT: 1.0,
    ActivityLevel.MODERATE: 1.2,
    ActivityLevel.ACTIVE: 1.6,
    ActivityLevel.VERY_ACTIVE: 2.0,
}

WATER_LITERS_PER_KG = 0.035
HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9
GLASSES_PER_LITER = 4


def _resolve_gender(gender: Union[Gender, str, None]) -> Gender:
    resolved = Gender.coerce(gender)
    if not Gender.is_known(gender):
        logger.debug(f"Unknown gender {gender!r}, using {resolved.value} offset")
    return resolved


def _resolve_activity(activity_level: Union[ActivityLevel, str, None]) -> ActivityLevel:
    level = ActivityLevel.coerce(activity_level)
    if not ActivityLevel.is_known(activity_level):
        logger.debug(f"Unknown activity level {activity_level!r}, using {level.value}")
    return level


def calc_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Calculate Body Mass Index (BMI).

    Returns:
        BMI (kg/m^2) rounded to 1 decimal, or 0 if either input is not
        positive. A 0 means "insufficient input" to the caller, never a
        real measurement.
    """
    if weight_kg <= 0 or height_cm <= 0:
        return 0.0
    height_m = height_cm / 100.0
    return round_half_up(weight_kg / (height_m * height_m), 1)


def classify_bmi(bmi: float) -> BMICategory:
    """Classify BMI into the four WHO adult bands (18.5 -> Normal, 25 -> Overweight, 30 -> Obese)."""
    for band in BMI_CATEGORIES:
        if band.contains(bmi):
            return band
    # only negative BMIs land here
    return BMI_CATEGORIES[0]


def calc_bmr(
    weight_kg: float,
    height_cm: float,
    age_years: int,
    gender: Union[Gender, str, None],
) -> int:
    """
    Mifflin-St Jeor BMR formula.

        base = 10 * weight(kg) + 6.25 * height(cm) - 5 * age(y)
        male:   base + 5
        female: base - 161

    Only 'male' takes the +5 offset; any other value uses the -161 offset.
    """
    base = (10 * weight_kg) + (6.25 * height_cm) - (5 * age_years)
    if _resolve_gender(gender) is Gender.MALE:
        return round_half_up(base + 5)
    return round_half_up(base - 161)


def calc_tdee(bmr: float, activity_level: Union[ActivityLevel, str]) -> int:
    """
    Estimate Total Daily Energy Expenditure from BMR and activity level.

    activity_level:
        'sedentary', 'light', 'moderate', 'active', 'very_active'
        Unrecognized values use the sedentary multiplier (1.2).
    """
    level = _resolve_activity(activity_level)
    return round_half_up(bmr * ACTIVITY_MULTIPLIERS[level])


def calc_target_calories(tdee: int, goal_delta: int) -> int:
    """Daily calorie target for a goal. Not clamped: a large deficit can go negative."""
    return tdee + goal_delta


def calc_ideal_weight_range(height_cm: float) -> IdealWeightRange:
    """Weight range (kg) that keeps BMI between 18.5 and 24.9 at this height."""
    height_m = height_cm / 100.0
    return IdealWeightRange(
        min=round_half_up(HEALTHY_BMI_MIN * height_m * height_m),
        max=round_half_up(HEALTHY_BMI_MAX * height_m * height_m),
    )


def calc_water_intake(weight_kg: float) -> float:
    """
    Daily water intake in liters.

    Standard rule: 35 ml per kg of body weight, rounded to 1 decimal.
    """
    return round_half_up(weight_kg * WATER_LITERS_PER_KG, 1)


def calc_protein_needs(weight_kg: float, activity_level: Union[ActivityLevel, str]) -> int:
    """
    Daily protein needs in grams.

    0.8 g/kg for sedentary up to 2.0 g/kg for very active people.
    Unrecognized activity levels use 0.8 g/kg.
    """
    level = _resolve_activity(activity_level)
    return round_half_up(weight_kg * PROTEIN_RATIOS[level])


def get_personalized_tips(
    bmi: float,
    water_liters: float,
    protein_min: int,
    protein_max: int,
) -> List[str]:
    """Rule-selected lifestyle tips shown under the health report."""
    tips = []

    if bmi < HEALTHY_BMI_MIN:
        tips.append("Add healthy fats: ghee, almonds, avocados daily")
        tips.append("Include protein-rich foods: eggs, paneer, legumes")
    elif bmi > 25:
        tips.append("Fill half your plate with vegetables before grains")
        tips.append("Start with 10,000 steps/day and morning yoga")

    glasses = round_half_up(water_liters * GLASSES_PER_LITER)
    tips.append(f"Drink {water_liters}L water daily ({glasses} glasses)")
    tips.append(f"Aim for {protein_min}-{protein_max}g protein daily")
    tips.append("Eat dinner by 7 PM for better digestion and sleep")
    tips.append("Practice 15-20 mins of breathing exercises daily")

    return tips


def build_health_report(biometrics: BiometricInput) -> HealthMetricsResult:
    """
    Run every health calculation for one person.

    Protein min/max span the sedentary and very active ratios, so the
    range does not depend on the selected activity level.
    """
    weight_kg = biometrics.weight_kg
    height_cm = biometrics.height_cm

    bmi = calc_bmi(weight_kg, height_cm)
    bmr = calc_bmr(weight_kg, height_cm, biometrics.age_years, biometrics.gender)
    tdee = calc_tdee(bmr, biometrics.activity_level)
    ideal = calc_ideal_weight_range(height_cm)
    water = calc_water_intake(weight_kg)
    protein_min = calc_protein_needs(weight_kg, ActivityLevel.SEDENTARY)
    protein_max = calc_protein_needs(weight_kg, ActivityLevel.VERY_ACTIVE)

    return HealthMetricsResult(
        bmi=bmi,
        bmi_category=classify_bmi(bmi),
        bmr=bmr,
        tdee=tdee,
        target_calories=calc_target_calories(tdee, biometrics.goal_delta),
        ideal_weight_min=ideal.min,
        ideal_weight_max=ideal.max,
        water_intake_liters=water,
        protein_min_grams=protein_min,
        protein_max_grams=protein_max,
        tips=get_personalized_tips(bmi, water, protein_min, protein_max),
    )
