"""Unit Tests for the health metrics calculators.

Run with: pytest tests/ -v
"""
import pytest

from models.health import DEFAULT_GENDER, ActivityLevel, BiometricInput, Gender, Goal
from tools.health_metrics import (
    ACTIVITY_MULTIPLIERS,
    BMI_CATEGORIES,
    build_health_report,
    calc_bmi,
    calc_bmr,
    calc_ideal_weight_range,
    calc_protein_needs,
    calc_target_calories,
    calc_tdee,
    calc_water_intake,
    classify_bmi,
    get_personalized_tips,
)
from tools.rounding import round_half_up

LEVELS_IN_ORDER = [
    ActivityLevel.SEDENTARY,
    ActivityLevel.LIGHT,
    ActivityLevel.MODERATE,
    ActivityLevel.ACTIVE,
    ActivityLevel.VERY_ACTIVE,
]


class TestRounding:

    def test_ties_round_up(self):
        assert round_half_up(1642.5) == 1643
        assert round_half_up(893.75) == 894
        assert round_half_up(2.5) == 3

    def test_one_decimal(self):
        assert round_half_up(22.85, 1) == 22.9
        assert round_half_up(22.857142, 1) == 22.9
        assert round_half_up(18.44, 1) == 18.4

    def test_decimals_follow_the_stored_float(self):
        # 1.15 is stored as 1.149999..., 2.675 as 2.67499...
        assert round_half_up(1.15, 1) == 1.1
        assert round_half_up(2.675, 2) == 2.67
        assert round_half_up(0.125, 2) == 0.13

    def test_huge_values_do_not_raise(self):
        assert round_half_up(1e30, 1) == 1e30
        assert round_half_up(float("inf"), 1) == float("inf")


class TestBMI:

    def test_bmi_calculation_normal(self):
        """BMI for average adult should be in normal range."""
        assert calc_bmi(70, 175) == 22.9
        assert calc_bmi(70, 170) == 24.2

    def test_bmi_extreme_input_does_not_raise(self):
        assert calc_bmi(1e30, 170) > 1e29

    @pytest.mark.parametrize("weight, height", [(45, 160), (70, 175), (95.5, 182), (120, 150)])
    def test_bmi_matches_formula(self, weight, height):
        expected = round_half_up(weight / (height / 100) ** 2, 1)
        assert calc_bmi(weight, height) == expected

    @pytest.mark.parametrize("weight, height", [(0, 175), (70, 0), (-70, 175), (70, -175), (0, 0)])
    def test_bmi_non_positive_input_is_zero(self, weight, height):
        """Non-positive dimensions return 0 instead of raising."""
        assert calc_bmi(weight, height) == 0

    @pytest.mark.parametrize("bmi, category", [
        (0, "Underweight"),
        (18.49, "Underweight"),
        (18.5, "Normal"),
        (24.99, "Normal"),
        (25.0, "Overweight"),
        (29.99, "Overweight"),
        (30.0, "Obese"),
        (55, "Obese"),
    ])
    def test_bmi_category_boundaries(self, bmi, category):
        """Bands are half-open: the lower bound belongs to the band."""
        assert classify_bmi(bmi).category == category

    def test_bands_are_contiguous(self):
        assert BMI_CATEGORIES[0].lower == 0
        for lower_band, upper_band in zip(BMI_CATEGORIES, BMI_CATEGORIES[1:]):
            assert lower_band.upper == upper_band.lower
        assert BMI_CATEGORIES[-1].upper == float("inf")

    def test_each_category_has_its_own_advice(self):
        advice = {band.category: band.advice for band in BMI_CATEGORIES}
        assert len(set(advice.values())) == 4
        assert "doctor" in advice["Obese"]
        assert "fried" in advice["Overweight"]
        assert "Maintain" in advice["Normal"]


class TestEnergy:

    def test_bmr_worked_example(self):
        """10*70 + 6.25*170 - 5*25 + 5 = 1642.5, rounds up to 1643."""
        assert calc_bmr(70, 170, 25, "male") == 1643
        assert calc_bmr(70, 170, 25, Gender.MALE) == 1643

    def test_bmr_gender_offset(self):
        """Female BMR is 166 kcal below male for the same body."""
        male = calc_bmr(70, 170, 25, "male")
        female = calc_bmr(70, 170, 25, "female")
        assert female == 1477
        assert male - female == 166

    @pytest.mark.parametrize("gender", ["other", "", None, "unknown"])
    def test_bmr_unknown_gender_uses_female_offset(self, gender):
        assert calc_bmr(70, 170, 25, gender) == 1477

    def test_gender_default(self):
        assert DEFAULT_GENDER is Gender.FEMALE
        assert Gender.coerce("other") is DEFAULT_GENDER
        assert Gender.coerce(" Male ") is Gender.MALE
        assert not Gender.is_known(None)

    def test_tdee_worked_example(self):
        assert calc_tdee(1643, ActivityLevel.MODERATE) == 2547
        assert calc_tdee(1643, "moderate") == 2547

    @pytest.mark.parametrize("level", LEVELS_IN_ORDER)
    def test_tdee_matches_formula(self, level):
        assert calc_tdee(1500, level) == round_half_up(1500 * ACTIVITY_MULTIPLIERS[level])

    def test_tdee_multiplier_strictly_increasing(self):
        multipliers = [ACTIVITY_MULTIPLIERS[level] for level in LEVELS_IN_ORDER]
        assert multipliers == sorted(multipliers)
        assert len(set(multipliers)) == 5
        values = [calc_tdee(1643, level) for level in LEVELS_IN_ORDER]
        assert values == sorted(values)

    def test_tdee_unknown_level_uses_sedentary(self):
        assert calc_tdee(1643, "couch_potato") == calc_tdee(1643, "sedentary") == 1972

    def test_target_calories(self):
        assert calc_target_calories(2547, Goal.LOSE.value) == 2047
        assert calc_target_calories(2547, 0) == 2547
        assert calc_target_calories(2547, Goal.GAIN.value) == 3047

    def test_target_calories_is_not_clamped(self):
        assert calc_target_calories(1200, -2000) == -800


class TestBodyTargets:

    def test_ideal_weight_range(self):
        ideal = calc_ideal_weight_range(170)
        assert (ideal.min, ideal.max) == (53, 72)
        assert ideal.display == "53 - 72 kg"
        assert calc_ideal_weight_range(175).min == 57
        assert calc_ideal_weight_range(175).max == 76

    def test_weights_inside_ideal_range_are_normal(self):
        """Interior weights of the ideal range classify as Normal BMI."""
        ideal = calc_ideal_weight_range(170)
        assert ideal.min < ideal.max
        for weight in range(ideal.min + 1, ideal.max + 1):
            assert classify_bmi(calc_bmi(weight, 170)).category == "Normal"

    def test_water_intake(self):
        """35 ml per kg, 1 decimal."""
        assert calc_water_intake(60) == 2.1
        assert calc_water_intake(80) == 2.8

    def test_protein_needs(self):
        assert calc_protein_needs(70, "sedentary") == 56
        assert calc_protein_needs(70, ActivityLevel.MODERATE) == 84
        assert calc_protein_needs(70, "very_active") == 140

    def test_protein_unknown_level_uses_default_ratio(self):
        assert calc_protein_needs(70, "gym_rat") == 56
        assert calc_protein_needs(70, None) == 56


class TestHealthReport:

    def _biometrics(self):
        return BiometricInput(
            weight_kg=80,
            height_cm=170,
            age_years=30,
            gender=Gender.FEMALE,
            activity_level=ActivityLevel.LIGHT,
            goal_delta=Goal.MAINTAIN.value,
        )

    def test_report_values(self):
        report = build_health_report(self._biometrics())

        assert report.bmi == 27.7
        assert report.bmi_category.category == "Overweight"
        assert report.bmr == 1552
        assert report.tdee == 2134
        assert report.target_calories == 2134
        assert (report.ideal_weight_min, report.ideal_weight_max) == (53, 72)
        assert report.water_intake_liters == 2.8
        assert (report.protein_min_grams, report.protein_max_grams) == (64, 160)

    def test_report_tips(self):
        tips = build_health_report(self._biometrics()).tips
        assert tips[0] == "Fill half your plate with vegetables before grains"
        assert "Drink 2.8L water daily (11 glasses)" in tips
        assert "Aim for 64-160g protein daily" in tips

    def test_underweight_tips(self):
        tips = get_personalized_tips(17.0, 1.8, 40, 100)
        assert tips[0].startswith("Add healthy fats")
        assert len(tips) == 6

    def test_normal_bmi_gets_only_general_tips(self):
        tips = get_personalized_tips(22.0, 2.5, 56, 140)
        assert len(tips) == 4
        assert tips[0] == "Drink 2.5L water daily (10 glasses)"

    def test_report_to_dict(self):
        data = build_health_report(self._biometrics()).to_dict()
        assert data["bmi_category"]["category"] == "Overweight"
        assert data["ideal_weight_display"] == "53 - 72 kg"

    def test_purity(self):
        """Same input, same output."""
        assert build_health_report(self._biometrics()) == build_health_report(self._biometrics())
        assert calc_bmr(70, 170, 25, "male") == calc_bmr(70, 170, 25, "male")
