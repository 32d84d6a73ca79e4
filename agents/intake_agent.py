"""IntakeAgent - Form Input Parsing and Validation

The calculators assume clean numbers and closed enum values. Forms hand us
strings ("70", "70 kg", "5-6", "Male", "yes"), so this agent turns raw form
fields into typed inputs and rejects anything missing or out of range before
a calculator ever sees it.

Design Decisions:
    1. Lenient parsing: first number wins, simple ranges are averaged
    2. Strict validation: values outside realistic human ranges are rejected,
       not clamped, so the UI can ask again
    3. One error listing every bad field, instead of failing on the first
"""
from typing import Any, Dict, List, Optional, Tuple
import re
import logging

from models.health import ActivityLevel, BiometricInput, Gender, Goal
from models.insurance import PremiumInput, Zone
from tools.rounding import round_half_up

logger = logging.getLogger(__name__)

# (min, max) accepted for each numeric form field
FIELD_RANGES: Dict[str, Tuple[float, float]] = {
    "weight_kg": (1, 500),
    "height_cm": (30, 300),
    "age_years": (1, 120),
    "premium_age": (18, 120),
    "members": (1, 20),
}

GOAL_ALIASES = {
    "lose": Goal.LOSE,
    "lose weight": Goal.LOSE,
    "maintain": Goal.MAINTAIN,
    "gain": Goal.GAIN,
    "gain weight": Goal.GAIN,
}

_NUMBER = re.compile(r"-?\d+\.?\d*")


class InvalidInputError(ValueError):
    """Raised when form fields are missing or outside their accepted range."""

    def __init__(self, fields: Dict[str, str]):
        self.fields = fields
        detail = ", ".join(f"{name}: {reason}" for name, reason in fields.items())
        super().__init__(f"Invalid input ({detail})")


class IntakeAgent:
    """
    IntakeAgent - turns raw form dicts into calculator inputs.

    Recognized health form keys: weight / weight_kg, height / height_cm,
    age / age_years, gender / sex, activity_level, goal / goal_delta.
    Recognized insurance form keys: age, coverage, members / family_size,
    has_pre_existing, zone.
    """

    def parse_biometrics(self, form: Dict[str, Any]) -> BiometricInput:
        errors: Dict[str, str] = {}

        weight = self._required_number(form, ("weight_kg", "weight"), "weight_kg", errors)
        height = self._required_number(form, ("height_cm", "height"), "height_cm", errors)
        age = self._required_number(form, ("age_years", "age"), "age_years", errors)

        gender = self.parse_gender(self._first(form, ("gender", "sex")))
        if gender is None:
            errors["gender"] = "expected male or female"

        raw_activity = form.get("activity_level")
        if raw_activity is not None and not ActivityLevel.is_known(raw_activity):
            logger.warning(f"Unknown activity level '{raw_activity}', using default")
        activity = ActivityLevel.coerce(raw_activity) if raw_activity is not None else ActivityLevel.MODERATE

        goal_delta = self.parse_goal(self._first(form, ("goal_delta", "goal")))
        if goal_delta is None:
            errors["goal"] = "expected lose/maintain/gain or a kcal offset"

        if errors:
            raise InvalidInputError(errors)

        return BiometricInput(
            weight_kg=weight,
            height_cm=height,
            age_years=round_half_up(age),
            gender=gender,
            activity_level=activity,
            goal_delta=goal_delta,
        )

    def parse_premium(self, form: Dict[str, Any]) -> PremiumInput:
        errors: Dict[str, str] = {}

        age = self._required_number(form, ("age", "age_years"), "premium_age", errors)

        raw_members = self._first(form, ("members", "family_size"))
        members = 1
        if raw_members is not None:
            members = self.parse_int(raw_members)
            low, high = FIELD_RANGES["members"]
            if members is None or not low <= members <= high:
                errors["members"] = f"expected a whole number between {low} and {high}"

        has_pre_existing = False
        if form.get("has_pre_existing") is not None:
            has_pre_existing = self.parse_bool(form["has_pre_existing"])
            if has_pre_existing is None:
                errors["has_pre_existing"] = "expected yes or no"

        coverage = str(form.get("coverage") or "standard").strip()
        zone = Zone.coerce(form.get("zone"))

        if errors:
            raise InvalidInputError(errors)

        return PremiumInput(
            age=int(age),
            coverage=coverage,
            members=members,
            has_pre_existing=has_pre_existing,
            zone=zone,
        )

    def _first(self, form: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
        for key in keys:
            value = form.get(key)
            if value is not None and str(value).strip() != "":
                return value
        return None

    def _required_number(
        self,
        form: Dict[str, Any],
        keys: Tuple[str, ...],
        range_key: str,
        errors: Dict[str, str],
    ) -> Optional[float]:
        raw = self._first(form, keys)
        if raw is None:
            errors[keys[0]] = "required"
            return None
        value = self.parse_float(raw)
        low, high = FIELD_RANGES[range_key]
        if value is None:
            logger.warning(f"✗ Failed to parse {keys[0]}: '{raw}'")
            errors[keys[0]] = "not a number"
            return None
        if not low <= value <= high:
            logger.warning(f"✗ Out of range {keys[0]}: {value} (expected {low}-{high})")
            errors[keys[0]] = f"expected {low}-{high}"
            return None
        return value

    def parse_gender(self, value: Any) -> Optional[Gender]:
        if isinstance(value, Gender):
            return value
        val = str(value or "").lower().strip()
        if val in ["male", "m", "man"]:
            return Gender.MALE
        if val in ["female", "f", "woman"]:
            return Gender.FEMALE
        return None

    def parse_goal(self, value: Any) -> Optional[int]:
        """Goal name ('lose', 'Gain Weight') or a signed kcal offset ('-500')."""
        if value is None:
            return Goal.MAINTAIN.value
        if isinstance(value, Goal):
            return value.value
        val = str(value).lower().strip()
        if val in GOAL_ALIASES:
            return GOAL_ALIASES[val].value
        parsed = self.parse_float(val)
        return round_half_up(parsed) if parsed is not None else None

    def parse_bool(self, value: Any) -> Optional[bool]:
        if isinstance(value, bool):
            return value
        val = str(value).lower().strip()
        if val in ["yes", "true", "1", "y"]:
            return True
        if val in ["no", "false", "0", "n"]:
            return False
        return None

    def parse_int(self, value: Any) -> Optional[int]:
        """Robust int parsing: '5-6' (avg, rounded), '4 people' (first number)."""
        parsed = self.parse_float(value)
        if parsed is None:
            return None
        return round_half_up(parsed)

    def _extract_numbers(self, text: str) -> List[float]:
        return [float(m) for m in _NUMBER.findall(text)]

    def parse_float(self, value: Any) -> Optional[float]:
        """Robust float parsing for decimals, units and ranges.

        '70' -> 70.0, '70.5 kg' -> 70.5, '70-72' -> 71.0, '-500' -> -500.0
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return float(value)
        try:
            s = str(value).lower().strip()

            # Handle "X-Y" or "X to Y" range -> average
            range_match = re.fullmatch(r"(\d+\.?\d*)\s*(?:-|to)\s*(\d+\.?\d*)\s*[a-z]*", s)
            if range_match:
                low, high = float(range_match.group(1)), float(range_match.group(2))
                return (low + high) / 2

            numbers = self._extract_numbers(s)
            return numbers[0] if numbers else None
        except (ValueError, AttributeError, TypeError):
            return None
