from typing import List, Union
from dataclasses import dataclass, field, asdict
from enum import Enum


class Gender(Enum):
    """Sex used to pick the Mifflin-St Jeor offset."""
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def coerce(cls, value: Union["Gender", str, None]) -> "Gender":
        """Map a raw value onto a gender; anything unrecognized becomes DEFAULT_GENDER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().strip())
        except ValueError:
            return DEFAULT_GENDER

    @classmethod
    def is_known(cls, value: Union["Gender", str, None]) -> bool:
        if isinstance(value, cls):
            return True
        return str(value).lower().strip() in cls._value2member_map_


# Fallback for unrecognized genders: only "male" gets the +5 offset
DEFAULT_GENDER = Gender.FEMALE


class ActivityLevel(Enum):
    SEDENTARY = "sedentary"      # Desk job, little/no exercise
    LIGHT = "light"              # Light exercise 1-3 days/week
    MODERATE = "moderate"        # Moderate exercise 3-5 days/week
    ACTIVE = "active"            # Hard exercise 6-7 days/week
    VERY_ACTIVE = "very_active"  # Physical job + intense exercise

    @classmethod
    def coerce(cls, value: Union["ActivityLevel", str, None]) -> "ActivityLevel":
        """Map a raw value onto a level; anything unrecognized becomes DEFAULT_ACTIVITY_LEVEL."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().strip())
        except ValueError:
            return DEFAULT_ACTIVITY_LEVEL

    @classmethod
    def is_known(cls, value: Union["ActivityLevel", str, None]) -> bool:
        if isinstance(value, cls):
            return True
        return str(value).lower().strip() in cls._value2member_map_


# Fallback for unrecognized activity levels (TDEE multiplier 1.2, protein ratio 0.8)
DEFAULT_ACTIVITY_LEVEL = ActivityLevel.SEDENTARY


class Goal(Enum):
    """Daily calorie offsets offered by the tools page."""
    LOSE = -500      # -0.5 kg/week
    MAINTAIN = 0
    GAIN = 500       # +0.5 kg/week


@dataclass(frozen=True)
class BMICategory:
    """A half-open BMI band [lower, upper) with its display hints."""
    lower: float
    upper: float
    category: str   # "Underweight" | "Normal" | "Overweight" | "Obese"
    label: str
    color: str
    advice: str

    def contains(self, bmi: float) -> bool:
        return self.lower <= bmi < self.upper


@dataclass(frozen=True)
class IdealWeightRange:
    min: int
    max: int

    @property
    def display(self) -> str:
        return f"{self.min} - {self.max} kg"


@dataclass
class BiometricInput:
    """Parsed form values for the health metrics calculator."""
    weight_kg: float
    height_cm: float
    age_years: int
    gender: Gender
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    goal_delta: int = Goal.MAINTAIN.value


@dataclass
class HealthMetricsResult:
    bmi: float
    bmi_category: BMICategory
    bmr: int
    tdee: int
    target_calories: int
    ideal_weight_min: int
    ideal_weight_max: int
    water_intake_liters: float
    protein_min_grams: int
    protein_max_grams: int
    tips: List[str] = field(default_factory=list)

    @property
    def ideal_weight_display(self) -> str:
        return IdealWeightRange(self.ideal_weight_min, self.ideal_weight_max).display

    def to_dict(self) -> dict:
        data = asdict(self)
        data["ideal_weight_display"] = self.ideal_weight_display
        return data
