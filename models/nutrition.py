from typing import Dict, Union
from dataclasses import dataclass, field, asdict
from enum import Enum


class MealType(Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"

    @classmethod
    def coerce(cls, value: Union["MealType", str, None]) -> "MealType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().strip())
        except ValueError:
            return DEFAULT_MEAL


DEFAULT_MEAL = MealType.BREAKFAST


@dataclass(frozen=True)
class FoodItem:
    """One serving of a food from the static database."""
    id: str
    name: str
    name_hi: str
    serving: str
    calories: float
    protein: float
    carbs: float
    fat: float
    category: str


@dataclass
class FoodLogEntry:
    food_id: str
    name: str
    name_hi: str
    calories: float
    protein: float
    carbs: float
    fat: float
    quantity: float
    meal: MealType

    def to_dict(self) -> dict:
        data = asdict(self)
        data["meal"] = self.meal.value
        return data


@dataclass
class DailyLogSummary:
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    daily_goal: int
    progress_percent: float   # capped at 100
    remaining_calories: float
    meal_calories: Dict[str, float] = field(default_factory=dict)
    entry_count: int = 0

    def to_dict(self) -> dict:
        return asdict(self)
