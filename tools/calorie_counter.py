from typing import Dict, Iterable, List, Optional, Union

from config.settings import DAILY_CALORIE_GOAL
from models.nutrition import DailyLogSummary, FoodItem, FoodLogEntry, MealType
from tools.rounding import round_half_up

# Indian food database, nutrition per serving
FOOD_DATABASE: List[FoodItem] = [
    FoodItem("1", "Roti", "रोटी", "1 pc (30g)", 72, 2.1, 15, 0.4, "bread"),
    FoodItem("2", "Rice (Steamed)", "चावल", "1 bowl (150g)", 195, 4, 45, 0.4, "grain"),
    FoodItem("3", "Dal (Lentils)", "दाल", "1 bowl (150g)", 150, 9, 20, 3, "protein"),
    FoodItem("4", "Mixed Sabzi", "सब्जी", "1 bowl (100g)", 80, 2, 8, 4, "vegetable"),
    FoodItem("5", "Paneer Curry", "पनीर", "1 bowl (100g)", 265, 15, 8, 20, "protein"),
    FoodItem("6", "Curd/Dahi", "दही", "1 bowl (100g)", 60, 3, 5, 3, "dairy"),
    FoodItem("7", "Raita", "रायता", "1 bowl (100g)", 75, 3, 6, 4, "dairy"),
    FoodItem("8", "Paratha", "पराठा", "1 pc (60g)", 180, 4, 25, 7, "bread"),
    FoodItem("9", "Chai (Milk Tea)", "चाय", "1 cup (150ml)", 80, 2, 10, 3, "beverage"),
    FoodItem("10", "Banana", "केला", "1 medium (120g)", 105, 1.3, 27, 0.4, "fruit"),
    FoodItem("11", "Idli", "इडली", "2 pcs (100g)", 150, 4, 30, 1, "breakfast"),
    FoodItem("12", "Dosa", "डोसा", "1 pc (100g)", 130, 3, 22, 3, "breakfast"),
    FoodItem("13", "Upma", "उपमा", "1 plate (150g)", 220, 5, 35, 7, "breakfast"),
    FoodItem("14", "Poha", "पोहा", "1 plate (150g)", 250, 5, 45, 6, "breakfast"),
    FoodItem("15", "Apple", "सेब", "1 medium (150g)", 78, 0.4, 21, 0.2, "fruit"),
]
_FOODS_BY_ID: Dict[str, FoodItem] = {food.id: food for food in FOOD_DATABASE}

QUICK_ADD_IDS = ["1", "2", "3", "4", "9"]


def get_food(food_id: Union[str, int]) -> Optional[FoodItem]:
    return _FOODS_BY_ID.get(str(food_id))


def search_foods(query: str) -> List[FoodItem]:
    """Foods whose English name contains the query (case-insensitive) or whose Hindi name does."""
    query = (query or "").strip()
    if not query:
        return list(FOOD_DATABASE)
    lowered = query.lower()
    return [
        food for food in FOOD_DATABASE
        if lowered in food.name.lower() or query in food.name_hi
    ]


def quick_add_foods() -> List[FoodItem]:
    return [_FOODS_BY_ID[food_id] for food_id in QUICK_ADD_IDS]


def create_log_entry(
    food: FoodItem,
    quantity: float = 1,
    meal: Union[MealType, str, None] = MealType.BREAKFAST,
) -> FoodLogEntry:
    """Scale one food's per-serving nutrition by quantity for the daily log."""
    return FoodLogEntry(
        food_id=food.id,
        name=food.name,
        name_hi=food.name_hi,
        calories=food.calories * quantity,
        protein=food.protein * quantity,
        carbs=food.carbs * quantity,
        fat=food.fat * quantity,
        quantity=quantity,
        meal=MealType.coerce(meal),
    )


def meal_calories(entries: Iterable[FoodLogEntry], meal: Union[MealType, str]) -> float:
    meal = MealType.coerce(meal)
    return sum(entry.calories for entry in entries if entry.meal is meal)


def summarize_daily_log(
    entries: Iterable[FoodLogEntry],
    daily_goal: Optional[int] = None,
) -> DailyLogSummary:
    """
    Totals for a day's log.

    progress_percent is total calories over the goal, capped at 100
    (0 for a non-positive goal). remaining_calories goes negative once
    the goal is exceeded.
    """
    entries = list(entries)
    goal = DAILY_CALORIE_GOAL if daily_goal is None else daily_goal

    total_calories = sum(entry.calories for entry in entries)
    if goal > 0:
        progress = min(total_calories / goal * 100, 100.0)
    else:
        progress = 0.0

    return DailyLogSummary(
        total_calories=total_calories,
        total_protein=round_half_up(sum(entry.protein for entry in entries), 1),
        total_carbs=round_half_up(sum(entry.carbs for entry in entries), 1),
        total_fat=round_half_up(sum(entry.fat for entry in entries), 1),
        daily_goal=goal,
        progress_percent=round_half_up(progress, 1),
        remaining_calories=goal - total_calories,
        meal_calories={meal.value: meal_calories(entries, meal) for meal in MealType},
        entry_count=len(entries),
    )
