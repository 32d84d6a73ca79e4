"""NutritionAgent - Daily Calorie Log Summary

Resolves a day's food log ({food_id, quantity, meal} rows) against the
Indian food database and summarizes calories and macros per day and meal.
The log itself belongs to the caller; nothing is stored here.
"""
from typing import Dict, Any, List
import logging

from agents.intake_agent import IntakeAgent
from models.nutrition import FoodLogEntry
from tools.calorie_counter import create_log_entry, get_food, summarize_daily_log
from core.observability import trace_agent

logger = logging.getLogger(__name__)


class NutritionAgent:
    """
    NutritionAgent - Calorie Counter

    Reads context["food_log"] and optional context["daily_goal"], writes
    context["calories"] (a DailyLogSummary as a dict, plus the resolved
    entries). Rows with an unknown food id or a non-positive quantity are
    skipped and reported in context["skipped"].
    """

    def __init__(self, intake: IntakeAgent = None):
        self.intake = intake or IntakeAgent()

    @trace_agent
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return self._run_internal(context)
        except Exception as e:
            logger.error(f"NutritionAgent failed: {e}")
            return self._fallback(context, str(e))

    def _run_internal(self, context: Dict[str, Any]) -> Dict[str, Any]:
        entries: List[FoodLogEntry] = []
        skipped = []

        for row in context.get("food_log") or []:
            food = get_food(row.get("food_id"))
            quantity = self.intake.parse_float(row.get("quantity", 1))
            if food is None:
                logger.warning(f"Unknown food id '{row.get('food_id')}', skipping")
                skipped.append(row)
                continue
            if quantity is None or quantity <= 0:
                logger.warning(f"Invalid quantity '{row.get('quantity')}' for {food.name}, skipping")
                skipped.append(row)
                continue
            entries.append(create_log_entry(food, quantity, row.get("meal")))

        goal = context.get("daily_goal")
        if goal is not None:
            goal = self.intake.parse_int(goal)

        summary = summarize_daily_log(entries, goal)
        result = summary.to_dict()
        result["entries"] = [entry.to_dict() for entry in entries]

        context["calories"] = result
        context["skipped"] = skipped
        context.setdefault("debug", []).append(
            f"NutritionAgent: {len(entries)} entries summarized, {len(skipped)} skipped."
        )
        return context

    def _fallback(self, context: Dict[str, Any], error: str = "") -> Dict[str, Any]:
        logger.warning(f"NutritionAgent using fallback: {error}")
        context["calories"] = summarize_daily_log([]).to_dict()
        context["calories"]["entries"] = []
        context.setdefault("debug", []).append(f"NutritionAgent: Fallback used ({error})")
        return context
