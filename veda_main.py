"""VEDA Health Tools - Calculator Pipeline

Entry point used by the presentation layer. Each request builds a fresh
context dict, runs the matching agent (each agent run is traced) and
returns the enriched context.

    system = VedaToolsSystem()
    context = system.health_report({"weight": "70", "height": "170", "age": "25", "gender": "male"})
    context["metrics"]["bmi"]  # 24.2
"""
import logging
from typing import Any, Dict, List, Optional

from agents.intake_agent import IntakeAgent
from agents.metrics_agent import MetricsAgent
from agents.insurance_agent import InsuranceAgent
from agents.nutrition_agent import NutritionAgent
from core.observability import get_metrics_summary, log_context

logger = logging.getLogger(__name__)


class VedaToolsSystem:
    """
    Stateless front for the three calculators.

    Attributes:
        intake: Shared form parser, passed to every agent.
        metrics: Health metrics report agent.
        insurance: Premium estimation agent.
        nutrition: Calorie log summary agent.
    """

    def __init__(self):
        self.intake = IntakeAgent()
        self.metrics = MetricsAgent(self.intake)
        self.insurance = InsuranceAgent(self.intake)
        self.nutrition = NutritionAgent(self.intake)

    def health_report(self, form: Dict[str, Any]) -> Dict[str, Any]:
        context = {"form": dict(form)}
        context = self.metrics.run(context)
        log_context(context, "health_report")
        return context

    def insurance_estimate(self, form: Dict[str, Any]) -> Dict[str, Any]:
        context = {"form": dict(form)}
        context = self.insurance.run(context)
        log_context(context, "insurance_estimate")
        return context

    def calorie_summary(
        self,
        food_log: List[Dict[str, Any]],
        daily_goal: Optional[int] = None,
    ) -> Dict[str, Any]:
        context = {"food_log": list(food_log), "daily_goal": daily_goal}
        context = self.nutrition.run(context)
        log_context(context, "calorie_summary")
        return context

    def get_metrics(self) -> dict:
        """Get observability metrics for this process."""
        return get_metrics_summary()
