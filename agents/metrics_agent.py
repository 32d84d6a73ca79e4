"""MetricsAgent - Health Metrics Calculation

This agent computes the health report (BMI, BMR, TDEE, target calories,
ideal weight, water and protein) from the health tools form, using the
deterministic calculators in tools/health_metrics.py.

Design Decision:
    Calculations are pure functions; this agent only handles the form
    boundary. Invalid input never reaches a calculator: it is reported in
    context["errors"] and a zeroed report is returned so the UI can show
    "insufficient input" instead of a fake metric.
"""
from typing import Dict, Any
import logging

from agents.intake_agent import IntakeAgent, InvalidInputError
from tools.health_metrics import build_health_report
from tools.rounding import round_half_up
from core.observability import trace_agent

logger = logging.getLogger(__name__)


class MetricsAgent:
    """
    MetricsAgent - Deterministic Health Calculations

    Reads context["form"], writes context["metrics"] (a HealthMetricsResult
    as a dict) plus a few convenience comparisons:
    - bmi_gap_above_normal: how far BMI sits above 24.9, when it does
    - weight_to_ideal_kg: kg to gain (+) or lose (-) to reach the ideal range
    """

    def __init__(self, intake: IntakeAgent = None):
        self.intake = intake or IntakeAgent()

    @trace_agent
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Run metrics calculation with robust error handling."""
        try:
            return self._run_internal(context)
        except InvalidInputError as e:
            logger.warning(f"MetricsAgent rejected form: {e}")
            context["errors"] = e.fields
            return self._fallback(context, str(e))
        except Exception as e:
            logger.error(f"MetricsAgent failed: {e}")
            return self._fallback(context, str(e))

    def _run_internal(self, context: Dict[str, Any]) -> Dict[str, Any]:
        form = context.get("form") or {}
        biometrics = self.intake.parse_biometrics(form)
        report = build_health_report(biometrics)

        snapshot = report.to_dict()
        snapshot["goal_delta"] = biometrics.goal_delta
        snapshot["activity_level"] = biometrics.activity_level.value

        bmi_gap_above_normal = None
        if report.bmi_category.category in ("Overweight", "Obese"):
            bmi_gap_above_normal = round_half_up(report.bmi - 24.9, 1)
        snapshot["bmi_gap_above_normal"] = bmi_gap_above_normal

        weight_to_ideal = 0.0
        if biometrics.weight_kg < report.ideal_weight_min:
            weight_to_ideal = report.ideal_weight_min - biometrics.weight_kg
        elif biometrics.weight_kg > report.ideal_weight_max:
            weight_to_ideal = report.ideal_weight_max - biometrics.weight_kg
        snapshot["weight_to_ideal_kg"] = round_half_up(weight_to_ideal, 1)

        context["metrics"] = snapshot

        debug_log = context.setdefault("debug", [])
        debug_log.append("MetricsAgent: health report computed.")

        return context

    def _fallback(self, context: Dict[str, Any], error: str = "") -> Dict[str, Any]:
        """Provide a zeroed report when calculation cannot run."""
        logger.warning(f"MetricsAgent using fallback: {error}")

        # bmi 0 is the "insufficient input" signal for the UI
        context["metrics"] = {
            "bmi": 0.0,
            "bmi_category": {
                "category": None,
                "label": "Insufficient input",
                "color": "#64748B",
                "advice": "Enter your height, weight and age to see your health metrics.",
            },
            "bmr": None,
            "tdee": None,
            "target_calories": None,
            "ideal_weight_min": None,
            "ideal_weight_max": None,
            "water_intake_liters": None,
            "protein_min_grams": None,
            "protein_max_grams": None,
            "tips": [],
            "bmi_gap_above_normal": None,
            "weight_to_ideal_kg": None,
        }

        debug_log = context.setdefault("debug", [])
        debug_log.append(f"MetricsAgent: Fallback used ({error})")

        return context
