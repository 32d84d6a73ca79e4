"""InsuranceAgent - Health Protection Premium Estimate

Turns the insurance estimator form (age, coverage tier, family size,
pre-existing conditions, zone) into a premium estimate with the tier's
benefits and rule-selected tips.
"""
from typing import Dict, Any
import logging

from agents.intake_agent import IntakeAgent, InvalidInputError
from tools.insurance import INSURANCE_TERMS, estimate_premium
from core.observability import trace_agent
from config.settings import CURRENCY_SYMBOL

logger = logging.getLogger(__name__)


class InsuranceAgent:
    """
    InsuranceAgent - Deterministic Premium Estimation

    Reads context["form"], writes context["insurance"] (a PremiumResult as a
    dict plus the glossary of insurance terms shown next to the estimate).
    """

    def __init__(self, intake: IntakeAgent = None):
        self.intake = intake or IntakeAgent()

    @trace_agent
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return self._run_internal(context)
        except InvalidInputError as e:
            logger.warning(f"InsuranceAgent rejected form: {e}")
            context["errors"] = e.fields
            return self._fallback(context, str(e))
        except Exception as e:
            logger.error(f"InsuranceAgent failed: {e}")
            return self._fallback(context, str(e))

    def _run_internal(self, context: Dict[str, Any]) -> Dict[str, Any]:
        request = self.intake.parse_premium(context.get("form") or {})
        result = estimate_premium(request)

        estimate = result.to_dict()
        estimate["age"] = request.age
        estimate["members"] = request.members
        estimate["zone"] = request.zone.value
        estimate["terms"] = dict(INSURANCE_TERMS)
        context["insurance"] = estimate

        logger.info(
            f"Premium estimate: {result.coverage_name}, {request.members} member(s), "
            f"{CURRENCY_SYMBOL}{result.annual_premium}/year"
        )
        context.setdefault("debug", []).append("InsuranceAgent: premium estimated.")
        return context

    def _fallback(self, context: Dict[str, Any], error: str = "") -> Dict[str, Any]:
        """No estimate; the UI keeps the form open."""
        logger.warning(f"InsuranceAgent using fallback: {error}")
        context["insurance"] = None
        context.setdefault("debug", []).append(f"InsuranceAgent: Fallback used ({error})")
        return context
