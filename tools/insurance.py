"""Health insurance premium estimation.

Banded base rates per age group, then multiplicative loadings for sum
insured, family size, pre-existing conditions and city zone. Each factor
multiplies the running premium, so the order below is the order applied.
"""
import logging
from typing import Dict, List, Optional, Tuple, Union

from config.settings import CURRENCY_SYMBOL
from models.insurance import (
    CoverageOption,
    PremiumInput,
    PremiumResult,
    Zone,
)
from tools.rounding import round_half_up

logger = logging.getLogger(__name__)

# (band, lowest age, base annual premium in INR for 5 Lakh cover)
AGE_BANDS: Tuple[Tuple[str, int, int], ...] = (
    ("18-25", 0, 5000),
    ("26-35", 26, 6500),
    ("36-45", 36, 8500),
    ("46-55", 46, 12000),
    ("56-60", 56, 18000),
    ("60+", 61, 25000),
)
BASE_RATES: Dict[str, int] = {band: rate for band, _, rate in AGE_BANDS}

# Reference: 5 Lakhs = 1.0
COVERAGE_MULTIPLIERS: Dict[str, float] = {
    "300000": 0.7,      # 3 Lakhs
    "500000": 1.0,      # 5 Lakhs (Base)
    "1000000": 1.8,     # 10 Lakhs
    "1500000": 2.5,     # 15 Lakhs
    "2500000": 3.5,     # 25 Lakhs
    "5000000": 6.0,     # 50 Lakhs
    "10000000": 10.0,   # 1 Crore
}
DEFAULT_COVERAGE_MULTIPLIER = 1.0

MEMBER_MULTIPLIERS: Dict[int, float] = {
    1: 1.0,   # Self only
    2: 1.5,   # Self + Spouse (Floater benefit)
    3: 1.9,   # Self + Spouse + 1 Child
    4: 2.3,   # Self + Spouse + 2 Children
    5: 2.7,
    6: 3.0,
}
EXTRA_MEMBER_LOADING = 0.4

PRE_EXISTING_LOADING = 1.2
ZONE_LOADINGS: Dict[Zone, float] = {
    Zone.ZONE1: 1.1,  # Metros are 10% higher
    Zone.ZONE2: 1.0,
}
SAVINGS_RATE = 0.08

COVERAGE_OPTIONS: Dict[str, CoverageOption] = {
    "basic": CoverageOption(
        key="basic",
        name="Essential",
        amount="₹3 Lakh",
        value="300000",
        color="#3B82F6",
        benefits=["Hospitalization", "Day Care", "Pre-hospitalization (30 days)"],
    ),
    "standard": CoverageOption(
        key="standard",
        name="Comprehensive",
        amount="₹5 Lakh",
        value="500000",
        color="#10B981",
        benefits=["All Essential +", "Maternity Cover", "OPD Benefits", "No-Claim Bonus"],
    ),
    "premium": CoverageOption(
        key="premium",
        name="Supreme",
        amount="₹10 Lakh",
        value="1000000",
        color="#F59E0B",
        benefits=[
            "All Comprehensive +",
            "Air Ambulance",
            "Worldwide Cover",
            "Restore Benefit",
            "Annual Health Checkup",
        ],
    ),
}

INSURANCE_TERMS: Dict[str, str] = {
    "Sum Insured": "Maximum amount insurer will pay for treatment in a policy year",
    "Cashless Treatment": "Direct payment to network hospital, no out-of-pocket expense",
    "Waiting Period": "Time before certain illnesses are covered (usually 2-4 years for pre-existing)",
    "Co-payment": "Percentage of claim amount you pay from your pocket (usually 10-20%)",
}

YOUNG_AGE_TIPS = [
    "Young Age Advantage: Lock in a high coverage policy now while premiums are low.",
    "No Claim Bonus: Start building your NCB early to get up to 100% extra coverage free.",
]
SENIOR_AGE_TIPS = [
    "Critical Illness Cover: Highly recommended to add a rider for cardiac or cancer cover.",
    "Restoration Benefit: Ensure your policy auto-refills sum insured if exhausted.",
]
PRE_EXISTING_TIPS = [
    "Waiting Period: Be aware of the 2-4 year waiting period for your pre-existing conditions.",
    "Disclosure: Always disclose full medical history to avoid claim rejection.",
]
FAMILY_TIPS = [
    "Family Floater: A single floater plan is ~30% cheaper than individual plans for each member.",
    "Maternity Benefit: If planning a family, check waiting periods for maternity cover.",
]


def get_age_band(age: int) -> str:
    """
    Map age onto its premium band.

    Ages below 18 are not a supported input and are priced as 18-25.
    """
    band = AGE_BANDS[0][0]
    for name, lowest_age, _ in AGE_BANDS:
        if age >= lowest_age:
            band = name
    return band


def get_coverage_multiplier(coverage: Union[str, int]) -> float:
    """Multiplier for a sum insured; unknown amounts price like 5 Lakh (1.0)."""
    key = str(coverage).strip()
    if key not in COVERAGE_MULTIPLIERS:
        logger.debug(f"Unknown coverage {coverage!r}, using multiplier {DEFAULT_COVERAGE_MULTIPLIER}")
        return DEFAULT_COVERAGE_MULTIPLIER
    return COVERAGE_MULTIPLIERS[key]


def get_family_multiplier(members: int) -> float:
    """Family floater multiplier; sizes outside 1-6 use 1 + (members - 1) * 0.4."""
    if members in MEMBER_MULTIPLIERS:
        return MEMBER_MULTIPLIERS[members]
    return 1 + (members - 1) * EXTRA_MEMBER_LOADING


def calculate_premium(
    age: int,
    coverage: Union[str, int],
    members: int,
    has_pre_existing: bool,
    zone: Union[Zone, str, None] = None,
) -> int:
    """
    Calculate the estimated annual health insurance premium (INR).

    premium = base(age band) * coverage * family * pre-existing * zone,
    rounded to the nearest rupee.
    A missing or unknown zone is priced as DEFAULT_ZONE.
    """
    premium = float(BASE_RATES[get_age_band(age)])
    premium *= get_coverage_multiplier(coverage)
    premium *= get_family_multiplier(members)
    if has_pre_existing:
        premium *= PRE_EXISTING_LOADING
    premium *= ZONE_LOADINGS[Zone.coerce(zone)]
    return round_half_up(premium)


def get_insurance_tips(age: int, has_pre_existing: bool, family_size: int) -> List[str]:
    """
    Insurance recommendations for a profile.

    Rules are checked in order (age, pre-existing, family) and their tips
    appended in that order. The two age rules are exclusive: under 30 gets
    the early lock-in tips, over 45 the critical illness tips.
    """
    tips = []

    if age < 30:
        tips.extend(YOUNG_AGE_TIPS)
    elif age > 45:
        tips.extend(SENIOR_AGE_TIPS)

    if has_pre_existing:
        tips.extend(PRE_EXISTING_TIPS)

    if family_size > 1:
        tips.extend(FAMILY_TIPS)

    return tips


def format_sum_insured(amount: Union[str, int]) -> str:
    """Indian-style label for a sum insured: 500000 -> '₹5 Lakh', 10000000 -> '₹1 Crore'."""
    value = int(amount)
    if value >= 10_000_000:
        number, unit = value / 10_000_000, "Crore"
    elif value >= 100_000:
        number, unit = value / 100_000, "Lakh"
    else:
        return f"{CURRENCY_SYMBOL}{value:,}"
    return f"{CURRENCY_SYMBOL}{number:g} {unit}"


def get_coverage_option(coverage: Union[str, int]) -> Optional[CoverageOption]:
    """Look up a coverage tier by key ('standard') or by sum insured ('500000')."""
    key = str(coverage).strip()
    if key in COVERAGE_OPTIONS:
        return COVERAGE_OPTIONS[key]
    for option in COVERAGE_OPTIONS.values():
        if option.value == key:
            return option
    return None


def estimate_premium(request: PremiumInput) -> PremiumResult:
    """Full premium estimate: annual, monthly, savings, tier details and tips."""
    option = get_coverage_option(request.coverage)
    sum_insured = option.value if option else str(request.coverage)

    annual = calculate_premium(
        age=request.age,
        coverage=sum_insured,
        members=request.members,
        has_pre_existing=request.has_pre_existing,
        zone=request.zone,
    )

    if option is not None:
        name, amount, color, benefits = option.name, option.amount, option.color, list(option.benefits)
    else:
        amount = format_sum_insured(sum_insured) if sum_insured.isdigit() else sum_insured
        name, color, benefits = amount, "#64748B", []

    return PremiumResult(
        annual_premium=annual,
        monthly_premium=round_half_up(annual / 12),
        estimated_annual_savings=round_half_up(annual * SAVINGS_RATE),
        coverage_name=name,
        coverage_amount=amount,
        coverage_color=color,
        benefits=benefits,
        tips=get_insurance_tips(request.age, request.has_pre_existing, request.members),
    )
