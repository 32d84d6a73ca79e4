from typing import List, Optional, Union
from dataclasses import dataclass, field, asdict
from enum import Enum

from config import settings


class Zone(Enum):
    """City zone used for premium loading. Zone 1 = metros."""
    ZONE1 = "Zone1"
    ZONE2 = "Zone2"

    @classmethod
    def parse(cls, value: Union["Zone", str, None]) -> Optional["Zone"]:
        """Accepts "Zone1", "zone 1", "1"; None for anything else."""
        if isinstance(value, cls):
            return value
        normalized = str(value or "").lower().replace(" ", "").replace("zone", "")
        if normalized == "1":
            return cls.ZONE1
        if normalized == "2":
            return cls.ZONE2
        return None

    @classmethod
    def coerce(cls, value: Union["Zone", str, None]) -> "Zone":
        """Like parse(), but anything unrecognized becomes DEFAULT_ZONE."""
        return cls.parse(value) or DEFAULT_ZONE


# Premiums are quoted for metros unless VEDA_DEFAULT_ZONE says otherwise
DEFAULT_ZONE = Zone.parse(settings.DEFAULT_ZONE) or Zone.ZONE1


@dataclass(frozen=True)
class CoverageOption:
    """A sellable coverage tier (display name, sum insured, benefits)."""
    key: str
    name: str
    amount: str          # e.g. "₹5 Lakh"
    value: str           # sum insured, used as the multiplier key
    color: str
    benefits: List[str] = field(default_factory=list)


@dataclass
class PremiumInput:
    age: int
    coverage: str = "500000"
    members: int = 1
    has_pre_existing: bool = False
    zone: Zone = DEFAULT_ZONE


@dataclass
class PremiumResult:
    annual_premium: int
    monthly_premium: int
    estimated_annual_savings: int
    coverage_name: str
    coverage_amount: str
    coverage_color: str
    benefits: List[str] = field(default_factory=list)
    tips: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)
