from pydantic import BaseModel, Field
from typing import Dict, Optional
from enum import Enum


# Enums
class IdentityLevel(str, Enum):
    unknown = "unknown"
    basic = "basic"
    good = "good"
    strong = "strong"


class ValueProfile(str, Enum):
    APPRECIATING = "APPRECIATING"
    DEPRECIATING = "DEPRECIATING"
    NEUTRAL = "NEUTRAL"


class ReadinessTier(str, Enum):
    not_ready = "not_ready"
    almost_ready = "almost_ready"
    ready = "ready"


# Results
class IdentityResult(BaseModel):
    """How well Round knows what an asset is."""

    level: IdentityLevel
    label: str
    short_label: str
    color_class: str = Field(..., description="Badge CSS classes for the level")
    score: Optional[int] = Field(
        None, description="Signals present (0-4); None when the catalog link or home rules decided"
    )
    basis: str = Field("signals", description="catalog / signals / home")


class Readiness(BaseModel):
    ready: bool
    tier: ReadinessTier
    label: str
    description: str
    has_context: bool
    identity: IdentityResult


class ValuationEstimate(BaseModel):
    """
    Placeholder estimate produced by the rule-based valuation.
    Never persisted automatically.
    """

    value: float
    currency: str
    source: str
    profile: ValueProfile
    years: float = Field(..., description="Elapsed years used in the calculation")
    condition: str = Field("unknown", description="Normalised condition key")


class MagicImportResult(BaseModel):
    message: str
    readiness: Readiness
    estimate: Optional[ValuationEstimate] = None


class PortfolioSummary(BaseModel):
    asset_count: int = 0
    total_purchase: float = 0.0
    total_current: float = 0.0
    total_purchase_display: str = "£0"
    total_current_display: str = "£0"
    identity_stats: Dict[IdentityLevel, int] = Field(
        default_factory=lambda: {level: 0 for level in IdentityLevel}
    )
    round_ready_count: int = 0
