"""
Rule-based valuation used by the Magic Import demo.

This is a placeholder, not a valuation model. The growth/decay rates, floors,
cap and condition multipliers below are arbitrary stand-ins chosen for the
demo; they have not been validated against any market data. They are kept
fixed so estimates stay reproducible between releases.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from domains.asset.models.asset import Asset, coerce_asset
from domains.asset.models.scoring import ValuationEstimate, ValueProfile

try:
    from backend.classify import infer_value_profile
    from backend.config import DEFAULT_CURRENCY
except ModuleNotFoundError:
    from classify import infer_value_profile
    from config import DEFAULT_CURRENCY


FALLBACK_BASE_PRICE = 100.0
DEFAULT_YEARS = 1.0
DAYS_PER_YEAR = 365.25

# Appreciating (homes, property)
APPRECIATION_RATE = 0.04
APPRECIATION_CAP_MULTIPLE = 3.0

# Depreciating (vehicles, electronics)
EARLY_DECAY_RATE = 0.25
EARLY_DECAY_YEARS = 3.0
LATE_DECAY_RATE = 0.10
DEPRECIATING_FLOOR = 0.10

# Everything else
NEUTRAL_DECAY_RATE = 0.10
NEUTRAL_FLOOR = 0.30

# Homes barely move with condition, so they get a softer table.
SOFT_CONDITION_MULTIPLIERS = {
    "like_new": 1.05,
    "excellent": 1.05,
    "good": 1.0,
    "fair": 0.97,
    "poor": 0.93,
    "unknown": 0.98,
}

STANDARD_CONDITION_MULTIPLIERS = {
    "like_new": 1.0,
    "excellent": 1.05,
    "good": 0.9,
    "fair": 0.8,
    "poor": 0.65,
    "unknown": 0.85,
}

SOURCES = {
    ValueProfile.APPRECIATING: "Round rule-based estimate (appreciating profile: +4%/yr, capped at 3x purchase price)",
    ValueProfile.DEPRECIATING: "Round rule-based estimate (depreciating profile: -25%/yr for 3 years, then -10%/yr)",
    ValueProfile.NEUTRAL: "Round rule-based estimate (neutral profile: -10%/yr, floored at 30% of purchase price)",
}


# ---- Inputs -------------------------------------------------------------


def parse_purchase_date(value: Optional[str]) -> Optional[date]:
    """ISO date or datetime string -> date. Anything else -> None."""
    if not value:
        return None
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def _anniversary(start: date, years: int) -> date:
    try:
        return start.replace(year=start.year + years)
    except ValueError:
        # 29 Feb in a non-leap year
        return start.replace(year=start.year + years, day=28)


def years_between(start: date, end: date) -> float:
    """
    Whole calendar years between the dates plus the remaining days as a
    fraction. Exactly N anniversaries apart gives exactly N. Never negative.
    """
    if end <= start:
        return 0.0
    whole = end.year - start.year
    if _anniversary(start, whole) > end:
        whole -= 1
    remaining_days = (end - _anniversary(start, whole)).days
    return whole + remaining_days / DAYS_PER_YEAR


def elapsed_years(purchase_date: Optional[str], today: Optional[date] = None) -> float:
    start = parse_purchase_date(purchase_date)
    if start is None:
        return DEFAULT_YEARS
    return years_between(start, today or date.today())


def normalise_condition(condition: Optional[str]) -> str:
    """'Like New' / 'like-new' -> 'like_new'; missing -> 'unknown'."""
    if not condition or not str(condition).strip():
        return "unknown"
    return "_".join(str(condition).strip().lower().replace("-", " ").split())


def base_price(asset: Asset) -> float:
    return asset.purchase_price or asset.current_estimated_value or FALLBACK_BASE_PRICE


def base_currency(asset: Asset) -> str:
    return asset.purchase_currency or asset.estimate_currency or DEFAULT_CURRENCY


# ---- Profiles -----------------------------------------------------------


def appreciating_value(price: float, years: float, condition: str) -> float:
    grown = price * (1 + APPRECIATION_RATE) ** years
    capped = min(grown, price * APPRECIATION_CAP_MULTIPLE)
    multiplier = SOFT_CONDITION_MULTIPLIERS.get(condition, SOFT_CONDITION_MULTIPLIERS["unknown"])
    return capped * multiplier


def depreciating_value(price: float, years: float, condition: str) -> float:
    early_years = min(years, EARLY_DECAY_YEARS)
    late_years = max(years - EARLY_DECAY_YEARS, 0.0)
    value = price * (1 - EARLY_DECAY_RATE) ** early_years * (1 - LATE_DECAY_RATE) ** late_years
    value = max(value, price * DEPRECIATING_FLOOR)
    multiplier = STANDARD_CONDITION_MULTIPLIERS.get(condition, STANDARD_CONDITION_MULTIPLIERS["unknown"])
    return value * multiplier


def neutral_value(price: float, years: float, condition: str) -> float:
    value = price * (1 - NEUTRAL_DECAY_RATE) ** years
    value = max(value, price * NEUTRAL_FLOOR)
    multiplier = STANDARD_CONDITION_MULTIPLIERS.get(condition, STANDARD_CONDITION_MULTIPLIERS["unknown"])
    return value * multiplier


PROFILE_FUNCTIONS = {
    ValueProfile.APPRECIATING: appreciating_value,
    ValueProfile.DEPRECIATING: depreciating_value,
    ValueProfile.NEUTRAL: neutral_value,
}


def compute_rule_based_valuation(asset: Any, today: Optional[date] = None) -> ValuationEstimate:
    """
    Estimate the current value of an asset from its purchase price, age,
    category and condition.

    Args:
        asset: Asset, dict row or None (None is valued like an empty asset)
        today: Reference date for the age calculation (defaults to today)

    Returns:
        ValuationEstimate with value rounded to 2 dp
    """
    asset = coerce_asset(asset) or Asset()

    profile = infer_value_profile(asset.category)
    price = base_price(asset)
    years = elapsed_years(asset.purchase_date, today)
    condition = normalise_condition(asset.current_condition)

    value = PROFILE_FUNCTIONS[profile](price, years, condition)

    return ValuationEstimate(
        value=round(value, 2),
        currency=base_currency(asset),
        source=SOURCES[profile],
        profile=profile,
        years=round(years, 4),
        condition=condition,
    )
