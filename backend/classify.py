"""
Category keyword classifiers.

Everything here is a case-insensitive substring match against fixed keyword
lists. Category names are free text chosen by the user, so no attempt is made
to parse them beyond lower-casing.
"""

from __future__ import annotations

from typing import Optional

from domains.asset.models.asset import Asset
from domains.asset.models.scoring import ValueProfile


HOME_KEYWORDS = (
    "home",
    "house",
    "flat",
    "apartment",
    "property",
    "real estate",
)

# Checked in this order: appreciating first, then depreciating.
APPRECIATING_KEYWORDS = (
    "property",
    "home",
    "house",
    "apartment",
    "flat",
    "real estate",
    "real-estate",
)

DEPRECIATING_KEYWORDS = (
    "car",
    "vehicle",
    "van",
    "motorbike",
    "bike",
    "electronics",
    "phone",
    "laptop",
    "computer",
    "desktop",
    "monitor",
    "screen",
    "tv",
    "television",
    "camera",
    "console",
    "tablet",
    "headphones",
    "speaker",
    "audio",
    "macbook",
)

# Property portals whose listings count as a recognised source for homes
LISTING_DOMAINS = ("zoopla.", "rightmove.")


def _contains_any(text: Optional[str], keywords) -> bool:
    if not text:
        return False
    lower = text.lower()
    return any(k in lower for k in keywords)


def is_home_like(category_name: Optional[str]) -> bool:
    return _contains_any(category_name, HOME_KEYWORDS)


def infer_value_profile(category_name: Optional[str]) -> ValueProfile:
    """
    Map a category name to how its value tends to move over time.

    First matching list wins; anything unmatched (or empty) is NEUTRAL.
    """
    if _contains_any(category_name, APPRECIATING_KEYWORDS):
        return ValueProfile.APPRECIATING
    if _contains_any(category_name, DEPRECIATING_KEYWORDS):
        return ValueProfile.DEPRECIATING
    return ValueProfile.NEUTRAL


def is_recognised_listing_url(url: Optional[str]) -> bool:
    return _contains_any(url, LISTING_DOMAINS)


def has_full_address(asset: Optional[Asset]) -> bool:
    """Title, city and country are all filled in."""
    if asset is None:
        return False
    return bool(asset.title and asset.city and asset.country)
