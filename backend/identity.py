"""
Identity scoring for Round assets.

"Identity" is how well Round knows what an asset is: its category, brand,
model and serial/unique ID, or an exact link to a catalog entry. The level
gates Magic Import (see backend/readiness.py).

Several screens used to carry their own copy of this scoring with slightly
different thresholds. They are expressed here as named rulesets so the
behaviour is chosen explicitly rather than by whichever page did the scoring.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from domains.asset.models.asset import Asset, coerce_asset
from domains.asset.models.scoring import IdentityLevel, IdentityResult

try:
    from backend.classify import has_full_address, is_home_like, is_recognised_listing_url
    from backend.config import IDENTITY_RULES
except ModuleNotFoundError:
    from classify import has_full_address, is_home_like, is_recognised_listing_url
    from config import IDENTITY_RULES


# ---- Rulesets -----------------------------------------------------------


@dataclass(frozen=True)
class IdentityRules:
    name: str
    strong_threshold: int
    catalog_short_circuit: bool
    home_branch: bool
    description: str = ""
    label_set: str = "detail"


IDENTITY_RULESETS: Dict[str, IdentityRules] = {
    "standard": IdentityRules(
        "standard",
        strong_threshold=3,
        catalog_short_circuit=True,
        home_branch=False,
        description="Three of category/brand/model/serial is strong; catalog link is an exact match.",
    ),
    "exact_match": IdentityRules(
        "exact_match",
        strong_threshold=4,
        catalog_short_circuit=True,
        home_branch=False,
        description="All four signals (or a catalog link) are needed for strong.",
        label_set="dashboard",
    ),
    "home_aware": IdentityRules(
        "home_aware",
        strong_threshold=3,
        catalog_short_circuit=True,
        home_branch=True,
        description="As standard, but homes are scored on address and listing URL.",
    ),
}


class UnknownRulesetError(Exception):
    """Raised when an identity ruleset name is not in IDENTITY_RULESETS."""
    pass


def get_identity_rules(name: Optional[str] = None) -> IdentityRules:
    """
    Resolve a ruleset by name. None means the configured default
    (ROUND_IDENTITY_RULES), which falls back to "standard" if misconfigured.
    """
    if name is None:
        return IDENTITY_RULESETS.get(IDENTITY_RULES, IDENTITY_RULESETS["standard"])
    key = name.strip().lower()
    rules = IDENTITY_RULESETS.get(key)
    if rules is None:
        raise UnknownRulesetError(f"Unknown identity ruleset '{key}'")
    return rules


# ---- Labels -------------------------------------------------------------

COLOR_CLASSES = {
    IdentityLevel.strong: "bg-emerald-100 text-emerald-800 border-emerald-200",
    IdentityLevel.good: "bg-blue-100 text-blue-800 border-blue-200",
    IdentityLevel.basic: "bg-amber-100 text-amber-800 border-amber-200",
    IdentityLevel.unknown: "bg-slate-100 text-slate-700 border-slate-200",
}

SIGNAL_LABELS = {
    IdentityLevel.strong: (
        "Identity: Strong (brand, model, category and/or unique ID are clearly defined).",
        "Strong",
    ),
    IdentityLevel.good: (
        "Identity: Good (at least two of brand, model and category are known).",
        "Good",
    ),
    IdentityLevel.basic: (
        "Identity: Basic (Round has one signal, but would benefit from brand/model/category).",
        "Basic",
    ),
    IdentityLevel.unknown: ("Identity: Unknown", "Unknown"),
}

# Shorter wording used on the dashboard cards.
DASHBOARD_LABELS = {
    IdentityLevel.strong: ("Identity: Strong match", "Strong"),
    IdentityLevel.good: ("Identity: Good", "Good"),
    IdentityLevel.basic: ("Identity: Basic", "Basic"),
    IdentityLevel.unknown: ("Identity: Unknown", "Unknown"),
}

SIGNAL_LABEL_SETS = {
    "detail": SIGNAL_LABELS,
    "dashboard": DASHBOARD_LABELS,
}

HOME_LABELS = {
    IdentityLevel.strong: (
        "Identity: Strong (full address and a recognised property listing).",
        "Strong",
    ),
    IdentityLevel.good: (
        "Identity: Good (full address or a recognised property listing).",
        "Good",
    ),
    IdentityLevel.basic: (
        "Identity: Basic (add the address and a Zoopla/Rightmove listing).",
        "Basic",
    ),
}


def _result(level: IdentityLevel, labels, score: Optional[int], basis: str) -> IdentityResult:
    label, short_label = labels[level]
    return IdentityResult(
        level=level,
        label=label,
        short_label=short_label,
        color_class=COLOR_CLASSES[level],
        score=score,
        basis=basis,
    )


# ---- Scoring ------------------------------------------------------------


def identity_signal_count(asset: Optional[Asset]) -> int:
    """Count of category, brand, model and serial that are present (0-4)."""
    if asset is None:
        return 0
    signals = (asset.category, asset.brand, asset.model_name, asset.serial_number)
    return sum(1 for s in signals if s)


def level_for_score(score: int, strong_threshold: int = 3) -> IdentityLevel:
    if score >= strong_threshold:
        return IdentityLevel.strong
    if score >= 2:
        return IdentityLevel.good
    if score >= 1:
        return IdentityLevel.basic
    return IdentityLevel.unknown


def _home_level(asset: Asset) -> IdentityLevel:
    address = has_full_address(asset)
    listing = is_recognised_listing_url(asset.purchase_url)
    if address and listing:
        return IdentityLevel.strong
    if address or listing:
        return IdentityLevel.good
    # The category itself is known, that's one signal.
    return IdentityLevel.basic


def compute_identity(asset: Any, rules: Optional[IdentityRules] = None) -> IdentityResult:
    """
    Score an asset's identity.

    Order of evaluation:
    1. No asset -> unknown.
    2. Catalog link (asset_type_id) -> strong, if the ruleset allows it.
    3. Home-like category -> address/listing rules, if the ruleset has them.
    4. Signal count against the ruleset's strong threshold.
    """
    rules = rules or get_identity_rules()
    asset = coerce_asset(asset)

    if asset is None:
        return _result(IdentityLevel.unknown, SIGNAL_LABELS, 0, "signals")

    if rules.catalog_short_circuit and asset.asset_type_id:
        return IdentityResult(
            level=IdentityLevel.strong,
            label="Identity: Exact match",
            short_label="Exact",
            color_class=COLOR_CLASSES[IdentityLevel.strong],
            score=None,
            basis="catalog",
        )

    if rules.home_branch and is_home_like(asset.category):
        return _result(_home_level(asset), HOME_LABELS, None, "home")

    score = identity_signal_count(asset)
    labels = SIGNAL_LABEL_SETS.get(rules.label_set, SIGNAL_LABELS)
    return _result(level_for_score(score, rules.strong_threshold), labels, score, "signals")
