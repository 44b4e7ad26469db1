"""
Round-Ready ("Magic-Ready") gate.

An asset is Round-Ready when Round knows what it is (good or strong identity)
and has at least one context source to work from: a purchase URL, notes or a
receipt. The gate only enables the Magic Import call-to-action.
"""

from __future__ import annotations

from typing import Any, Optional

from domains.asset.models.asset import Asset, coerce_asset
from domains.asset.models.scoring import IdentityLevel, Readiness, ReadinessTier

try:
    from backend.classify import has_full_address, is_recognised_listing_url
    from backend.identity import IdentityRules, compute_identity, get_identity_rules
except ModuleNotFoundError:
    from classify import has_full_address, is_recognised_listing_url
    from identity import IdentityRules, compute_identity, get_identity_rules


READY_IDENTITY_LEVELS = (IdentityLevel.good, IdentityLevel.strong)

TIER_LABELS = {
    ReadinessTier.ready: (
        "✨ Round-Ready",
        "Round has enough identity and context to start automated valuations.",
    ),
    ReadinessTier.almost_ready: (
        "Almost Ready",
        "Add the full address and a Zoopla or Rightmove listing to make this home Round-Ready.",
    ),
    ReadinessTier.not_ready: (
        "Not ready yet",
        "Add brand, model and category plus a product URL, notes or a receipt PDF.",
    ),
}


def has_context(asset: Optional[Asset]) -> bool:
    if asset is None:
        return False
    return bool(asset.purchase_url or asset.notes_internal or asset.receipt_url)


def is_round_ready(asset: Any, rules: Optional[IdentityRules] = None) -> bool:
    """Good/strong identity AND at least one context source."""
    asset = coerce_asset(asset)
    if asset is None:
        return False
    identity = compute_identity(asset, rules)
    return identity.level in READY_IDENTITY_LEVELS and has_context(asset)


# The dashboard and early detail pages called it Magic-Ready.
is_magic_ready = is_round_ready


def _home_tier(asset: Asset) -> ReadinessTier:
    address = has_full_address(asset)
    listing = is_recognised_listing_url(asset.purchase_url)
    if address and listing:
        return ReadinessTier.ready
    if address or listing:
        return ReadinessTier.almost_ready
    return ReadinessTier.not_ready


def compute_readiness(asset: Any, rules: Optional[IdentityRules] = None) -> Readiness:
    """
    Readiness with an explanatory label.

    With a home-aware ruleset, home-like assets need the full address and a
    recognised listing URL for the top tier, and get an "Almost Ready" tier
    when they have one of the two. Everything else is ready / not ready.
    """
    rules = rules or get_identity_rules()
    asset = coerce_asset(asset)
    identity = compute_identity(asset, rules)
    context = has_context(asset)

    # The catalog link decides identity before the home rules do
    if asset is not None and identity.basis == "home":
        tier = _home_tier(asset)
    elif asset is not None and identity.level in READY_IDENTITY_LEVELS and context:
        tier = ReadinessTier.ready
    else:
        tier = ReadinessTier.not_ready

    label, description = TIER_LABELS[tier]
    return Readiness(
        ready=(tier == ReadinessTier.ready),
        tier=tier,
        label=label,
        description=description,
        has_context=context,
        identity=identity,
    )
