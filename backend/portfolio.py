"""
Portfolio-level totals for the dashboard.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Optional

from domains.asset.models.asset import coerce_asset
from domains.asset.models.scoring import PortfolioSummary

try:
    from backend.config import DEFAULT_CURRENCY
    from backend.identity import IdentityRules, get_identity_rules
    from backend.readiness import compute_readiness
except ModuleNotFoundError:
    from config import DEFAULT_CURRENCY
    from identity import IdentityRules, get_identity_rules
    from readiness import compute_readiness


CURRENCY_SYMBOLS = {"GBP": "£"}


def format_money(value: Optional[float], currency: Optional[str] = "GBP") -> str:
    """£1234 for GBP, 'USD 1234' otherwise, '—' when there is no value."""
    if value is None:
        return "—"
    cur = currency or DEFAULT_CURRENCY
    # Halves round away from zero on the exact binary value
    amount = str(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    symbol = CURRENCY_SYMBOLS.get(cur)
    if symbol:
        return f"{symbol}{amount}"
    return f"{cur} {amount}"


def summarize_portfolio(assets: Iterable[Any], rules: Optional[IdentityRules] = None) -> PortfolioSummary:
    """
    Totals and Magic Import readiness stats over a list of assets.

    Missing prices count as 0. Totals are shown in GBP regardless of each
    asset's own currency (no FX conversion).
    """
    rules = rules or get_identity_rules()
    summary = PortfolioSummary()

    for raw in assets:
        asset = coerce_asset(raw)
        if asset is None:
            continue

        summary.asset_count += 1
        summary.total_purchase += asset.purchase_price or 0.0
        summary.total_current += asset.current_estimated_value or 0.0

        readiness = compute_readiness(asset, rules)
        summary.identity_stats[readiness.identity.level] += 1

        # Same gate as the Magic Import endpoint
        if readiness.ready:
            summary.round_ready_count += 1

    summary.total_purchase_display = format_money(summary.total_purchase, "GBP")
    summary.total_current_display = format_money(summary.total_current, "GBP")
    return summary
