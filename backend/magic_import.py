"""
Magic Import placeholder.

The real feature (scanning receipts, emails and links for live valuations and
market matches) does not exist yet. For now the action returns a fixed
message and, for Round-Ready assets, the demo rule-based estimate. Nothing is
written anywhere; the caller decides whether to keep the estimate.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from domains.asset.models.scoring import MagicImportResult

try:
    from backend.identity import IdentityRules
    from backend.readiness import compute_readiness
    from backend.valuation import compute_rule_based_valuation
except ModuleNotFoundError:
    from identity import IdentityRules
    from readiness import compute_readiness
    from valuation import compute_rule_based_valuation


MAGIC_IMPORT_MESSAGE = (
    "Magic Import is a future feature: Round will scan receipts, emails and links "
    "to suggest live valuations and market matches for this asset."
)


def run_magic_import(
    asset: Any,
    rules: Optional[IdentityRules] = None,
    today: Optional[date] = None,
) -> MagicImportResult:
    readiness = compute_readiness(asset, rules)
    estimate = compute_rule_based_valuation(asset, today) if readiness.ready else None
    return MagicImportResult(
        message=MAGIC_IMPORT_MESSAGE,
        readiness=readiness,
        estimate=estimate,
    )
