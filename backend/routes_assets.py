"""
backend/routes_assets.py

Asset scoring endpoints.

The service is stateless: every request carries the asset snapshot(s) it
scores, so there is nothing to authorise or scope here. Reading and writing
asset rows stays with the hosted backend.

Endpoints:
- POST /api/assets/classify      - category -> home-like + value profile
- POST /api/assets/identity      - identity level + label
- POST /api/assets/readiness     - Round-Ready gate with tier/label
- POST /api/assets/valuation     - rule-based placeholder estimate
- POST /api/assets/magic-import  - Magic Import stub (409 unless Round-Ready)
- POST /api/portfolio/summary    - dashboard totals + readiness stats
- GET  /api/identity/rulesets    - available identity rulesets
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from domains.asset.models.asset import Asset
from domains.asset.models.scoring import (
    IdentityResult,
    MagicImportResult,
    PortfolioSummary,
    Readiness,
    ValuationEstimate,
)

try:
    from backend.classify import infer_value_profile, is_home_like
    from backend.config import IS_DEV
    from backend.identity import (
        IDENTITY_RULESETS,
        IdentityRules,
        UnknownRulesetError,
        compute_identity,
        get_identity_rules,
    )
    from backend.magic_import import run_magic_import
    from backend.portfolio import summarize_portfolio
    from backend.readiness import compute_readiness
    from backend.schemas_assets import (
        ClassifyRequest,
        ClassifyResponse,
        IdentityRulesListResponse,
        IdentityRulesResponse,
        PortfolioSummaryRequest,
    )
    from backend.valuation import compute_rule_based_valuation
except ModuleNotFoundError:
    from classify import infer_value_profile, is_home_like
    from config import IS_DEV
    from identity import (
        IDENTITY_RULESETS,
        IdentityRules,
        UnknownRulesetError,
        compute_identity,
        get_identity_rules,
    )
    from magic_import import run_magic_import
    from portfolio import summarize_portfolio
    from readiness import compute_readiness
    from schemas_assets import (
        ClassifyRequest,
        ClassifyResponse,
        IdentityRulesListResponse,
        IdentityRulesResponse,
        PortfolioSummaryRequest,
    )
    from valuation import compute_rule_based_valuation


router = APIRouter(
    prefix="/api",
    tags=["assets"],
)


def resolve_rules(
    rules: Optional[str] = Query(None, min_length=1, max_length=50, description="Identity ruleset name"),
) -> IdentityRules:
    """Query param -> IdentityRules (400 for unknown names)."""
    try:
        return get_identity_rules(rules)
    except UnknownRulesetError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/assets/classify", response_model=ClassifyResponse)
def classify_category(request: ClassifyRequest) -> ClassifyResponse:
    return ClassifyResponse(
        category=request.category or None,
        is_home_like=is_home_like(request.category),
        value_profile=infer_value_profile(request.category),
    )


@router.post("/assets/identity", response_model=IdentityResult)
def score_identity(
    asset: Asset,
    rules: IdentityRules = Depends(resolve_rules),
) -> IdentityResult:
    """
    Score how well Round knows what this asset is.

    Args:
        asset: Asset snapshot (all fields optional)
        rules: Identity ruleset (?rules=standard|exact_match|home_aware)

    Returns:
        IdentityResult with level, labels and badge colour
    """
    result = compute_identity(asset, rules)
    if IS_DEV:
        print(f"[IDENTITY] asset_id={asset.id}, rules={rules.name}, level={result.level.value}, basis={result.basis}")
    return result


@router.post("/assets/readiness", response_model=Readiness)
def score_readiness(
    asset: Asset,
    rules: IdentityRules = Depends(resolve_rules),
) -> Readiness:
    return compute_readiness(asset, rules)


@router.post("/assets/valuation", response_model=ValuationEstimate)
def estimate_value(asset: Asset) -> ValuationEstimate:
    """
    Rule-based placeholder estimate. Nothing is persisted; the caller decides
    whether to store the suggested value.
    """
    estimate = compute_rule_based_valuation(asset)
    if IS_DEV:
        print(f"[VALUATION] asset_id={asset.id}, profile={estimate.profile.value}, years={estimate.years}, value={estimate.value} {estimate.currency}")
    return estimate


@router.post("/assets/magic-import", response_model=MagicImportResult)
def magic_import(
    asset: Asset,
    rules: IdentityRules = Depends(resolve_rules),
) -> MagicImportResult:
    """
    Magic Import stub.

    Raises:
        HTTPException(409): Asset is not Round-Ready (identity or context missing)
    """
    result = run_magic_import(asset, rules)
    if not result.readiness.ready:
        if IS_DEV:
            print(f"[MAGIC] Refused asset_id={asset.id}: tier={result.readiness.tier.value}")
        raise HTTPException(
            status_code=409,
            detail=f"Asset is not Round-Ready yet: {result.readiness.description}",
        )
    if IS_DEV:
        print(f"[MAGIC] Stub run for asset_id={asset.id}")
    return result


@router.post("/portfolio/summary", response_model=PortfolioSummary)
def portfolio_summary(
    request: PortfolioSummaryRequest,
    rules: IdentityRules = Depends(resolve_rules),
) -> PortfolioSummary:
    return summarize_portfolio(request.assets, rules)


@router.get("/identity/rulesets", response_model=IdentityRulesListResponse)
def list_identity_rulesets() -> IdentityRulesListResponse:
    default = get_identity_rules().name
    items = [
        IdentityRulesResponse(
            name=r.name,
            strong_threshold=r.strong_threshold,
            catalog_short_circuit=r.catalog_short_circuit,
            home_branch=r.home_branch,
            description=r.description,
            is_default=(r.name == default),
        )
        for r in IDENTITY_RULESETS.values()
    ]
    return IdentityRulesListResponse(items=items, default=default)
