"""
backend/schemas_assets.py

Pydantic schemas for the asset scoring endpoints that are not plain domain
models. Asset snapshots themselves use domains.asset.models.asset.Asset.
"""

from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field, validator

from domains.asset.models.asset import Asset
from domains.asset.models.scoring import ValueProfile

try:
    from backend.config import MAX_PORTFOLIO_ASSETS
except ModuleNotFoundError:
    from config import MAX_PORTFOLIO_ASSETS


# ========================================================================
# CLASSIFY SCHEMAS
# ========================================================================

class ClassifyRequest(BaseModel):
    """Request schema for classifying a category name."""
    category: Optional[str] = Field(None, max_length=200, description="Free-text category name")

    @validator("category", pre=True)
    def trim_category(cls, v):
        """Trim whitespace from category."""
        if isinstance(v, str):
            return v.strip()
        return v


class ClassifyResponse(BaseModel):
    category: Optional[str] = Field(None, description="Category name as received (trimmed)")
    is_home_like: bool = Field(..., description="Category reads like a home/property")
    value_profile: ValueProfile = Field(..., description="How the value tends to move over time")


# ========================================================================
# PORTFOLIO SCHEMAS
# ========================================================================

class PortfolioSummaryRequest(BaseModel):
    """Request schema for portfolio totals.

    The caller sends the user's asset rows; nothing is looked up server-side.
    """
    assets: List[Asset] = Field(default_factory=list, description="Asset snapshots")

    @validator("assets")
    def validate_asset_count(cls, v):
        """Cap the number of assets per request."""
        if len(v) > MAX_PORTFOLIO_ASSETS:
            raise ValueError(f"at most {MAX_PORTFOLIO_ASSETS} assets per request")
        return v


# ========================================================================
# RULESET SCHEMAS
# ========================================================================

class IdentityRulesResponse(BaseModel):
    name: str
    strong_threshold: int
    catalog_short_circuit: bool
    home_branch: bool
    description: str = ""
    is_default: bool = False


class IdentityRulesListResponse(BaseModel):
    items: List[IdentityRulesResponse] = Field(default_factory=list)
    default: str
