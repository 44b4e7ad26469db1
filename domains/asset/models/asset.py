import math

from pydantic import BaseModel, Field, validator
from typing import Any, Optional


TEXT_FIELDS = (
    "id",
    "title",
    "status",
    "brand",
    "model_name",
    "serial_number",
    "city",
    "country",
    "purchase_currency",
    "purchase_date",
    "estimate_currency",
    "purchase_url",
    "receipt_url",
    "notes_internal",
    "current_condition",
    "asset_type_id",
)

NUMBER_FIELDS = ("purchase_price", "current_estimated_value")


def _blank_to_none(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _category_name(value: Any) -> Optional[str]:
    # A `category:categories ( name )` join comes back as a list of rows,
    # a normalised detail page passes a single row, a form passes the name.
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, dict):
        value = value.get("name")
    if value is None:
        return None
    return _blank_to_none(str(value))


class Asset(BaseModel):
    """
    Snapshot of a user's asset as read from the `assets` table
    (joined to `categories`).

    Every field is optional. Blank strings are treated exactly like missing
    values so the heuristics only ever have to test for None.
    """

    # Identity
    id: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None
    category: Optional[str] = Field(
        None, description="Category name (string, {'name': ...} row, or list of rows)"
    )
    brand: Optional[str] = None
    model_name: Optional[str] = None
    serial_number: Optional[str] = None

    # Address (homes)
    city: Optional[str] = None
    country: Optional[str] = None

    # Money
    purchase_price: Optional[float] = None
    purchase_currency: Optional[str] = None
    purchase_date: Optional[str] = Field(
        None, description="ISO date; malformed values are kept and ignored by the estimator"
    )
    current_estimated_value: Optional[float] = None
    estimate_currency: Optional[str] = None

    # Context sources
    purchase_url: Optional[str] = None
    receipt_url: Optional[str] = None
    notes_internal: Optional[str] = Field(None, alias="notes")

    current_condition: Optional[str] = None

    # Link to a canonical catalog entry
    asset_type_id: Optional[str] = None

    class Config:
        extra = "ignore"
        populate_by_name = True
        protected_namespaces = ()  # model_name is a column, not a pydantic attribute

    @validator("category", pre=True)
    def normalise_category(cls, v):
        return _category_name(v)

    @validator(*TEXT_FIELDS, pre=True)
    def blank_text_is_missing(cls, v):
        if v is None:
            return None
        if not isinstance(v, str):
            # ids and dates may arrive as ints / date objects
            v = v.isoformat() if hasattr(v, "isoformat") else str(v)
        return _blank_to_none(v)

    @validator(*NUMBER_FIELDS, pre=True)
    def lenient_number(cls, v):
        v = _blank_to_none(v)
        if v is None or isinstance(v, bool):
            return None
        try:
            number = float(v)
        except (TypeError, ValueError):
            return None
        return number if math.isfinite(number) else None


def coerce_asset(value: Any) -> Optional[Asset]:
    """Accept None, a plain dict row or an Asset."""
    if value is None or isinstance(value, Asset):
        return value
    if isinstance(value, dict):
        # Only string keys can name a column
        return Asset.model_validate({k: v for k, v in value.items() if isinstance(k, str)})
    return None
