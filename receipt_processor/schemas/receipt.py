"""
Canonical JSON schemas for submitted receipts and API envelopes.

Wire names are camelCase; Python attributes are snake_case.  Every receipt
field is kept as the submitted text so that listings echo it verbatim, and
missing or ``null`` fields decode to their zero value.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Receipt
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """A single purchased line item."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field("", alias="shortDescription")
    price: str = Field("", description="Decimal amount as text, e.g. '6.49'")

    @field_validator("short_description", "price", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value


class Receipt(BaseModel):
    """A submitted purchase receipt.  Immutable once decoded."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str = ""
    purchase_date: str = Field("", alias="purchaseDate", description="YYYY-MM-DD")
    purchase_time: str = Field("", alias="purchaseTime", description="HH:MM, 24-hour")
    total: str = Field("", description="Decimal amount as text, e.g. '35.35'")
    items: list[Item] = Field(default_factory=list)

    @field_validator("retailer", "purchase_date", "purchase_time", "total", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def null_items(cls, value):
        if value is None:
            return []
        if isinstance(value, list):
            return [{} if item is None else item for item in value]
        return value


# ---------------------------------------------------------------------------
# API response envelopes
# ---------------------------------------------------------------------------

class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int
