"""
Pydantic models for product data.

Products are open records: a replace stores every field of the
payload, so only the fields with rules are declared here and
``ProductPayload`` allows extra keys.  ``ratings`` is managed by the
store and never taken from a payload.
"""

import math
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

CATEGORIES = ("electronics", "books", "clothes", "food")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 40

# Allowed drift between price * 100 and its rounded value.
CENTS_TOLERANCE = 1e-6


def is_whole_cents(price: float) -> bool:
    """Return ``True`` if ``price`` is an integer number of cents."""
    try:
        cents = float(price) * 100
    except OverflowError:
        return False
    return math.isfinite(cents) and abs(round(cents) - cents) < CENTS_TOLERANCE


class ProductPayload(BaseModel):
    """Body accepted by ``PUT /productos/{id}`` under the ``schema`` strategy."""

    model_config = {"extra": "allow"}

    name: str = Field(..., min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH, examples=["Laptop"])
    description: Optional[str] = None
    price: float = Field(..., ge=0, allow_inf_nan=False, examples=[999.99])
    category: List[Literal["electronics", "books", "clothes", "food"]] = Field(..., min_length=1)
    tags: Optional[List[str]] = Field(None, min_length=1)
    inStock: Optional[bool] = None

    @field_validator("price")
    @classmethod
    def validate_price_cents(cls, v: float) -> float:
        if not is_whole_cents(v):
            raise ValueError("price must have at most two decimal places")
        return v
