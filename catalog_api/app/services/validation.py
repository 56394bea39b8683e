"""
Payload validation strategies.

Every strategy exposes ``validate(payload) -> ValidationResult``.  The
result lists *every* violated rule rather than stopping at the first,
so a client can fix all problems in one round trip.  Which strategy
guards which resource is a configuration choice (see
``core.config.Settings``):

* ``schema``: ``SchemaValidator`` checks the payload against a
  pydantic model and hands the coerced values to the store, the way an
  OpenAPI validator with type coercion would.
* ``rules``: ``ProductRulesValidator`` is the hand‑written product
  predicate.  It never alters the payload.
* ``none``: ``PassThroughValidator`` accepts anything.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Mapping, Protocol, Type

from pydantic import BaseModel, ValidationError

from ..core.errors import format_error_location
from ..schemas.product import (
    CATEGORIES,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    ProductPayload,
    is_whole_cents,
)
from ..schemas.user import UserPayload


@dataclass
class ValidationResult:
    """Verdict of a strategy plus the payload the store should receive."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    data: Dict[str, Any] = field(default_factory=dict)


class Validator(Protocol):
    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        ...


class PassThroughValidator:
    """Accept every payload unchanged."""

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        return ValidationResult(valid=True, data=dict(payload))


class SchemaValidator:
    """Validate against a pydantic model.

    Each pydantic error becomes one ``"<field>: <message>"`` entry.  On
    success ``data`` holds the fields that were supplied, after
    coercion, including any extra keys the model allows.
    """

    def __init__(self, model: Type[BaseModel]) -> None:
        self.model = model

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        try:
            instance = self.model.model_validate(dict(payload))
        except ValidationError as exc:
            errors = [f"{format_error_location(err['loc'])}: {err['msg']}" for err in exc.errors()]
            return ValidationResult(valid=False, errors=errors)
        return ValidationResult(valid=True, data=instance.model_dump(exclude_unset=True))


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class ProductRulesValidator:
    """The product predicate.

    * ``name``: string of 2 to 40 characters.
    * ``price``: finite number, not negative, a whole number of cents.
    * ``category``: non-empty list whose items all belong to
      ``CATEGORIES``; bad items are reported together as one error.
    * ``tags``: optional; when present a non-empty list of strings.
    * ``inStock``: optional; when present a boolean.

    ``None`` counts as absent for the optional fields.
    """

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        errors: List[str] = []
        errors.extend(self._check_name(payload.get("name")))
        errors.extend(self._check_price(payload.get("price")))
        errors.extend(self._check_category(payload.get("category")))
        errors.extend(self._check_tags(payload.get("tags")))
        errors.extend(self._check_in_stock(payload.get("inStock")))
        return ValidationResult(valid=not errors, errors=errors, data=dict(payload))

    @staticmethod
    def _check_name(name: Any) -> List[str]:
        if not isinstance(name, str):
            return ["name must be a string"]
        if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            return [f"name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters long"]
        return []

    @staticmethod
    def _check_price(price: Any) -> List[str]:
        if not _is_number(price):
            return ["price must be a finite number"]
        try:
            value = float(price)
        except OverflowError:
            return ["price must be a finite number"]
        if not math.isfinite(value):
            return ["price must be a finite number"]
        errors = []
        if value < 0:
            errors.append("price must be greater than or equal to 0")
        if not is_whole_cents(value):
            errors.append("price must have at most two decimal places")
        return errors

    @staticmethod
    def _check_category(category: Any) -> List[str]:
        if not isinstance(category, list) or not category:
            return ["category must be a non-empty list"]
        if any(not isinstance(item, str) or item not in CATEGORIES for item in category):
            return [f"category items must be one of: {', '.join(CATEGORIES)}"]
        return []

    @staticmethod
    def _check_tags(tags: Any) -> List[str]:
        if tags is None:
            return []
        if not isinstance(tags, list) or not tags:
            return ["tags must be a non-empty list when provided"]
        if any(not isinstance(tag, str) for tag in tags):
            return ["tags items must be strings"]
        return []

    @staticmethod
    def _check_in_stock(in_stock: Any) -> List[str]:
        if in_stock is None or isinstance(in_stock, bool):
            return []
        return ["inStock must be a boolean when provided"]


USER_STRATEGIES = ("schema", "none")
PRODUCT_STRATEGIES = ("rules", "schema", "none")


def user_validator(name: str) -> Validator:
    """Build the user strategy registered under ``name``."""
    if name == "schema":
        return SchemaValidator(UserPayload)
    if name == "none":
        return PassThroughValidator()
    raise ValueError(f"Unknown user validation strategy {name!r}; expected one of {USER_STRATEGIES}")


def product_validator(name: str) -> Validator:
    """Build the product strategy registered under ``name``."""
    if name == "rules":
        return ProductRulesValidator()
    if name == "schema":
        return SchemaValidator(ProductPayload)
    if name == "none":
        return PassThroughValidator()
    raise ValueError(f"Unknown product validation strategy {name!r}; expected one of {PRODUCT_STRATEGIES}")
