"""
Business logic for products.

``ProductStore`` keeps product records in memory, keyed by
caller‑supplied string identifiers.  The store never generates
identifiers; records come from seed data and are changed only by a
full replace or removed by a delete.

A replace checks existence first, then runs the validation strategy
the store was built with, and finally swaps in a new record made of
the identifier, the payload's fields and the previous ``ratings``.
Ratings are owned by the store: whatever a payload sends under that
key is discarded.
"""

import copy
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .validation import Validator

logger = logging.getLogger(__name__)

Product = Dict[str, Any]


@dataclass
class ReplaceOutcome:
    """Result of ``ProductStore.replace``.

    ``found`` is ``False`` when the identifier is unknown; otherwise
    either ``product`` holds the new record or ``errors`` lists every
    violated rule.
    """

    found: bool
    product: Optional[Product] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.product is not None


class ProductStore:
    """In‑memory product collection."""

    def __init__(self, validator: Validator, seed: Iterable[Mapping[str, Any]] = ()) -> None:
        self._validator = validator
        # dicts keep insertion order, which list() relies on
        self._products: Dict[str, Product] = {}
        self._lock = threading.Lock()
        for record in seed:
            product = copy.deepcopy(dict(record))
            product.setdefault("ratings", [])
            self._products[str(product["id"])] = product

    def __len__(self) -> int:
        return len(self._products)

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """Return a copy of the product, or ``None`` if absent."""
        product = self._products.get(product_id)
        if product is None:
            logger.debug("Product %s not found", product_id)
            return None
        return copy.deepcopy(product)

    def replace(self, product_id: str, payload: Mapping[str, Any]) -> ReplaceOutcome:
        """Replace every caller‑settable field of a product."""
        with self._lock:
            existing = self._products.get(product_id)
            if existing is None:
                logger.debug("Product %s not found", product_id)
                return ReplaceOutcome(found=False)
            result = self._validator.validate(payload)
            if not result.valid:
                return ReplaceOutcome(found=True, errors=result.errors)
            fields = {k: v for k, v in result.data.items() if k not in ("id", "ratings")}
            product = {"id": product_id, **copy.deepcopy(fields), "ratings": existing.get("ratings", [])}
            self._products[product_id] = product
        logger.info("Replaced product %s", product_id)
        return ReplaceOutcome(found=True, product=copy.deepcopy(product))

    def delete(self, product_id: str) -> bool:
        """Remove a product.  Returns ``False`` if it did not exist."""
        with self._lock:
            removed = self._products.pop(product_id, None)
        if removed is None:
            logger.debug("Product %s not found", product_id)
            return False
        logger.info("Deleted product %s", product_id)
        return True

    def list(self) -> List[Product]:
        """Return every product in insertion order."""
        return [copy.deepcopy(p) for p in self._products.values()]
