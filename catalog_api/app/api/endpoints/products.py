"""
Product endpoints.

Products live under ``/productos``.  Unlike the user routes, bodies
are checked by the store itself (with the strategy it was built
with), so an unknown identifier always wins over an invalid body.
A rejected replace answers 400 with the full list of violations.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from ...core.errors import PayloadRejected
from ...services.product_service import ProductStore
from ..deps import get_product_store

router = APIRouter()

PRODUCT_NOT_FOUND = "Product not found"


@router.get("", response_model=List[Dict[str, Any]])
async def list_products(store: ProductStore = Depends(get_product_store)) -> List[Dict[str, Any]]:
    """Return every product in insertion order."""
    return store.list()


@router.get("/{product_id}", response_model=Dict[str, Any])
async def get_product(product_id: str, store: ProductStore = Depends(get_product_store)) -> Dict[str, Any]:
    """Return a product, including its ratings."""
    product = store.get_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)
    return product


@router.put("/{product_id}", response_model=Dict[str, Any])
async def replace_product(
    product_id: str,
    payload: Dict[str, Any] = Body(...),
    store: ProductStore = Depends(get_product_store),
) -> Dict[str, Any]:
    """Replace a product.  Existing ratings are kept, sent ones ignored."""
    outcome = store.replace(product_id, payload)
    if not outcome.found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)
    if not outcome.ok:
        raise PayloadRejected(outcome.errors, message="Invalid product")
    return outcome.product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, store: ProductStore = Depends(get_product_store)) -> Response:
    """Delete a product permanently."""
    if not store.delete(product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
