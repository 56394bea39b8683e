"""
Top‑level router.

This router aggregates the resource routers under their path
prefixes.  When new resources are introduced, update this file to
include their routers.
"""

from fastapi import APIRouter

from .endpoints import info, products, users

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/productos", tags=["products"])
