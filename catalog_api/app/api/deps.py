"""
FastAPI dependencies giving route handlers access to the stores.

The stores live on ``app.state`` so that every application built by
``create_app`` has its own independent collections.
"""

from fastapi import Request

from ..services.product_service import ProductStore
from ..services.user_service import UserStore
from ..services.validation import Validator


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_product_store(request: Request) -> ProductStore:
    return request.app.state.product_store


def get_user_validator(request: Request) -> Validator:
    """Strategy that checks user bodies before they reach the store."""
    return request.app.state.user_validator
