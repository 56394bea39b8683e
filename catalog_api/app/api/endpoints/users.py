"""
User endpoints.

Create, read and replace users.  Bodies go through the configured user
validation strategy first; with the ``schema`` strategy a bad body is
rejected with 400 before the store is touched, with ``none`` the store
receives whatever was sent.  Note that replace is exposed as ``POST``
on the item path.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, status

from ...core.errors import PayloadRejected
from ...schemas.user import UserCreated, UserRead, UserSummary
from ...services.user_service import UserStore
from ...services.validation import Validator
from ..deps import get_user_store, get_user_validator

router = APIRouter()

USER_NOT_FOUND = "User not found"


def _checked(payload: Dict[str, Any], validator: Validator) -> Dict[str, Any]:
    result = validator.validate(payload)
    if not result.valid:
        raise PayloadRejected(result.errors)
    return result.data


@router.post("", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Dict[str, Any] = Body(...),
    store: UserStore = Depends(get_user_store),
    validator: Validator = Depends(get_user_validator),
) -> UserCreated:
    """Create a user and return it with its new identifier as a string."""
    data = _checked(payload, validator)
    return store.create(data.get("name"), data.get("age"), data.get("email"))


@router.get("", response_model=List[UserRead])
async def list_users(store: UserStore = Depends(get_user_store)) -> List[UserRead]:
    """Return every user in creation order."""
    return store.list()


@router.get("/{user_id}", response_model=UserSummary)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> UserSummary:
    """Return the identifier and name of a user.

    The path parameter is compared numerically, so ``/users/01`` finds
    user 1.  Other fields are not part of this view.
    """
    user = store.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.post("/{user_id}", response_model=UserRead)
async def replace_user(
    user_id: str,
    payload: Dict[str, Any] = Body(...),
    store: UserStore = Depends(get_user_store),
    validator: Validator = Depends(get_user_validator),
) -> UserRead:
    """Overwrite ``name``, ``age`` and ``email`` of an existing user.

    An unknown identifier yields 404 even when the body is invalid.
    """
    if user_id not in store:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    data = _checked(payload, validator)
    user = store.replace(user_id, data.get("name"), data.get("age"), data.get("email"))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user
