"""
Pydantic models for user data.

``UserPayload`` describes an acceptable create/replace body and is used
by the ``schema`` validation strategy.  The response models mirror the
three views the user routes return: the creation view (``id`` rendered
as a string), the reduced read view (``id`` and ``name`` only) and the
full view returned after a replace.

The store keeps whatever the active validation strategy let through,
so response fields other than ``id`` are left untyped; with
``USER_VALIDATION=none`` they can hold any JSON value.
"""

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator


class UserPayload(BaseModel):
    """Body accepted by ``POST /users`` and ``POST /users/{id}``."""

    name: str = Field(..., min_length=1, examples=["Ann"])
    age: Union[int, float] = Field(..., examples=[30])
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$", examples=["ann@example.com"])

    @field_validator("age")
    @classmethod
    def validate_age(cls, v):
        if v < 0:
            raise ValueError("age must be greater than or equal to 0")
        return v


class UserCreated(BaseModel):
    """Creation response.  The identifier is sent as its decimal string."""

    id: str
    name: Any = None
    age: Any = None
    email: Any = None


class UserSummary(BaseModel):
    """Read view: only the identifier and the name."""

    id: int
    name: Any = None


class UserRead(BaseModel):
    """Full view returned after a replace."""

    id: int
    name: Any = None
    age: Any = None
    email: Any = None
