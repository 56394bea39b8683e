"""
Business logic for users.

``UserStore`` keeps users in memory for the lifetime of the process.
Identifiers are integers handed out by the store in strictly
increasing order starting at 1; they are stored as numbers and only
rendered as strings in the creation response.  The store performs no
validation of its own; payloads are checked by the configured
strategy before they arrive here.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from ..schemas.user import UserCreated, UserRead, UserSummary

logger = logging.getLogger(__name__)


@dataclass
class UserRecord:
    id: int
    name: Any
    age: Any
    email: Any


_RADIX_PREFIXES = ("0x", "0b", "0o")


def coerce_user_id(key: Union[int, float, str]) -> Optional[float]:
    """Return the numeric value of a lookup key, or ``None``.

    Path parameters arrive as strings, so ``"2"``, ``" 2 "``, ``"2.0"``
    and the prefixed forms ``"0x2"``, ``"0b10"`` and ``"0o2"`` all
    address user 2.  Keys that are not numbers never match a stored
    user.
    """
    if isinstance(key, bool):
        return None
    if isinstance(key, (int, float)):
        return key
    try:
        text = key.strip()
    except AttributeError:
        return None
    if text[:2].lower() in _RADIX_PREFIXES:
        try:
            return int(text, 0)
        except ValueError:
            return None
    try:
        return float(text)
    except ValueError:
        return None


class UserStore:
    """In‑memory user collection with sequential identifiers.

    Users are never deleted.  The identifier counter advances on every
    ``create`` call and is never rolled back, so an identifier, once
    handed out, is never reused.
    """

    def __init__(self) -> None:
        self._users: List[UserRecord] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, key: Union[int, float, str]) -> bool:
        return self._find(key) is not None

    def _find(self, key: Union[int, float, str]) -> Optional[UserRecord]:
        user_id = coerce_user_id(key)
        if user_id is None:
            return None
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def create(self, name: Any, age: Any, email: Any) -> UserCreated:
        """Store a new user and return the creation view."""
        with self._lock:
            user_id = self._next_id
            self._next_id += 1
            user = UserRecord(id=user_id, name=name, age=age, email=email)
            self._users.append(user)
        logger.info("Created user %s", user_id)
        return UserCreated(id=str(user.id), name=user.name, age=user.age, email=user.email)

    def get_by_id(self, key: Union[int, float, str]) -> Optional[UserSummary]:
        """Return ``id`` and ``name`` of a user, or ``None`` if absent."""
        user = self._find(key)
        if user is None:
            logger.debug("User %s not found", key)
            return None
        return UserSummary(id=user.id, name=user.name)

    def replace(self, key: Union[int, float, str], name: Any, age: Any, email: Any) -> Optional[UserRead]:
        """Overwrite all mutable fields of a user.

        Returns the full updated view, or ``None`` if no user has the
        given identifier.
        """
        with self._lock:
            user = self._find(key)
            if user is None:
                logger.debug("User %s not found", key)
                return None
            user.name = name
            user.age = age
            user.email = email
        logger.info("Replaced user %s", user.id)
        return UserRead(id=user.id, name=user.name, age=user.age, email=user.email)

    def list(self) -> List[UserRead]:
        """Return every user in creation order."""
        return [UserRead(id=u.id, name=u.name, age=u.age, email=u.email) for u in self._users]
