from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from user_registry.errors import DuplicateEmailError, UserNotFoundError

logger = logging.getLogger("user_registry.store")


@dataclass(frozen=True)
class UserRecord:
    id: Optional[int]
    first_name: str
    last_name: str
    email: str
    age: int
    phone_number: Optional[str] = None


class IdSequence:
    """Monotonic id source. Never reset, never reuses a value."""

    def __init__(self, start: int = 1):
        self._lock = threading.Lock()
        self._next = start

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value


class InMemoryUserRegistry:
    """Thread-safe in-memory user registry.

    Storage semantics:
    - Stored only in the API process memory (cleared on restart).
    - Not shared across multiple API instances.
    - Records are immutable; every mutation swaps a whole record under the lock,
      so readers see either the old or the new version, never a mix.

    Emails are unique (exact, case-sensitive match) and backed by an
    email -> id index. The uniqueness check and the write happen inside one
    locked region, so two concurrent creates with the same email cannot both
    succeed.

    Ids come from a separate :class:`IdSequence` with its own lock.
    """

    def __init__(self, *, ids: Optional[IdSequence] = None):
        self._lock = threading.Lock()
        self._ids = ids or IdSequence()
        self._users: Dict[int, UserRecord] = {}
        self._by_email: Dict[str, int] = {}

    def list(self) -> List[UserRecord]:
        logger.debug("Retrieving all users")
        with self._lock:
            return list(self._users.values())

    def get(self, user_id: int) -> UserRecord:
        logger.debug("Retrieving user with ID: %s", user_id)
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            logger.warning("User not found with ID: %s", user_id)
            raise UserNotFoundError(user_id)
        return user

    def create(self, user: UserRecord) -> UserRecord:
        logger.debug("Creating new user: %s", user.email)
        with self._lock:
            if user.email in self._by_email:
                logger.warning("User with email %s already exists", user.email)
                raise DuplicateEmailError(user.email)
            stored = replace(user, id=self._ids.next_id())
            self._users[stored.id] = stored
            self._by_email[stored.email] = stored.id
        logger.info("Created user with ID: %s", stored.id)
        return stored

    def update(self, user_id: int, user: UserRecord) -> UserRecord:
        logger.debug("Updating user with ID: %s", user_id)
        with self._lock:
            existing = self._users.get(user_id)
            if existing is None:
                logger.warning("User not found with ID: %s", user_id)
                raise UserNotFoundError(user_id)

            if existing.email != user.email:
                owner = self._by_email.get(user.email)
                if owner is not None and owner != user_id:
                    logger.warning("User with email %s already exists", user.email)
                    raise DuplicateEmailError(user.email)
                del self._by_email[existing.email]

            stored = replace(user, id=user_id)
            self._users[user_id] = stored
            self._by_email[stored.email] = user_id
        logger.info("Updated user with ID: %s", user_id)
        return stored

    def delete(self, user_id: int) -> None:
        logger.debug("Deleting user with ID: %s", user_id)
        with self._lock:
            existing = self._users.pop(user_id, None)
            if existing is None:
                logger.warning("User not found with ID: %s", user_id)
                raise UserNotFoundError(user_id)
            del self._by_email[existing.email]
        logger.info("Deleted user with ID: %s", user_id)

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def exists(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._users
