"""Domain errors raised by the user registry.

Each error carries an explicit :class:`ErrorKind` so the HTTP layer can map it
to a status code without inspecting exception types.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    not_found = "not_found"
    duplicate_email = "duplicate_email"


class RegistryError(Exception):
    """Base class for registry failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserNotFoundError(RegistryError):
    kind = ErrorKind.not_found

    def __init__(self, user_id: int):
        super().__init__(f"User not found with ID: {user_id}")
        self.user_id = user_id


class DuplicateEmailError(RegistryError):
    kind = ErrorKind.duplicate_email

    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")
        self.email = email
