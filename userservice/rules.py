"""Business rules for users."""

from __future__ import annotations

from userservice.domain import User
from userservice.errors import DomainError, ErrorKind

_ALLOWED_STATUSES = frozenset({"", "active", "inactive"})


class UserValidator:
    """Checks a user against the domain rules."""

    def validate(self, user: User | None) -> None:
        """Raise DomainError if the user breaks a rule."""
        if user is None:
            raise DomainError("VALIDATION_ERROR", "user cannot be nil", ErrorKind.VALIDATION)
        if not user.user_name:
            raise DomainError("VALIDATION_ERROR", "username is required", ErrorKind.VALIDATION)
        if user.status not in _ALLOWED_STATUSES:
            raise DomainError("VALIDATION_ERROR", "invalid status value", ErrorKind.VALIDATION)