"""Application use cases for users."""

from __future__ import annotations

from userservice.domain import User, UserRepository
from userservice.errors import DomainError, ErrorKind
from userservice.rules import UserValidator


class UserUsecase:
    """Reads, creates and updates users through a repository."""

    def __init__(self, repo: UserRepository, validator: UserValidator) -> None:
        self._repo = repo
        self._validator = validator

    def get_user(self, user_name: str) -> User:
        """Return the user with this name."""
        if not user_name:
            raise DomainError("VALIDATION_ERROR", "username is required", ErrorKind.VALIDATION)
        try:
            user = self._repo.get_by_username(user_name)
        except Exception as exc:
            raise DomainError("NOT_FOUND", "user not found", ErrorKind.NOT_FOUND) from exc
        return user

    def create_user(self, user: User) -> User:
        """Store a new user."""
        try:
            return self._repo.store(user)
        except Exception as exc:
            raise DomainError(
                "INTERNAL_ERROR", "failed to create user", ErrorKind.INTERNAL
            ) from exc

    def update_user(self, user: User) -> User:
        """Validate and store an existing user."""
        self._check_exists(user)
        try:
            return self._repo.store(user)
        except Exception as exc:
            raise DomainError(
                "INTERNAL_ERROR", "failed to update user", ErrorKind.INTERNAL
            ) from exc

    def _check_exists(self, user: User) -> None:
        self._validator.validate(user)
        try:
            existing = self._repo.get_by_username(user.user_name)
        except Exception as exc:
            raise DomainError("NOT_FOUND", "user not found", ErrorKind.NOT_FOUND) from exc
        if existing is None:
            raise DomainError("NOT_FOUND", "user not found", ErrorKind.NOT_FOUND)