"""Core domain entities and the user repository contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class User:
    """A user account."""

    id: str = ""
    partner_id: str = ""
    total: int = 0
    user_name: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    status: str = ""


@dataclass
class ConsumerInfo:
    """Consumer information as reported by a consumer service."""

    id: str = ""
    is_active: bool = False
    type: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)


class UserRepository(ABC):
    """Storage of users."""

    @abstractmethod
    def get_by_username(self, user_name: str) -> User | None:
        """Return the user with this name; raise LookupError if there is none."""

    @abstractmethod
    def store(self, user: User) -> User:
        """Persist a user and return it."""