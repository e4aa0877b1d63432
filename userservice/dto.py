"""Request and response shapes of the HTTP API and their mapping to the domain."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Any, Mapping

from userservice.domain import User

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class UserRequest:
    """Body of a create or update request."""

    user_name: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    status: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "UserRequest":
        """Build a request from decoded JSON; raise ValueError if it is invalid."""
        if not isinstance(data, Mapping):
            raise ValueError("request body must be a JSON object")
        values: dict[str, str] = {}
        for item in fields(cls):
            value = data.get(item.name, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"field {item.name!r} must be a string")
            values[item.name] = value
        if not values["user_name"]:
            raise ValueError(
                "Key: 'UserRequest.UserName' Error:Field validation for "
                "'UserName' failed on the 'required' tag"
            )
        if values["email"] and not _EMAIL.match(values["email"]):
            raise ValueError(
                "Key: 'UserRequest.Email' Error:Field validation for "
                "'Email' failed on the 'email' tag"
            )
        return cls(**values)


@dataclass
class UserResponse:
    """A user as returned by the API."""

    id: str = ""
    partner_id: str = ""
    total: int = 0
    user_name: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    status: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON form; optional fields are left out when empty."""
        result: dict[str, Any] = {"id": self.id}
        if self.partner_id:
            result["partner_id"] = self.partner_id
        if self.total:
            result["total"] = self.total
        result["user_name"] = self.user_name
        for name in ("first_name", "last_name", "email", "status"):
            value = getattr(self, name)
            if value:
                result[name] = value
        return result


def to_user_response(user: User | None) -> UserResponse | None:
    """Map a domain user to a response."""
    if user is None:
        return None
    return UserResponse(
        id=user.id,
        partner_id=user.partner_id,
        total=user.total,
        user_name=user.user_name,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        status=user.status,
    )


def to_user_domain(req: UserRequest | None) -> User | None:
    """Map a request to a domain user."""
    if req is None:
        return None
    return User(
        user_name=req.user_name,
        first_name=req.first_name,
        last_name=req.last_name,
        email=req.email,
        status=req.status,
    )