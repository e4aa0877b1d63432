"""HTTP-facing user handlers: request binding, error mapping and responses."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from userservice.dto import UserRequest, UserResponse
from userservice.errors import DomainError, ErrorKind
from userservice.facade import UserFacade

log = logging.getLogger(__name__)

Response = tuple[int, Any]

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    ErrorKind.FORBIDDEN: HTTPStatus.FORBIDDEN,
}

_INTERNAL_ERROR: Response = (
    int(HTTPStatus.INTERNAL_SERVER_ERROR),
    {"error": "Internal server error"},
)


def handle_error(err: BaseException) -> Response:
    """Map an error to a status code and a JSON body."""
    if isinstance(err, DomainError):
        status = _STATUS_BY_KIND.get(err.kind)
        if status is not None:
            return int(status), {"error": str(err)}
    return _INTERNAL_ERROR[0], dict(_INTERNAL_ERROR[1])


def bind_and_validate(data: Any) -> UserRequest:
    """Turn a decoded request body into a UserRequest; raise ValueError if invalid."""
    return UserRequest.from_dict(data)


def _body(response: UserResponse | None) -> Any:
    return response.to_dict() if response is not None else None


class UserHandler:
    """Serves the user endpoints as (status, body) pairs."""

    def __init__(self, facade: UserFacade) -> None:
        self._facade = facade

    def get_user(self, user_name: str) -> Response:
        """Look up a user by name."""
        log.info("get user %s", user_name)
        try:
            user = self._facade.get_user(user_name)
        except Exception as exc:
            return handle_error(exc)
        return int(HTTPStatus.OK), _body(user)

    def create_user(self, payload: Any) -> Response:
        """Create a user from a request body."""
        try:
            req = bind_and_validate(payload)
        except ValueError as exc:
            return int(HTTPStatus.BAD_REQUEST), {"error": str(exc)}
        try:
            created = self._facade.create_user(req)
        except Exception as exc:
            return handle_error(exc)
        return int(HTTPStatus.CREATED), _body(created)

    def update_user(self, user_name: str, payload: Any) -> Response:
        """Update the named user from a request body."""
        try:
            req = bind_and_validate(payload)
        except ValueError as exc:
            return int(HTTPStatus.BAD_REQUEST), {"error": str(exc)}
        try:
            updated = self._facade.update_user(user_name, req)
        except Exception as exc:
            return handle_error(exc)
        return int(HTTPStatus.OK), _body(updated)