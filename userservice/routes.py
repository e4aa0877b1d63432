"""Route table of the user API."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPMethod
from typing import Any, Callable, Mapping

from userservice.handlers import Response, UserHandler

BASE_URL = "/v1"

RouteHandler = Callable[[Mapping[str, str], Any], Response]


@dataclass(frozen=True)
class RouteConfig:
    """One endpoint: a path with ':name' parameters, a method and its handler."""

    path: str
    method: HTTPMethod
    handler: RouteHandler
    middleware: tuple[Callable[..., Any], ...] = ()


def user_routes(handler: UserHandler) -> list[RouteConfig]:
    """The user endpoints served by handler."""
    return [
        RouteConfig(
            path="users/:user",
            method=HTTPMethod.GET,
            handler=lambda params, payload: handler.get_user(params["user"]),
        ),
        RouteConfig(
            path="users",
            method=HTTPMethod.POST,
            handler=lambda params, payload: handler.create_user(payload),
        ),
        RouteConfig(
            path="users/:user",
            method=HTTPMethod.PUT,
            handler=lambda params, payload: handler.update_user(params["user"], payload),
        ),
    ]