"""Simplified entry point to user operations in API terms."""

from __future__ import annotations

from userservice.dto import UserRequest, UserResponse, to_user_domain, to_user_response
from userservice.usecase import UserUsecase


class UserFacade:
    """Translates between API shapes and the user use cases."""

    def __init__(self, usecase: UserUsecase) -> None:
        self._usecase = usecase

    def get_user(self, user_name: str) -> UserResponse | None:
        """Return the user with this name."""
        return to_user_response(self._usecase.get_user(user_name))

    def create_user(self, req: UserRequest) -> UserResponse | None:
        """Create a user from a request."""
        return to_user_response(self._usecase.create_user(to_user_domain(req)))

    def update_user(self, user_name: str, req: UserRequest) -> UserResponse | None:
        """Update the named user; the name from the path wins over the body."""
        user = to_user_domain(req)
        user.user_name = user_name
        return to_user_response(self._usecase.update_user(user))