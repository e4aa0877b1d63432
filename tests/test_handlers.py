import sqlite3
import uuid

import pytest

from userservice.errors import DomainError, ErrorKind
from userservice.facade import UserFacade
from userservice.handlers import UserHandler, bind_and_validate, handle_error
from userservice.repository import SqlUserRepository, create_schema
from userservice.rules import UserValidator
from userservice.usecase import UserUsecase


@pytest.fixture
def handler():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    repo = SqlUserRepository(connection, connection)
    yield UserHandler(UserFacade(UserUsecase(repo, UserValidator())))
    connection.close()


@pytest.mark.parametrize(
    "kind, status",
    [
        (ErrorKind.NOT_FOUND, 404),
        (ErrorKind.VALIDATION, 400),
        (ErrorKind.UNAUTHORIZED, 401),
        (ErrorKind.FORBIDDEN, 403),
    ],
)
def test_handle_error_maps_kinds(kind, status):
    err = DomainError("CODE", "user not found", kind)
    assert handle_error(err) == (status, {"error": "user not found"})


def test_handle_error_internal_hides_message():
    err = DomainError("INTERNAL_ERROR", "failed to create user", ErrorKind.INTERNAL)
    assert handle_error(err) == (500, {"error": "Internal server error"})


def test_handle_error_unknown_exception():
    assert handle_error(RuntimeError("boom")) == (500, {"error": "Internal server error"})


def test_bind_and_validate_returns_request():
    req = bind_and_validate({"user_name": "alice", "email": "alice@example.com"})
    assert req.user_name == "alice"
    assert req.email == "alice@example.com"


def test_bind_and_validate_rejects_missing_name():
    with pytest.raises(ValueError):
        bind_and_validate({})


def test_create_then_get(handler):
    status, body = handler.create_user({"user_name": "alice"})
    assert status == 201
    assert body["user_name"] == "alice"

    status, body = handler.get_user("alice")
    assert status == 200
    assert body["user_name"] == "alice"
    assert str(uuid.UUID(body["id"])) == body["id"]


def test_create_bad_payload(handler):
    status, body = handler.create_user({"first_name": "Alice"})
    assert status == 400
    assert "UserName" in body["error"]


def test_get_missing(handler):
    assert handler.get_user("nobody") == (404, {"error": "user not found"})


def test_get_empty_name(handler):
    assert handler.get_user("") == (400, {"error": "username is required"})


def test_update_missing(handler):
    status, body = handler.update_user("ghost", {"user_name": "ghost"})
    assert (status, body) == (404, {"error": "user not found"})


def test_update_existing_uses_path_name(handler):
    handler.create_user({"user_name": "bob"})
    status, body = handler.update_user("bob", {"user_name": "other", "status": "active"})
    assert status == 200
    assert body["user_name"] == "bob"
    assert body["status"] == "active"


def test_update_invalid_status(handler):
    handler.create_user({"user_name": "carol"})
    status, body = handler.update_user("carol", {"user_name": "carol", "status": "banned"})
    assert (status, body) == (400, {"error": "invalid status value"})