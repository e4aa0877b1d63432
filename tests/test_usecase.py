import pytest

from userservice.domain import User, UserRepository
from userservice.errors import DomainError, ErrorKind
from userservice.rules import UserValidator
from userservice.usecase import UserUsecase


class MemoryRepo(UserRepository):
    def __init__(self, fail_store=False):
        self.rows = {}
        self.fail_store = fail_store

    def get_by_username(self, user_name):
        if user_name not in self.rows:
            raise LookupError(user_name)
        return self.rows[user_name]

    def store(self, user):
        if self.fail_store:
            raise RuntimeError("disk full")
        self.rows[user.user_name] = user
        return user


def _usecase(repo):
    return UserUsecase(repo, UserValidator())


def test_get_user_requires_name():
    with pytest.raises(DomainError) as info:
        _usecase(MemoryRepo()).get_user("")
    assert info.value.kind is ErrorKind.VALIDATION
    assert str(info.value) == "username is required"


def test_get_user_missing():
    with pytest.raises(DomainError) as info:
        _usecase(MemoryRepo()).get_user("ghost")
    assert info.value.kind is ErrorKind.NOT_FOUND
    assert str(info.value) == "user not found"


def test_get_user_found():
    repo = MemoryRepo()
    user = User(id="1", user_name="alice")
    repo.rows["alice"] = user
    assert _usecase(repo).get_user("alice") == user


def test_create_user_stores():
    repo = MemoryRepo()
    user = User(user_name="bob")
    assert _usecase(repo).create_user(user) is user
    assert repo.rows == {"bob": user}


def test_create_user_skips_validation():
    repo = MemoryRepo()
    created = _usecase(repo).create_user(User(user_name="c", status="weird"))
    assert created.status == "weird"


def test_create_user_store_failure():
    with pytest.raises(DomainError) as info:
        _usecase(MemoryRepo(fail_store=True)).create_user(User(user_name="bob"))
    assert info.value.kind is ErrorKind.INTERNAL
    assert str(info.value) == "failed to create user"


def test_update_user_validates():
    repo = MemoryRepo()
    repo.rows["bob"] = User(user_name="bob")
    with pytest.raises(DomainError) as info:
        _usecase(repo).update_user(User(user_name="bob", status="bad"))
    assert str(info.value) == "invalid status value"


def test_update_user_missing():
    with pytest.raises(DomainError) as info:
        _usecase(MemoryRepo()).update_user(User(user_name="bob"))
    assert info.value.kind is ErrorKind.NOT_FOUND


def test_update_user_store_failure():
    repo = MemoryRepo(fail_store=True)
    repo.rows["bob"] = User(user_name="bob")
    with pytest.raises(DomainError) as info:
        _usecase(repo).update_user(User(user_name="bob"))
    assert str(info.value) == "failed to update user"


def test_update_user_success():
    repo = MemoryRepo()
    repo.rows["bob"] = User(user_name="bob")
    updated = User(user_name="bob", first_name="Bob", status="active")
    assert _usecase(repo).update_user(updated) is updated
    assert repo.rows["bob"].first_name == "Bob"