import pytest

from userservice.domain import ConsumerInfo, User, UserRepository


def test_user_defaults_are_empty():
    user = User(user_name="alice")
    assert user.user_name == "alice"
    assert user.id == ""
    assert user.total == 0
    assert user.status == ""


def test_consumer_metadata_not_shared():
    first = ConsumerInfo(id="a")
    second = ConsumerInfo(id="b")
    first.metadata["k"] = 1
    assert second.metadata == {}
    assert first.metadata == {"k": 1}


def test_repository_is_abstract():
    with pytest.raises(TypeError):
        UserRepository()


def test_complete_repository_works():
    class Memory(UserRepository):
        def __init__(self):
            self.rows = {}

        def get_by_username(self, user_name):
            return self.rows[user_name]

        def store(self, user):
            self.rows[user.user_name] = user
            return user

    repo = Memory()
    user = User(user_name="bob")
    assert repo.store(user) is user
    assert repo.get_by_username("bob") == user