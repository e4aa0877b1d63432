"""SQLite-backed user storage."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from userservice.domain import User, UserRepository

_TABLE = "user_tbl"

_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {_TABLE} (
    id TEXT PRIMARY KEY,
    partner_id TEXT NOT NULL DEFAULT '',
    total INTEGER NOT NULL DEFAULT 0,
    user_name TEXT NOT NULL DEFAULT '',
    first_name TEXT NOT NULL DEFAULT '',
    last_name TEXT NOT NULL DEFAULT '',
    email TEXT NOT NULL DEFAULT '',
    status TEXT NOT NULL DEFAULT '',
    created_at TEXT,
    updated_at TEXT
)
"""


@dataclass
class UserModel:
    """A row of the user table."""

    table_name: ClassVar[str] = _TABLE

    id: str = ""
    partner_id: str = ""
    total: int = 0
    user_name: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    status: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def before_create(self) -> None:
        """Assign a fresh identifier and the creation time."""
        self.id = str(uuid.uuid4())
        self.created_at = datetime.now()

    def before_update(self) -> None:
        """Record the update time."""
        self.updated_at = datetime.now()


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the user table if it does not exist."""
    with connection:
        connection.execute(_SCHEMA)


def open_database(path: str) -> sqlite3.Connection:
    """Open a database at path and make sure the schema exists."""
    connection = sqlite3.connect(path)
    create_schema(connection)
    return connection


def _timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


class SqlUserRepository(UserRepository):
    """Reads from the main database and writes to the replica."""

    def __init__(self, main: sqlite3.Connection, replica: sqlite3.Connection) -> None:
        self._main = main
        self._replica = replica

    def get_by_username(self, user_name: str) -> User:
        row = self._main.execute(
            f"SELECT id, partner_id, total, user_name, first_name, last_name, email, status "
            f"FROM {_TABLE} WHERE user_name = ? LIMIT 1",
            (user_name,),
        ).fetchone()
        if row is None:
            raise LookupError(f"user {user_name!r} not found")
        return User(*row)

    def store(self, user: User) -> User:
        model = UserModel(user_name=user.user_name)
        model.before_create()
        with self._replica:
            self._replica.execute(
                f"INSERT INTO {_TABLE} (id, partner_id, total, user_name, first_name, "
                f"last_name, email, status, created_at, updated_at) "
                f"VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    model.id,
                    model.partner_id,
                    model.total,
                    model.user_name,
                    model.first_name,
                    model.last_name,
                    model.email,
                    model.status,
                    _timestamp(model.created_at),
                    _timestamp(model.updated_at),
                ),
            )
        return user