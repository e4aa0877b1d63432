"""Domain error kinds and the error raised by the service layers."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Broad category of a domain failure; the value is its default text."""

    NOT_FOUND = "resource not found"
    VALIDATION = "validation error"
    INTERNAL = "internal server error"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


class DomainError(Exception):
    """A failure in the domain with a machine code, a message and a kind."""

    def __init__(self, code: str, message: str, kind: ErrorKind) -> None:
        self.code = code
        self.message = message
        self.kind = kind
        super().__init__(str(self))

    def __str__(self) -> str:
        return self.message or self.kind.value

    def __repr__(self) -> str:
        return (
            f"DomainError(code={self.code!r}, message={self.message!r}, "
            f"kind={self.kind.name})"
        )