"""Structured error types for argument misuse."""

from __future__ import annotations

from collections.abc import Mapping


class DictBlocksError(Exception):
    """Base class for structured dict-blocks errors."""


class GuardError(DictBlocksError, TypeError):
    """A lookup guard (`of_class`, `of_kind`, `meeting_condition`) is malformed."""

    def __init__(self, guard: str, message: str, found: str | None = None) -> None:
        self.guard = guard
        self.message = message
        self.found = found
        super().__init__(str(self))

    def __reduce__(self):
        return (type(self), (self.guard, self.message, self.found))

    @classmethod
    def for_value(cls, guard: str, message: str, value: object) -> "GuardError":
        return cls(guard=guard, message=message, found=type(value).__name__)

    def __str__(self) -> str:
        found = ""
        if self.found is not None:
            found = f"; found {self.found}"
        return f"{self.guard}: {self.message}{found}"


class BlockArgumentError(DictBlocksError, TypeError):
    """A continuation or the mapping argument has the wrong type."""


def require_callable(value: object, *, where: str) -> None:
    if not callable(value):
        raise BlockArgumentError(f"{where} must be callable, got {type(value).__name__}")


def require_mapping(value: object, *, where: str = "mapping") -> None:
    if not isinstance(value, Mapping):
        raise BlockArgumentError(f"{where} must be a Mapping, got {type(value).__name__}")
