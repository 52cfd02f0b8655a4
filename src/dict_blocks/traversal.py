"""Whole-mapping traversal: each, map and reduce over key/value entries.

Entries are visited in the mapping's own iteration order, which for ``dict``
is insertion order. The mapping is only read. Exceptions raised by the
caller's block propagate unchanged and stop the traversal.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from . import config
from .errors import require_callable, require_mapping

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


def _check(mapping: object, block: object, *, where: str) -> None:
    if config.CHECK_MAPPINGS:
        require_mapping(mapping)
    if config.CHECK_CALLABLES:
        require_callable(block, where=where)


def each(mapping: Mapping[K, V], action: Callable[[K, V], Any]) -> None:
    """Call ``action(key, value)`` once per entry."""
    _check(mapping, action, where="action")
    for key, value in mapping.items():
        action(key, value)


def map_entries(mapping: Mapping[K, V], transform: Callable[[K, V], T]) -> list[T]:
    """Collect ``transform(key, value)`` for every entry into a new list."""
    _check(mapping, transform, where="transform")
    return [transform(key, value) for key, value in mapping.items()]


def reduce_entries(mapping: Mapping[K, V], initial: T, reducer: Callable[[T, K, V], T]) -> T:
    """Left fold over entries; ``initial`` is returned as-is for an empty mapping."""
    _check(mapping, reducer, where="reducer")
    current = initial
    for key, value in mapping.items():
        current = reducer(current, key, value)
    return current
