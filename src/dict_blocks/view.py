"""Read-only mapping wrapper exposing the traversal and lookup helpers as methods."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from typing import Any, TypeVar

from .errors import require_mapping
from .lookup import (
    ClassInfo,
    with_value_for_key,
    with_value_meeting_condition,
    with_value_of_class,
    with_value_of_kind,
)
from .traversal import each, map_entries, reduce_entries
from .values import ValueKind

T = TypeVar("T")


class BlockMapping(Mapping):
    """Immutable mapping whose traversal order is its insertion order."""

    __slots__ = ("_data", "_hash")

    def __init__(self, mapping: Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None = None, /, **kwargs: Any) -> None:
        data: dict[Any, Any] = {} if mapping is None else dict(mapping)
        data.update(kwargs)
        self._data = data
        self._hash: int | None = None

    @classmethod
    def wrap(cls, mapping: Mapping[Any, Any]) -> "BlockMapping":
        if isinstance(mapping, cls):
            return mapping
        require_mapping(mapping)
        return cls(mapping)

    def __getitem__(self, key: Hashable) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def each(self, action: Callable[[Any, Any], Any]) -> None:
        each(self, action)

    def map(self, transform: Callable[[Any, Any], T]) -> list[T]:
        return map_entries(self, transform)

    def reduce(self, initial: T, reducer: Callable[[T, Any, Any], T]) -> T:
        return reduce_entries(self, initial, reducer)

    def with_value_for_key(
        self,
        key: Hashable,
        action: Callable[[Any], Any],
        *,
        of_class: ClassInfo | None = None,
        of_kind: ValueKind | str | Iterable[ValueKind | str] | None = None,
        meeting_condition: Callable[[Any], object] | None = None,
        default: Callable[[], Any] | None = None,
    ) -> None:
        with_value_for_key(
            self,
            key,
            action,
            of_class=of_class,
            of_kind=of_kind,
            meeting_condition=meeting_condition,
            default=default,
        )

    def with_value_of_class(
        self,
        key: Hashable,
        cls: ClassInfo,
        action: Callable[[Any], Any],
        default: Callable[[], Any] | None = None,
    ) -> None:
        with_value_of_class(self, key, cls, action, default)

    def with_value_of_kind(
        self,
        key: Hashable,
        kind: ValueKind | str | Iterable[ValueKind | str],
        action: Callable[[Any], Any],
        default: Callable[[], Any] | None = None,
    ) -> None:
        with_value_of_kind(self, key, kind, action, default)

    def with_value_meeting_condition(
        self,
        key: Hashable,
        condition: Callable[[Any], object],
        action: Callable[[Any], Any],
        default: Callable[[], Any] | None = None,
    ) -> None:
        with_value_meeting_condition(self, key, condition, action, default)
