"""Guarded single-key lookup.

Every helper here is the same dispatch: look the key up, test the value
against zero or more guards, then run exactly one of ``action(value)`` or
``default()`` (or nothing when no default was given).
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any
import logging
import types
import typing

from . import config
from .errors import GuardError, require_callable, require_mapping
from .values import ValueKind, coerce_kinds, matches_kind

logger = logging.getLogger(__name__)

ClassInfo = type | types.UnionType | tuple[type, ...]


@dataclass(frozen=True)
class Guard:
    """Validated guard set for one lookup."""

    of_class: ClassInfo | None = None
    of_kind: frozenset[ValueKind] | None = None
    meeting_condition: Callable[[Any], object] | None = None

    @classmethod
    def build(
        cls,
        *,
        of_class: object = None,
        of_kind: object = None,
        meeting_condition: object = None,
    ) -> "Guard":
        if of_class is not None and not _is_class_info(of_class):
            raise GuardError.for_value("of_class", "expected a class or a tuple of classes", of_class)
        kinds = None if of_kind is None else coerce_kinds(of_kind)  # type: ignore[arg-type]
        if meeting_condition is not None and not callable(meeting_condition):
            raise GuardError.for_value("meeting_condition", "expected a callable predicate", meeting_condition)
        return cls(of_class=of_class, of_kind=kinds, meeting_condition=meeting_condition)  # type: ignore[arg-type]

    def rejection(self, value: object) -> str | None:
        """Name of the first guard ``value`` fails, or None when all pass."""
        if self.of_class is not None and not isinstance(value, self.of_class):
            return "class"
        if self.of_kind is not None and not matches_kind(value, self.of_kind):
            return "kind"
        if self.meeting_condition is not None and not self.meeting_condition(value):
            return "condition"
        return None


def _is_class_info(value: object) -> bool:
    if isinstance(value, type):
        return True
    if isinstance(value, tuple) and value:
        return all(_is_class_info(item) for item in value)
    if isinstance(value, types.UnionType):
        return True
    # typing.Union[int, str] is accepted by isinstance() as well
    if typing.get_origin(value) is typing.Union:
        return all(_is_class_info(arg) for arg in typing.get_args(value))
    return False


def with_value_for_key(
    mapping: Mapping[Any, Any],
    key: Hashable,
    action: Callable[[Any], Any],
    *,
    of_class: ClassInfo | None = None,
    of_kind: ValueKind | str | Iterable[ValueKind | str] | None = None,
    meeting_condition: Callable[[Any], object] | None = None,
    default: Callable[[], Any] | None = None,
) -> None:
    """Run ``action(value)`` when ``key`` is present and every given guard holds.

    Otherwise run ``default()`` if one was given, or do nothing. An absent key
    never reaches the predicate. Guards are checked class, then kind, then
    predicate, and stop at the first failure.

    Args:
        mapping: Any read-only mapping.
        key: Key to look up. A stored ``None`` counts as present.
        action: Called with the value on a match.
        of_class: Class or tuple of classes the value must be an instance of.
        of_kind: ``ValueKind`` (or several) the value must be tagged with.
        meeting_condition: Predicate the value must satisfy.
        default: Zero-argument fallback for absent or rejected values.

    Raises:
        GuardError: A guard argument is malformed. Raised before any block runs.
        BlockArgumentError: ``mapping`` is not a mapping, or a block is not callable.
    """
    if config.CHECK_MAPPINGS:
        require_mapping(mapping)
    if config.CHECK_CALLABLES:
        require_callable(action, where="action")
        if default is not None:
            require_callable(default, where="default")
    guard = Guard.build(of_class=of_class, of_kind=of_kind, meeting_condition=meeting_condition)

    if key in mapping:
        value = mapping[key]
        reason = guard.rejection(value)
        if reason is None:
            action(value)
            return
    else:
        reason = "absent"

    if default is None:
        logger.debug("lookup %r skipped (%s)", key, reason)
        return
    logger.debug("lookup %r fell back to default (%s)", key, reason)
    default()


def with_value_of_class(
    mapping: Mapping[Any, Any],
    key: Hashable,
    cls: ClassInfo,
    action: Callable[[Any], Any],
    default: Callable[[], Any] | None = None,
) -> None:
    with_value_for_key(mapping, key, action, of_class=cls, default=default)


def with_value_of_kind(
    mapping: Mapping[Any, Any],
    key: Hashable,
    kind: ValueKind | str | Iterable[ValueKind | str],
    action: Callable[[Any], Any],
    default: Callable[[], Any] | None = None,
) -> None:
    with_value_for_key(mapping, key, action, of_kind=kind, default=default)


def with_value_meeting_condition(
    mapping: Mapping[Any, Any],
    key: Hashable,
    condition: Callable[[Any], object],
    action: Callable[[Any], Any],
    default: Callable[[], Any] | None = None,
) -> None:
    with_value_for_key(mapping, key, action, meeting_condition=condition, default=default)
