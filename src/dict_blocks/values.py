"""Closed value-kind tags for heterogeneous mapping values."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping, Sequence, Set
from dataclasses import dataclass
from enum import Enum

import jax
import jax.numpy as jnp

from .errors import GuardError


class ValueKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    BYTES = "bytes"
    ARRAY = "array"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    CALLABLE = "callable"
    OBJECT = "object"


@dataclass(frozen=True)
class ValueInfo:
    kind: ValueKind
    shape: tuple[int, ...]
    size: int


def is_array(value: object) -> bool:
    if isinstance(value, jax.Array):
        return True
    # Host arrays (NumPy and friends) expose the array protocol.
    return hasattr(value, "__array__") and hasattr(value, "shape") and hasattr(value, "dtype")


def kind_of(value: object) -> ValueKind:
    if value is None:
        return ValueKind.NULL
    # bool is a numbers.Number subclass; tag it first.
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, jax.Array):
        return ValueKind.ARRAY
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if is_array(value):
        return ValueKind.ARRAY
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ValueKind.BYTES
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (Sequence, Set)):
        return ValueKind.SEQUENCE
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.OBJECT


def shape_of(value: object) -> tuple[int, ...]:
    if is_array(value):
        return tuple(int(d) for d in jnp.shape(value))
    kind = kind_of(value)
    if kind in (ValueKind.STRING, ValueKind.BYTES, ValueKind.MAPPING, ValueKind.SEQUENCE):
        return (len(value),)  # type: ignore[arg-type]
    return ()


def value_info(value: object) -> ValueInfo:
    shape = shape_of(value)
    size = 1
    for dim in shape:
        size *= dim
    return ValueInfo(kind=kind_of(value), shape=shape, size=size)


def _coerce_one(kind: object) -> ValueKind:
    if isinstance(kind, ValueKind):
        return kind
    if isinstance(kind, str):
        try:
            return ValueKind(kind.lower())
        except ValueError:
            pass
    known = ", ".join(k.value for k in ValueKind)
    raise GuardError.for_value("of_kind", f"unknown value kind {kind!r}; expected one of {known}", kind)


def coerce_kinds(kinds: ValueKind | str | Iterable[ValueKind | str]) -> frozenset[ValueKind]:
    if isinstance(kinds, (ValueKind, str)):
        return frozenset((_coerce_one(kinds),))
    if not isinstance(kinds, Iterable):
        raise GuardError.for_value("of_kind", "expected a ValueKind or an iterable of kinds", kinds)
    coerced = frozenset(_coerce_one(kind) for kind in kinds)
    if not coerced:
        raise GuardError("of_kind", "at least one value kind is required")
    return coerced


def matches_kind(value: object, kinds: frozenset[ValueKind]) -> bool:
    return kind_of(value) in kinds
