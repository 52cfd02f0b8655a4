"""dict-blocks public API."""

import logging

from .errors import BlockArgumentError, DictBlocksError, GuardError
from .lookup import (
    with_value_for_key,
    with_value_meeting_condition,
    with_value_of_class,
    with_value_of_kind,
)
from .traversal import each, map_entries, reduce_entries
from .values import ValueInfo, ValueKind, kind_of, value_info
from .view import BlockMapping

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "each",
    "map_entries",
    "reduce_entries",
    "with_value_for_key",
    "with_value_of_class",
    "with_value_of_kind",
    "with_value_meeting_condition",
    "BlockMapping",
    "ValueKind",
    "ValueInfo",
    "kind_of",
    "value_info",
    "DictBlocksError",
    "GuardError",
    "BlockArgumentError",
]
