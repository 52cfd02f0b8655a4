"""Environment-driven flags, read once at import."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final
import os


CHECK_CALLABLES: Final[bool] = os.environ.get("DICT_BLOCKS_DISABLE_CALLABLE_CHECKS", "0") != "1"
CHECK_MAPPINGS: Final[bool] = os.environ.get("DICT_BLOCKS_DISABLE_MAPPING_CHECKS", "0") != "1"


@dataclass(frozen=True)
class Settings:
    check_callables: bool
    check_mappings: bool


def settings() -> Settings:
    return Settings(check_callables=CHECK_CALLABLES, check_mappings=CHECK_MAPPINGS)
