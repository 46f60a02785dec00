"""Optional-field helper for raw record fields."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def map_if_present(func: Callable[[str], T], raw: str | None) -> T | None:
    """Apply *func* to *raw* unless it is None or empty.

    Absence is not a validation failure: an empty field yields None
    without calling *func*.
    """
    if not raw:
        return None
    return func(raw)
