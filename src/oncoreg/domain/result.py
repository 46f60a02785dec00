"""ValidationError and the two-case parse result.

INVARIANT: Every field parser returns ``Ok`` or ``Err``. Expected
validation failures (unknown code, malformed identifier, bad number)
are values, never raised exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ValidationError(BaseModel):
    """Failure record for a single raw field.

    Attributes:
        field: Record attribute that failed (e.g. ``"race"``, ``"mrn"``).
        raw_input: The raw value exactly as received.
        message: Human-readable diagnostic.
    """

    model_config = {"frozen": True}

    field: str
    raw_input: str
    message: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful parse carrying the domain value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed parse carrying the validation error."""

    error: ValidationError

    @property
    def ok(self) -> bool:
        return False


Result: TypeAlias = Ok[T] | Err
