"""Registry and avatar identifier grammars.

Both identifiers share one grammar shape: a fixed leading letter followed
by zero or more ASCII decimal digits, covering the entire input.

- Registry (TCC) ID: ``P`` + digits, record field ``tccId``.
- Avatar ID: ``A`` + digits, record field ``avatarId``.

A bare prefix (``"P"``) is accepted: the digit run may be empty.

INVARIANT: An identifier instance always wraps a string matching its
grammar. The wrapped string is kept verbatim.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Self

from oncoreg.domain.result import Err, Ok, Result, ValidationError

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


def _describe(ch: str | None) -> str:
    return "end of input" if ch is None else repr(ch)


def scan_prefixed_digits(text: str, prefix: str) -> str | None:
    """Match *text* against ``<prefix><digit>*``.

    Returns None on a full match, otherwise a diagnostic naming the
    1-based column where matching stopped, what was expected there and
    what was found.
    """
    first = text[0] if text else None
    if first != prefix:
        return f"Error at column 1: expected '{prefix}', found {_describe(first)}"
    for index, ch in enumerate(text[1:], start=2):
        if ch not in _DIGITS:
            return (
                f"Error at column {index}: expected a decimal digit or end of input, "
                f"found {_describe(ch)}"
            )
    return None


@dataclass(frozen=True)
class PrefixedId:
    """Base for identifiers of the form ``<prefix><digits>``."""

    prefix: ClassVar[str]
    field: ClassVar[str]

    value: str

    def __post_init__(self) -> None:
        problem = scan_prefixed_digits(self.value, self.prefix)
        if problem is not None:
            msg = f"Invalid {type(self).__name__} {self.value!r}: {problem}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str) -> Result[Self]:
        """Validate *raw* and wrap it, or return a ValidationError."""
        problem = scan_prefixed_digits(raw, cls.prefix)
        if problem is not None:
            logger.debug("Rejected %s %r: %s", cls.field, raw, problem)
            return Err(ValidationError(field=cls.field, raw_input=raw, message=problem))
        return Ok(cls(raw))


@dataclass(frozen=True)
class RegistryId(PrefixedId):
    """Tumor-registry patient identifier (``P`` followed by digits)."""

    prefix: ClassVar[str] = "P"
    field: ClassVar[str] = "tccId"


@dataclass(frozen=True)
class AvatarId(PrefixedId):
    """Avatar cross-reference identifier (``A`` followed by digits)."""

    prefix: ClassVar[str] = "A"
    field: ClassVar[str] = "avatarId"
