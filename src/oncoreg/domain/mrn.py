"""Medical record number (MRN) parsing.

An MRN is either a decimal integer or the sentinel ``"Withdrawn"``,
meaning the number was intentionally removed from the source record.

Accepted numeral grammar: an optional ``+`` or ``-`` sign followed by one
or more ASCII digits, nothing else (no whitespace, no separators). The
value must fit a signed 32-bit integer.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TypeAlias

from oncoreg.domain.result import Err, Ok, Result, ValidationError

logger = logging.getLogger(__name__)

WITHDRAWN_SENTINEL = "Withdrawn"
MRN_FIELD = "mrn"

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_NUMERAL = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Provided:
    """An MRN supplied as a number."""

    value: int


@dataclass(frozen=True)
class Withdrawn:
    """The MRN was withdrawn from the source record."""


RecordNumber: TypeAlias = Provided | Withdrawn


def _parse_int(raw: str) -> int | str:
    """Return the integer value of *raw*, or a diagnostic string."""
    if _NUMERAL.fullmatch(raw) is None:
        return "Input string was not in a correct format."
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        return f"Value was either too large or too small for a 32-bit integer: {raw}"
    return value


def parse(raw: str) -> Result[RecordNumber]:
    """Parse an MRN field: a number, or exactly ``"Withdrawn"``."""
    parsed = _parse_int(raw)
    if isinstance(parsed, int):
        return Ok(Provided(parsed))
    if raw == WITHDRAWN_SENTINEL:
        return Ok(Withdrawn())
    logger.debug("Rejected mrn %r: %s", raw, parsed)
    return Err(ValidationError(field=MRN_FIELD, raw_input=raw, message=parsed))
