"""ServiceResult and ServiceError — the envelope returned to the CLI.

INVARIANT: All service-layer methods return ServiceResult. Field-level
``ValidationError`` values are carried inside ``ServiceError.detail``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from oncoreg.domain.result import ValidationError

# Error codes
INVALID_FIELD = "INVALID_FIELD"
UNKNOWN_FIELD = "UNKNOWN_FIELD"
UNKNOWN_CATEGORY = "UNKNOWN_CATEGORY"
INVALID_RECORD = "INVALID_RECORD"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parse_field"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None


def field_error_detail(error: ValidationError) -> dict[str, Any]:
    """Serialize a field-level validation error for ``ServiceError.detail``."""
    return error.model_dump()
