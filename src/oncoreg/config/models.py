"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, oncoreg.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class RecordConfig(BaseModel):
    """[record] section — how record commands aggregate field results."""

    model_config = {"frozen": True}

    fail_fast: bool = False
    require_avatar_id: bool = False
