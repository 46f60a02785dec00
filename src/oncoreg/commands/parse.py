"""Command: validate a single raw field value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oncoreg.commands._base import OncCommand
from oncoreg.services.fields import FIELD_PARSERS

if TYPE_CHECKING:
    from oncoreg.commands._context import AppContext


@click.command(
    cls=OncCommand,
    examples="""\
  oncoreg parse race 02
  oncoreg parse tccId P123
  oncoreg parse mrn Withdrawn
  oncoreg --json parse vitalStatus D""",
)
@click.argument("field", type=click.Choice(sorted(FIELD_PARSERS)))
@click.argument("value")
@click.pass_obj
def parse(app: AppContext, field: str, value: str) -> None:
    """Validate VALUE as the record field FIELD."""
    app.emit(app.fields.parse_field(field, value))
