"""Command: print a controlled-vocabulary code table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oncoreg.commands._base import OncCommand
from oncoreg.domain.codes import CODE_TABLES

if TYPE_CHECKING:
    from oncoreg.commands._context import AppContext


@click.command(
    cls=OncCommand,
    examples="""\
  oncoreg codes race
  oncoreg --quiet codes ethnicity
  oncoreg --json codes sex""",
)
@click.argument("category", type=click.Choice(sorted(CODE_TABLES)))
@click.pass_obj
def codes(app: AppContext, category: str) -> None:
    """List every code and label in CATEGORY."""
    app.emit(app.fields.list_codes(category))
