"""Subcommand modules for oncoreg.

Provides register_commands() which uses deferred imports to keep
``oncoreg --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from oncoreg.commands.codes import codes
    from oncoreg.commands.parse import parse
    from oncoreg.commands.record import identifiers, patient

    cli.add_command(parse)
    cli.add_command(codes)
    cli.add_command(identifiers)
    cli.add_command(patient)
