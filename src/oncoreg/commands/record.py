"""Commands: assemble identifier and patient records from raw fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oncoreg.commands._base import OncCommand

if TYPE_CHECKING:
    from oncoreg.commands._context import AppContext


@click.command(
    cls=OncCommand,
    examples="""\
  oncoreg identifiers --tcc-id P1001 --mrn 4521
  oncoreg identifiers --tcc-id P1001 --mrn Withdrawn --avatar-id A77""",
)
@click.option("--tcc-id", required=True, help="Registry (TCC) ID, e.g. P1001.")
@click.option("--mrn", "mrn_raw", required=True, help="Medical record number or 'Withdrawn'.")
@click.option("--avatar-id", default="", help="Avatar ID, e.g. A77 (optional).")
@click.pass_obj
def identifiers(app: AppContext, tcc_id: str, mrn_raw: str, avatar_id: str) -> None:
    """Validate the identifier fields of a record."""
    app.emit(app.fields.parse_identifiers(tcc_id=tcc_id, mrn_raw=mrn_raw, avatar_id=avatar_id))


@click.command(
    cls=OncCommand,
    examples="""\
  oncoreg patient --tcc-id P1001 --mrn 4521 --sex 02 --race 01 \\
      --birth-date 1961-04-02 --vital-status A
  oncoreg --json patient --tcc-id P1001 --mrn 4521 --sex 02 --race 01 \\
      --birth-date 1961-04-02 --vital-status D --ethnicity 00""",
)
@click.option("--tcc-id", required=True, help="Registry (TCC) ID.")
@click.option("--mrn", "mrn_raw", required=True, help="Medical record number or 'Withdrawn'.")
@click.option("--avatar-id", default="", help="Avatar ID (optional).")
@click.option("--sex", required=True, help="Sex code.")
@click.option("--race", required=True, help="Race code.")
@click.option("--ethnicity", default="", help="Ethnicity code (optional).")
@click.option("--birth-date", required=True, help="Birth date as in the source feed.")
@click.option("--vital-status", required=True, help="Vital status code (A or D).")
@click.pass_obj
def patient(
    app: AppContext,
    tcc_id: str,
    mrn_raw: str,
    avatar_id: str,
    sex: str,
    race: str,
    ethnicity: str,
    birth_date: str,
    vital_status: str,
) -> None:
    """Validate a full patient record."""
    app.emit(
        app.fields.parse_patient(
            tcc_id=tcc_id,
            mrn_raw=mrn_raw,
            avatar_id=avatar_id,
            sex=sex,
            race=race,
            ethnicity=ethnicity,
            birth_date=birth_date,
            vital_status=vital_status,
        )
    )
