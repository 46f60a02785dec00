"""Record shapes assembled from validated fields.

Plain containers: they hold already-parsed values and perform no
validation of their own. Assembly from raw fields lives in
:mod:`oncoreg.services.fields`.
"""

from __future__ import annotations

from dataclasses import dataclass

from oncoreg.domain.codes import Ethnicity, Race, Sex, VitalStatus
from oncoreg.domain.identifiers import AvatarId, RegistryId
from oncoreg.domain.mrn import RecordNumber


@dataclass(frozen=True)
class Identifiers:
    """Cross-reference identifiers shared by patient and cancer records."""

    tcc_id: RegistryId
    mrn: RecordNumber
    avatar_id: AvatarId | None = None


@dataclass(frozen=True)
class BirthDate:
    """Birth date exactly as supplied by the source feed."""

    value: str


@dataclass(frozen=True)
class Patient:
    identifiers: Identifiers
    sex: Sex
    race: Race
    birth_date: BirthDate
    vital_status: VitalStatus
    ethnicity: Ethnicity | None = None
