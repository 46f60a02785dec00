"""FieldService — validate raw registry fields and assemble records.

Single-field parsing dispatches on the record attribute name. Record
assembly (identifiers, patient) applies the configured aggregation
policy: collect every field error, or stop at the first one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from oncoreg.config.models import RecordConfig
from oncoreg.domain import mrn
from oncoreg.domain.codes import (
    CODE_TABLES,
    ETHNICITY,
    RACE,
    SEX,
    VITAL_STATUS,
    CodedEnum,
)
from oncoreg.domain.identifiers import AvatarId, PrefixedId, RegistryId
from oncoreg.domain.optional import map_if_present
from oncoreg.domain.records import BirthDate, Identifiers, Patient
from oncoreg.domain.result import Err, Result, ValidationError
from oncoreg.services.result import (
    INVALID_FIELD,
    INVALID_RECORD,
    UNKNOWN_CATEGORY,
    UNKNOWN_FIELD,
    ServiceError,
    ServiceResult,
    field_error_detail,
)

logger = logging.getLogger(__name__)

FIELD_PARSERS: dict[str, Callable[[str], Result[Any]]] = {
    SEX.field: SEX.from_code,
    RACE.field: RACE.from_code,
    ETHNICITY.field: ETHNICITY.from_code,
    VITAL_STATUS.field: VITAL_STATUS.from_code,
    RegistryId.field: RegistryId.parse,
    AvatarId.field: AvatarId.parse,
    mrn.MRN_FIELD: mrn.parse,
}


def describe_value(value: Any) -> dict[str, Any]:
    """Render a parsed field value as JSON-friendly data."""
    if isinstance(value, CodedEnum):
        return {"value": value.name, "code": value.value, "label": value.label}
    if isinstance(value, PrefixedId):
        return {"value": value.value}
    if isinstance(value, mrn.Provided):
        return {"value": value.value}
    if isinstance(value, mrn.Withdrawn):
        return {"value": mrn.WITHDRAWN_SENTINEL, "withdrawn": True}
    msg = f"Cannot describe {type(value).__name__}"
    raise TypeError(msg)


class _Collector:
    """Accumulates field results under the configured aggregation policy."""

    def __init__(self, *, fail_fast: bool) -> None:
        self._fail_fast = fail_fast
        self.errors: list[ValidationError] = []

    @property
    def stopped(self) -> bool:
        return self._fail_fast and bool(self.errors)

    def take(self, result: Result[Any] | None) -> Any:
        """Return the parsed value, recording the error on failure."""
        if result is None or self.stopped:
            return None
        if isinstance(result, Err):
            self.errors.append(result.error)
            return None
        return result.value

    def add(self, error: ValidationError) -> None:
        if not self.stopped:
            self.errors.append(error)


class FieldService:
    """Parse raw field strings into validated registry values.

    Stateless apart from the record policy; safe to share across threads.
    """

    def __init__(self, config: RecordConfig | None = None) -> None:
        self._config = config or RecordConfig()

    # ------------------------------------------------------------------
    # Single fields
    # ------------------------------------------------------------------

    def parse_field(self, field: str, raw: str) -> ServiceResult:
        """Validate one raw value for the record attribute *field*."""
        op = "parse_field"
        parser = FIELD_PARSERS.get(field)
        if parser is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=UNKNOWN_FIELD,
                    message=f"Unknown field: {field}",
                    detail={"known_fields": sorted(FIELD_PARSERS)},
                ),
            )

        result = parser(raw)
        if isinstance(result, Err):
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=INVALID_FIELD,
                    message=result.error.message,
                    detail=field_error_detail(result.error),
                ),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"field": field, "raw": raw, **describe_value(result.value)},
        )

    def list_codes(self, category: str) -> ServiceResult:
        """Return the code table for *category* (a record field name)."""
        op = "list_codes"
        table = CODE_TABLES.get(category)
        if table is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=UNKNOWN_CATEGORY,
                    message=f"Unknown code category: {category}",
                    detail={"known_categories": sorted(CODE_TABLES)},
                ),
            )
        codes = [{"code": table.to_code(m), "label": m.label} for m in table.enum]
        return ServiceResult(
            ok=True,
            op=op,
            data={"category": table.field, "name": table.category, "codes": codes},
        )

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def parse_identifiers(
        self,
        *,
        tcc_id: str,
        mrn_raw: str,
        avatar_id: str | None = None,
    ) -> ServiceResult:
        """Assemble an :class:`Identifiers` record from raw fields."""
        op = "parse_identifiers"
        collector = _Collector(fail_fast=self._config.fail_fast)
        identifiers = self._collect_identifiers(collector, tcc_id, mrn_raw, avatar_id)
        if collector.errors:
            return self._record_failure(op, collector.errors)
        assert identifiers is not None
        return ServiceResult(ok=True, op=op, data=_identifiers_data(identifiers))

    def parse_patient(
        self,
        *,
        tcc_id: str,
        mrn_raw: str,
        sex: str,
        race: str,
        birth_date: str,
        vital_status: str,
        avatar_id: str | None = None,
        ethnicity: str | None = None,
    ) -> ServiceResult:
        """Assemble a :class:`Patient` record from raw fields."""
        op = "parse_patient"
        collector = _Collector(fail_fast=self._config.fail_fast)
        identifiers = self._collect_identifiers(collector, tcc_id, mrn_raw, avatar_id)
        sex_value = collector.take(SEX.from_code(sex))
        race_value = collector.take(RACE.from_code(race))
        vital_value = collector.take(VITAL_STATUS.from_code(vital_status))
        ethnicity_value = collector.take(map_if_present(ETHNICITY.from_code, ethnicity))

        if collector.errors:
            return self._record_failure(op, collector.errors)

        patient = Patient(
            identifiers=identifiers,
            sex=sex_value,
            race=race_value,
            birth_date=BirthDate(birth_date),
            vital_status=vital_value,
            ethnicity=ethnicity_value,
        )
        data: dict[str, Any] = {
            "identifiers": _identifiers_data(patient.identifiers),
            "sex": describe_value(patient.sex),
            "race": describe_value(patient.race),
            "birth_date": patient.birth_date.value,
            "vital_status": describe_value(patient.vital_status),
            "ethnicity": (
                describe_value(patient.ethnicity) if patient.ethnicity is not None else None
            ),
        }
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _collect_identifiers(
        self,
        collector: _Collector,
        tcc_id: str,
        mrn_raw: str,
        avatar_id: str | None,
    ) -> Identifiers | None:
        tcc_value = collector.take(RegistryId.parse(tcc_id))
        mrn_value = collector.take(mrn.parse(mrn_raw))
        if not avatar_id and self._config.require_avatar_id:
            collector.add(
                ValidationError(
                    field=AvatarId.field,
                    raw_input=avatar_id or "",
                    message="Avatar ID is required",
                )
            )
        avatar_value = collector.take(map_if_present(AvatarId.parse, avatar_id))
        if tcc_value is None or mrn_value is None:
            return None
        return Identifiers(tcc_id=tcc_value, mrn=mrn_value, avatar_id=avatar_value)

    @staticmethod
    def _record_failure(op: str, errors: list[ValidationError]) -> ServiceResult:
        logger.debug("%s rejected %d field(s)", op, len(errors))
        fields = ", ".join(e.field for e in errors)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=INVALID_RECORD,
                message=f"Invalid field(s): {fields}",
                detail={"errors": [field_error_detail(e) for e in errors]},
            ),
        )


def _identifiers_data(identifiers: Identifiers) -> dict[str, Any]:
    return {
        "tcc_id": identifiers.tcc_id.value,
        "avatar_id": identifiers.avatar_id.value if identifiers.avatar_id else None,
        "mrn": describe_value(identifiers.mrn)["value"],
    }
