"""Tests for FieldService — single fields, code tables, and records."""

import pytest

from oncoreg.config.models import RecordConfig
from oncoreg.domain.codes import SEX, Race, Sex
from oncoreg.domain.mrn import Provided, Withdrawn
from oncoreg.services.fields import FIELD_PARSERS, FieldService, describe_value


@pytest.fixture
def svc() -> FieldService:
    return FieldService()


def _patient_fields(**overrides: str) -> dict[str, str]:
    fields = {
        "tcc_id": "P1001",
        "mrn_raw": "4521",
        "sex": "02",
        "race": "01",
        "birth_date": "1961-04-02",
        "vital_status": "A",
    }
    fields.update(overrides)
    return fields


class TestParseField:
    def test_known_fields(self) -> None:
        assert set(FIELD_PARSERS) == {
            "sex",
            "race",
            "ethnicity",
            "vitalStatus",
            "tccId",
            "avatarId",
            "mrn",
        }

    def test_code_field(self, svc: FieldService) -> None:
        result = svc.parse_field("race", "02")
        assert result.ok
        assert result.op == "parse_field"
        assert result.data == {
            "field": "race",
            "raw": "02",
            "value": "BLACK",
            "code": "02",
            "label": "Black",
        }

    def test_identifier_field(self, svc: FieldService) -> None:
        result = svc.parse_field("tccId", "P123")
        assert result.ok
        assert result.data["value"] == "P123"

    def test_mrn_withdrawn(self, svc: FieldService) -> None:
        result = svc.parse_field("mrn", "Withdrawn")
        assert result.ok
        assert result.data["withdrawn"] is True

    def test_invalid_value(self, svc: FieldService) -> None:
        result = svc.parse_field("ethnicity", "ZZ")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_FIELD"
        assert result.error.message == "Ethnicity code not found: ZZ"
        assert result.error.detail == {
            "field": "ethnicity",
            "raw_input": "ZZ",
            "message": "Ethnicity code not found: ZZ",
        }

    def test_unknown_field(self, svc: FieldService) -> None:
        result = svc.parse_field("shoeSize", "42")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_FIELD"
        assert "race" in result.error.detail["known_fields"]


class TestListCodes:
    def test_vital_status(self, svc: FieldService) -> None:
        result = svc.list_codes("vitalStatus")
        assert result.ok
        assert result.data["name"] == "Vital status"
        assert result.data["codes"] == [
            {"code": "A", "label": "Alive"},
            {"code": "D", "label": "Dead"},
        ]

    def test_codes_in_table_order(self, svc: FieldService) -> None:
        listed = [entry["code"] for entry in svc.list_codes("sex").data["codes"]]
        assert listed == [SEX.to_code(m) for m in Sex]

    def test_race_count(self, svc: FieldService) -> None:
        assert len(svc.list_codes("race").data["codes"]) == len(Race)

    def test_unknown_category(self, svc: FieldService) -> None:
        result = svc.list_codes("mrn")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_CATEGORY"


class TestParseIdentifiers:
    def test_valid_without_avatar(self, svc: FieldService) -> None:
        result = svc.parse_identifiers(tcc_id="P1", mrn_raw="77")
        assert result.ok
        assert result.data == {"tcc_id": "P1", "avatar_id": None, "mrn": 77}

    def test_empty_avatar_is_absent(self, svc: FieldService) -> None:
        result = svc.parse_identifiers(tcc_id="P1", mrn_raw="Withdrawn", avatar_id="")
        assert result.ok
        assert result.data["avatar_id"] is None
        assert result.data["mrn"] == "Withdrawn"

    def test_valid_with_avatar(self, svc: FieldService) -> None:
        result = svc.parse_identifiers(tcc_id="P1", mrn_raw="77", avatar_id="A99")
        assert result.data["avatar_id"] == "A99"

    def test_collects_all_errors(self, svc: FieldService) -> None:
        result = svc.parse_identifiers(tcc_id="Q1", mrn_raw="abc", avatar_id="A9x")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_RECORD"
        fields = [e["field"] for e in result.error.detail["errors"]]
        assert fields == ["tccId", "mrn", "avatarId"]
        assert result.error.message == "Invalid field(s): tccId, mrn, avatarId"

    def test_fail_fast(self) -> None:
        svc = FieldService(RecordConfig(fail_fast=True))
        result = svc.parse_identifiers(tcc_id="Q1", mrn_raw="abc")
        assert result.error is not None
        assert [e["field"] for e in result.error.detail["errors"]] == ["tccId"]

    def test_require_avatar_id(self) -> None:
        svc = FieldService(RecordConfig(require_avatar_id=True))
        result = svc.parse_identifiers(tcc_id="P1", mrn_raw="1")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["errors"][0]["field"] == "avatarId"


class TestParsePatient:
    def test_valid(self, svc: FieldService) -> None:
        result = svc.parse_patient(**_patient_fields(ethnicity="00"))
        assert result.ok
        assert result.data["sex"]["value"] == "FEMALE"
        assert result.data["race"]["code"] == "01"
        assert result.data["vital_status"]["label"] == "Alive"
        assert result.data["ethnicity"]["value"] == "NON_HISPANIC"
        assert result.data["birth_date"] == "1961-04-02"
        assert result.data["identifiers"]["tcc_id"] == "P1001"

    def test_ethnicity_optional(self, svc: FieldService) -> None:
        result = svc.parse_patient(**_patient_fields())
        assert result.ok
        assert result.data["ethnicity"] is None

    def test_reports_one_error_per_failed_field(self, svc: FieldService) -> None:
        result = svc.parse_patient(**_patient_fields(sex="07", race="09", vital_status="X"))
        assert result.error is not None
        errors = result.error.detail["errors"]
        assert [e["field"] for e in errors] == ["sex", "race", "vitalStatus"]
        assert errors[0]["message"] == "Gender code not found: 07"

    def test_fail_fast_stops_at_first(self) -> None:
        svc = FieldService(RecordConfig(fail_fast=True))
        result = svc.parse_patient(**_patient_fields(race="09", vital_status="X"))
        assert result.error is not None
        assert [e["field"] for e in result.error.detail["errors"]] == ["race"]


class TestDescribeValue:
    def test_mrn_values(self) -> None:
        assert describe_value(Provided(3)) == {"value": 3}
        assert describe_value(Withdrawn()) == {"value": "Withdrawn", "withdrawn": True}

    def test_identifiers_mrn_rendering(self, svc: FieldService) -> None:
        provided = svc.parse_identifiers(tcc_id="P1", mrn_raw="-7")
        withdrawn = svc.parse_identifiers(tcc_id="P1", mrn_raw="Withdrawn")
        assert provided.data["mrn"] == -7
        assert withdrawn.data["mrn"] == "Withdrawn"

    def test_unsupported(self) -> None:
        with pytest.raises(TypeError):
            describe_value(object())
