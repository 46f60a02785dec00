"""Controlled-vocabulary code tables for patient demographics.

Each category is a closed ``Enum`` whose member values are the
external registry codes. Members also carry the registry's descriptive
label. Code strings are a persisted contract with upstream data feeds
and must not change.

INVARIANT: Within a category, code <-> member is a bijection
(enforced by ``@unique``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, unique
from typing import Generic, TypeVar

from oncoreg.domain.result import Err, Ok, Result, ValidationError

logger = logging.getLogger(__name__)


class CodedEnum(Enum):
    """Base for enums defined as ``MEMBER = "code", "label"``.

    Members are opaque tags: they do not compare equal to their code
    string, nor to members of another category sharing that code.
    """

    label: str

    def __new__(cls, code: str, label: str) -> CodedEnum:
        obj = object.__new__(cls)
        obj._value_ = code
        obj.label = label
        return obj


@unique
class Sex(CodedEnum):
    """Sex / gender of the patient."""

    MALE = "01", "Male"
    FEMALE = "02", "Female"
    OTHER_INTERSEX = (
        "03",
        "Other (intersex, disorders of sexual development previously "
        "classified as hermaphrodite)",
    )
    TRANSSEXUAL_NOS = "04", "Transsexual, NOS"
    TRANSSEXUAL_NATAL_MALE = "05", "Transsexual, natal male"
    TRANSSEXUAL_NATAL_FEMALE = "06", "Transsexual, natal female"
    UNKNOWN = "09", "Not stated or Unknown"


@unique
class Race(CodedEnum):
    """Race of the patient (registry codes plus site-local letter codes)."""

    WHITE = "01", "White"
    BLACK = "02", "Black"
    AMERICAN_INDIAN = (
        "03",
        "American Indian, Aleutian, or Eskimo (includes all indigenous "
        "populations of the Western Hemisphere)",
    )
    CHINESE = "04", "Chinese"
    JAPANESE = "05", "Japanese"
    FILIPINO = "06", "Filipino"
    HAWAIIAN = "07", "Hawaiian"
    KOREAN = "08", "Korean"
    VIETNAMESE = "10", "Vietnamese"
    LAOTIAN = "11", "Laotian"
    HMONG = "12", "Hmong"
    KAMPUCHEAN = "13", "Kampuchean (Cambodian)"
    THAI = "14", "Thai"
    ASIAN_INDIAN_OR_PAKISTANI = (
        "15",
        "Asian Indian or Pakistani, NOS (code 09 prior to Version 12)",
    )
    ASIAN_INDIAN = "16", "Asian Indian"
    PAKISTANI = "17", "Pakistani"
    MICRONESIAN = "20", "Micronesian, NOS"
    CHAMORRO = "21", "Chamorro or Chamoru"
    GUAMANIAN = "22", "Guamanian, NOS"
    POLYNESIAN = "25", "Polynesian, NOS"
    TAHITIAN = "26", "Tahitian"
    SAMOAN = "27", "Samoan"
    TONGAN = "28", "Tongan"
    MELANESIAN = "30", "Melanesian, NOS"
    FIJI_ISLANDER = "31", "Fiji Islander"
    NEW_GUINEAN = "32", "New Guinean"
    OTHER_ASIAN = "96", "Other Asian, including Asian, NOS and Oriental, NOS"
    PACIFIC_ISLANDER = "97", "Pacific Islander, NOS"
    OTHER = "98", "Other"
    UNKNOWN = "99", "Unknown"
    REFUSED_TO_ANSWER = "A", "REFUSED TO ANSWER"
    PATIENT_NOT_AVAILABLE = "B", "PT NOT AVAILABLE"
    SOMALI = "C", "SOMALI"
    ASIAN_CAMBODIAN = "D", "ASIAN CAMBODIAN"
    NEPALI = "E", "NEPALI"
    AFRICAN_OTHER = "F", "AFRICAN OTHER"
    NATIVE_HAWAIIAN_OR_PACIFIC_ISLANDER = "G", "NTV HAWAIIAN or PCF ISL"
    MIDDLE_EASTERN_NORTHERN_AFRICAN = "H", "MIDDLE EASTERN NORTHERN AFRICAN"
    ASIAN_LAOTIAN = "I", "ASIAN LAOTIAN"
    MORE_THAN_ONE_RACE = "J", "MORE THAN ONE RACE"


@unique
class Ethnicity(CodedEnum):
    """Spanish / Hispanic origin of the patient."""

    NON_HISPANIC = "00", "Non-Spanish; Non-Hispanic"
    MEXICAN = "01", "Mexican (includes Chicano)"
    PUERTO_RICAN = "02", "Puerto Rican"
    CUBAN = "03", "Cuban"
    SOUTH_OR_CENTRAL_AMERICAN = "04", "South or Central American (except Brazil)"
    OTHER_HISPANIC = "05", "Other specified Spanish or Hispanic origin"
    HISPANIC_NOS = "06", "Spanish, NOS; Hispanic, NOS; Latino, NOS"
    SPANISH_SURNAME_ONLY = "07", "Spanish surname only"
    DOMINICAN_REPUBLIC = "08", "Dominican Republic"
    UNKNOWN = "09", "Unknown"
    REFUSED_TO_ANSWER = "A", "REFUSED TO ANSWER"
    PATIENT_NOT_AVAILABLE = "B", "PATIENT NOT AVAILABLE"
    ASHKENAZI_JEW = "C", "ASHKENAZI JEW"


@unique
class VitalStatus(CodedEnum):
    """Whether the patient is alive or dead."""

    ALIVE = "A", "Alive"
    DEAD = "D", "Dead"


E = TypeVar("E", bound=CodedEnum)


@dataclass(frozen=True)
class CodeTable(Generic[E]):
    """Bidirectional code <-> member mapping for one category.

    Attributes:
        enum: The closed enumeration backing this category.
        category: Label used in error messages (``"Race"``).
        field: Record attribute name reported in errors (``"race"``).
    """

    enum: type[E]
    category: str
    field: str

    def from_code(self, code: str) -> Result[E]:
        """Look up *code* exactly (case-sensitive, no trimming)."""
        try:
            member = self.enum(code)
        except ValueError:
            logger.debug("Unknown %s code: %r", self.field, code)
            return Err(
                ValidationError(
                    field=self.field,
                    raw_input=code,
                    message=f"{self.category} code not found: {code}",
                )
            )
        return Ok(member)

    def to_code(self, member: E) -> str:
        """Return the external code for *member*."""
        if not isinstance(member, self.enum):
            msg = f"{member!r} is not a {self.enum.__name__} member"
            raise TypeError(msg)
        return member.value


SEX = CodeTable(Sex, category="Gender", field="sex")
RACE = CodeTable(Race, category="Race", field="race")
ETHNICITY = CodeTable(Ethnicity, category="Ethnicity", field="ethnicity")
VITAL_STATUS = CodeTable(VitalStatus, category="Vital status", field="vitalStatus")

CODE_TABLES: dict[str, CodeTable] = {
    table.field: table for table in (SEX, RACE, ETHNICITY, VITAL_STATUS)
}
