"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Field names, eye colors, height units and policies encoded as Enums — no raw string matching
    - Record is read-only once built (MappingProxyType)
    - FieldSpec.required is always a subset of FieldSpec.known

Design Decisions:
    - str Enums: compare equal to the raw tokens read from input (ADR: zero conversion at the seam)
    - Record stays a mapping of raw strings: parsing values is each validator's job
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum


# ─── Value Types ─────────────────────────────────────────────────

Record = Mapping[str, str]
Validator = Callable[[str], bool]


# ─── Enums ───────────────────────────────────────────────────────

class FieldName(str, Enum):
    """The closed set of passport fields."""
    BIRTH_YEAR = "byr"
    ISSUE_YEAR = "iyr"
    EXPIRATION_YEAR = "eyr"
    HEIGHT = "hgt"
    HAIR_COLOR = "hcl"
    EYE_COLOR = "ecl"
    PASSPORT_ID = "pid"
    COUNTRY_ID = "cid"


class EyeColor(str, Enum):
    """Accepted eye color codes."""
    AMBER = "amb"
    BLUE = "blu"
    BROWN = "brn"
    GRAY = "gry"
    GREEN = "grn"
    HAZEL = "hzl"
    OTHER = "oth"


class HeightUnit(str, Enum):
    CENTIMETERS = "cm"
    INCHES = "in"


class Policy(str, Enum):
    """Validation policies reported by the batch counter."""
    STRUCTURAL = "structural"
    SEMANTIC = "semantic"


# ─── Field Spec ──────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldSpec:
    """Known field names and the subset a record must carry."""
    known: frozenset[str]
    required: frozenset[str]

    def __post_init__(self) -> None:
        stray = self.required - self.known
        if stray:
            raise ValueError(
                f"Required fields must be known fields: {sorted(stray)}"
            )

    @property
    def optional(self) -> frozenset[str]:
        return self.known - self.required


# cid is display-only: known, never required, never inspected
DEFAULT_FIELD_SPEC = FieldSpec(
    known=frozenset(f.value for f in FieldName),
    required=frozenset(f.value for f in FieldName if f is not FieldName.COUNTRY_ID),
)
