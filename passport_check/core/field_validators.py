"""Field Validators — one total boolean predicate per passport field.

Invariants:
    - Every validator is TOTAL: returns a bool for any string, never raises
    - A value that fails to parse is simply invalid (False), never an error
    - Patterns match the WHOLE value (re.fullmatch, no trailing-newline leniency)
    - DEFAULT_REGISTRY is built once at import and never mutated

Design Decisions:
    - Plain functions stored by name over an enum with a validate() method:
      adding a field is one function + one registry entry (ADR: open registry)
    - MappingProxyType inside a frozen dataclass: shared by reference, read-only,
      safe to read from any number of worker threads
    - with_validator() returns a new registry instead of mutating (ADR: no global mutable state)
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from collections.abc import Iterable, Mapping

from passport_check.core.domain_types import (
    EyeColor, FieldName, FieldSpec, HeightUnit, Validator,
)
from passport_check.core.errors import UnknownFieldError


# Strict integer syntax: optional sign, ASCII digits only
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_HEIGHT_RE = re.compile(r"([0-9]+)(cm|in)")
_HAIR_COLOR_RE = re.compile(r"#[0-9a-f]{6}")
_PASSPORT_ID_RE = re.compile(r"[0-9]{9}")

_EYE_COLORS = frozenset(c.value for c in EyeColor)

HEIGHT_RANGES: dict[HeightUnit, tuple[int, int]] = {
    HeightUnit.CENTIMETERS: (150, 193),
    HeightUnit.INCHES: (59, 76),
}


def parse_int(value: str) -> int | None:
    """Parse a strict integer, or None if the value is not one."""
    if not _INTEGER_RE.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # Past the interpreter's int-conversion digit limit
        return None


def year_in_range(value: str, low: int, high: int) -> bool:
    year = parse_int(value)
    return year is not None and low <= year <= high


# ─── Per-field predicates ────────────────────────────────────────

def valid_birth_year(value: str) -> bool:
    """byr — four digits; at least 1920 and at most 2002."""
    return year_in_range(value, 1920, 2002)


def valid_issue_year(value: str) -> bool:
    """iyr — four digits; at least 2010 and at most 2020."""
    return year_in_range(value, 2010, 2020)


def valid_expiration_year(value: str) -> bool:
    """eyr — four digits; at least 2020 and at most 2030."""
    return year_in_range(value, 2020, 2030)


def valid_height(value: str) -> bool:
    """hgt — a number followed by cm (150-193) or in (59-76)."""
    match = _HEIGHT_RE.fullmatch(value)
    if match is None:
        return False
    number = parse_int(match.group(1))
    if number is None:
        return False
    low, high = HEIGHT_RANGES[HeightUnit(match.group(2))]
    return low <= number <= high


def valid_hair_color(value: str) -> bool:
    """hcl — a # followed by exactly six characters 0-9 or a-f."""
    return _HAIR_COLOR_RE.fullmatch(value) is not None


def valid_eye_color(value: str) -> bool:
    """ecl — exactly one of: amb blu brn gry grn hzl oth."""
    return value in _EYE_COLORS


def valid_passport_id(value: str) -> bool:
    """pid — a nine-digit number, including leading zeroes."""
    return _PASSPORT_ID_RE.fullmatch(value) is not None


def always_valid(value: str) -> bool:
    """cid — ignored, missing or not."""
    return True


# ─── Registry ────────────────────────────────────────────────────

@dataclass(frozen=True)
class ValidatorRegistry:
    """Read-only mapping from field name to its validator."""
    validators: Mapping[str, Validator]

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict cannot leak in
        object.__setattr__(
            self, "validators", MappingProxyType(dict(self.validators)),
        )

    def __contains__(self, name: object) -> bool:
        return name in self.validators

    def __len__(self) -> int:
        return len(self.validators)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self.validators)

    def lookup(self, name: str) -> Validator:
        """Return the validator for name. Caller guarantees name is known."""
        try:
            return self.validators[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def with_validator(self, name: str, validator: Validator) -> "ValidatorRegistry":
        """Return a new registry with name bound to validator."""
        return ValidatorRegistry({**self.validators, name: validator})

    def field_spec(self, optional: Iterable[str] = ()) -> FieldSpec:
        """Every registered name is known; all but `optional` are required."""
        known = self.names
        return FieldSpec(known=known, required=known - frozenset(optional))


def build_default_registry() -> ValidatorRegistry:
    return ValidatorRegistry({
        FieldName.BIRTH_YEAR.value: valid_birth_year,
        FieldName.ISSUE_YEAR.value: valid_issue_year,
        FieldName.EXPIRATION_YEAR.value: valid_expiration_year,
        FieldName.HEIGHT.value: valid_height,
        FieldName.HAIR_COLOR.value: valid_hair_color,
        FieldName.EYE_COLOR.value: valid_eye_color,
        FieldName.PASSPORT_ID.value: valid_passport_id,
        FieldName.COUNTRY_ID.value: always_valid,
    })


DEFAULT_REGISTRY = build_default_registry()
