"""Key-Set Enforcement — structural check of a record's field names.

Invariants:
    - Valid iff keys ⊆ spec.known AND spec.required ⊆ keys
    - Unknown keys REJECT the record (they are not ignored)
    - Values are never inspected here
    - All functions are PURE: no IO, no side effects

Design Decisions:
    - Strict on unknown keys: a stray field means the record does not match the
      contract, even if every required field is present (ADR: preserve source policy)
    - check_keys returns error dict (not exceptions), same shape as other
      diagnostics: structural failure is an outcome, not a fault
"""

from passport_check.core.domain_types import DEFAULT_FIELD_SPEC, FieldSpec, Record


def unknown_keys(record: Record, spec: FieldSpec = DEFAULT_FIELD_SPEC) -> set[str]:
    return set(record) - spec.known


def missing_keys(record: Record, spec: FieldSpec = DEFAULT_FIELD_SPEC) -> set[str]:
    return spec.required - set(record)


def has_valid_keys(record: Record, spec: FieldSpec = DEFAULT_FIELD_SPEC) -> bool:
    keys = record.keys()
    return spec.known.issuperset(keys) and spec.required.issubset(keys)


def check_keys(record: Record, spec: FieldSpec = DEFAULT_FIELD_SPEC) -> dict | None:
    """Describe the first key-set violation, or None if the keys are valid."""
    unknown = unknown_keys(record, spec)
    if unknown:
        return {
            "status": "error",
            "error_code": "UNKNOWN_KEYS",
            "keys": sorted(unknown),
            "message": f"Record has unknown fields: {', '.join(sorted(unknown))}",
        }

    missing = missing_keys(record, spec)
    if missing:
        return {
            "status": "error",
            "error_code": "MISSING_KEYS",
            "keys": sorted(missing),
            "message": f"Record is missing required fields: {', '.join(sorted(missing))}",
        }

    return None
