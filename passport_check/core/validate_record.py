"""Record Validation — structural and semantic verdicts for a single record.

Invariants:
    - is_semantically_valid(r) implies is_structurally_valid(r), never the reverse
    - Structural check runs first: the registry is only consulted for known keys
    - Verdicts are booleans; no partial or error state
"""

from passport_check.core.domain_types import DEFAULT_FIELD_SPEC, FieldSpec, Policy, Record
from passport_check.core.enforce_keys import has_valid_keys
from passport_check.core.field_validators import DEFAULT_REGISTRY, ValidatorRegistry


def is_structurally_valid(record: Record, spec: FieldSpec = DEFAULT_FIELD_SPEC) -> bool:
    return has_valid_keys(record, spec)


def is_semantically_valid(
    record: Record,
    registry: ValidatorRegistry = DEFAULT_REGISTRY,
    spec: FieldSpec = DEFAULT_FIELD_SPEC,
) -> bool:
    """Structurally valid AND every present value passes its validator."""
    if not is_structurally_valid(record, spec):
        return False
    return all(registry.lookup(name)(value) for name, value in record.items())


def invalid_fields(
    record: Record, registry: ValidatorRegistry = DEFAULT_REGISTRY,
) -> list[str]:
    """Names of fields whose values fail. Record keys must all be registered."""
    return sorted(
        name for name, value in record.items()
        if not registry.lookup(name)(value)
    )


def satisfies(
    record: Record,
    policy: Policy,
    registry: ValidatorRegistry = DEFAULT_REGISTRY,
    spec: FieldSpec = DEFAULT_FIELD_SPEC,
) -> bool:
    if policy is Policy.STRUCTURAL:
        return is_structurally_valid(record, spec)
    return is_semantically_valid(record, registry, spec)
