"""Batch Counter — map-then-count reduction over a record sequence.

Invariants:
    - No state carried between records: count is a pure sum of per-record verdicts
    - BatchReport: semantic <= structural <= total
    - partition() preserves order and loses nothing: chunks concatenate back to the input

Design Decisions:
    - Counting kept pure here; fan-out over workers lives in services/ (ADR: core has no threads)
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from passport_check.core.domain_types import DEFAULT_FIELD_SPEC, FieldSpec, Policy, Record
from passport_check.core.field_validators import DEFAULT_REGISTRY, ValidatorRegistry
from passport_check.core.validate_record import satisfies


@dataclass(frozen=True)
class BatchReport:
    """Counts for one batch under both policies."""
    total: int
    structural: int
    semantic: int

    def __post_init__(self) -> None:
        if not 0 <= self.semantic <= self.structural <= self.total:
            raise ValueError(
                f"Inconsistent batch counts: total={self.total} "
                f"structural={self.structural} semantic={self.semantic}"
            )


def count_valid(
    records: Iterable[Record],
    policy: Policy,
    registry: ValidatorRegistry = DEFAULT_REGISTRY,
    spec: FieldSpec = DEFAULT_FIELD_SPEC,
) -> int:
    return sum(1 for record in records if satisfies(record, policy, registry, spec))


def summarize(
    records: Sequence[Record],
    registry: ValidatorRegistry = DEFAULT_REGISTRY,
    spec: FieldSpec = DEFAULT_FIELD_SPEC,
) -> BatchReport:
    return BatchReport(
        total=len(records),
        structural=count_valid(records, Policy.STRUCTURAL, registry, spec),
        semantic=count_valid(records, Policy.SEMANTIC, registry, spec),
    )


def partition(records: Sequence[Record], parts: int) -> list[list[Record]]:
    """Split records into at most `parts` contiguous, near-equal chunks."""
    if parts < 1:
        raise ValueError(f"parts must be >= 1, got {parts}")
    size, extra = divmod(len(records), parts)
    chunks = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < extra else 0)
        if end > start:
            chunks.append(list(records[start:end]))
        start = end
    return chunks
