"""Batch Runner — parse the blob, count under both policies, log the outcome.

Invariants:
    - Parallel and sequential counts are identical for the same records
    - Workers only read shared data (records, registry, spec): no locks needed
    - MalformedFieldError propagates: a corrupt blob aborts the run
    - Per-record diagnostics are logged at DEBUG only, never printed

Design Decisions:
    - ThreadPoolExecutor over processes: records and registry are shared by
      reference, nothing to pickle (ADR: validators are cheap, fan-out is optional)
    - workers == 1 skips the pool entirely
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from passport_check.core.batch_counter import BatchReport, count_valid, partition
from passport_check.core.domain_types import DEFAULT_FIELD_SPEC, FieldSpec, Policy, Record
from passport_check.core.enforce_keys import check_keys
from passport_check.core.field_validators import DEFAULT_REGISTRY, ValidatorRegistry
from passport_check.core.parse_records import read_records
from passport_check.core.validate_record import invalid_fields

logger = logging.getLogger(__name__)


def count_batch(
    records: Sequence[Record],
    policy: Policy,
    workers: int = 1,
    registry: ValidatorRegistry = DEFAULT_REGISTRY,
    spec: FieldSpec = DEFAULT_FIELD_SPEC,
) -> int:
    """Count records satisfying policy, fanning out over `workers` threads."""
    if workers <= 1 or len(records) < 2:
        return count_valid(records, policy, registry, spec)

    chunks = partition(records, workers)
    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        partials = pool.map(
            lambda chunk: count_valid(chunk, policy, registry, spec), chunks,
        )
        return sum(partials)


def log_diagnostics(
    records: Sequence[Record],
    registry: ValidatorRegistry = DEFAULT_REGISTRY,
    spec: FieldSpec = DEFAULT_FIELD_SPEC,
) -> None:
    """DEBUG: why each rejected record was rejected."""
    for index, record in enumerate(records):
        error = check_keys(record, spec)
        if error is not None:
            logger.debug(
                error["message"],
                extra={"record_index": index, "error_code": error["error_code"]},
            )
            continue
        for name in invalid_fields(record, registry):
            logger.debug(
                f"Invalid value {record[name]!r} for field {name}",
                extra={"record_index": index, "field_name": name},
            )


def run_batch(
    text: str,
    workers: int = 1,
    registry: ValidatorRegistry = DEFAULT_REGISTRY,
    spec: FieldSpec = DEFAULT_FIELD_SPEC,
) -> BatchReport:
    records = read_records(text)
    logger.info("Parsed records", extra={"total": len(records), "workers": workers})

    if logger.isEnabledFor(logging.DEBUG):
        log_diagnostics(records, registry, spec)

    report = BatchReport(
        total=len(records),
        structural=count_batch(records, Policy.STRUCTURAL, workers, registry, spec),
        semantic=count_batch(records, Policy.SEMANTIC, workers, registry, spec),
    )
    logger.info(
        "Structural validation complete",
        extra={"policy": Policy.STRUCTURAL.value, "count": report.structural, "total": report.total},
    )
    logger.info(
        "Semantic validation complete",
        extra={"policy": Policy.SEMANTIC.value, "count": report.semantic, "total": report.total},
    )
    return report
