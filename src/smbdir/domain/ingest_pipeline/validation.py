"""Per-record validation phase: field checks, transform and business rules."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from smbdir.domain.ingest_pipeline.bucketing import BucketMap
from smbdir.domain.ingest_pipeline.business_rules import evaluate_business_rules
from smbdir.domain.ingest_pipeline.field_validation import record_label, validate_fields
from smbdir.domain.ingest_pipeline.orchestrator import PipelinePhase
from smbdir.domain.ingest_pipeline.payload import BusinessPayload
from smbdir.domain.ingest_pipeline.transformation import transform_record
from smbdir.domain.model import UNKNOWN_BUSINESS

if TYPE_CHECKING:
    from smbdir.domain.ingest_pipeline.context import IngestBatch, PipelineContext
    from smbdir.domain.model import Business


log = getLogger(__name__)


def _describe_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"])
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


@dataclass(slots=True)
class ValidationPhase(PipelinePhase):
    """Validate, transform and accept raw records one at a time.

    Every failure is contained at the record boundary: it becomes a
    hard-reject entry plus an ``invalid`` increment and the batch moves on.
    """

    name: str = "validation"

    def run(self, batch: IngestBatch, *, context: PipelineContext) -> None:
        buckets = context.buckets or BucketMap()
        context.buckets = buckets

        for raw in batch.raw_records:
            label = record_label(raw) or UNKNOWN_BUSINESS
            try:
                business = self._process_record(raw, label, context)
            except ValidationError as exc:
                context.results.reject(
                    label, [f"Processing error: {_describe_validation_error(exc)}"]
                )
                continue
            except Exception as exc:  # noqa: BLE001
                log.exception("Unexpected error while processing %s", label)
                context.results.reject(label, [f"Processing error: {exc}"])
                continue

            if business is None:
                continue
            batch.accepted.append(business)
            buckets.add(business)
            context.results.valid += 1

        log.info(
            "Validated %d records: %d valid, %d invalid",
            len(batch.raw_records),
            context.results.valid,
            context.results.invalid,
        )

    def _process_record(
        self, raw: object, label: str, context: PipelineContext
    ) -> Business | None:
        issues = validate_fields(raw)
        if issues:
            context.results.reject(label, issues)
            return None

        payload = BusinessPayload.model_validate(raw)
        business = transform_record(
            payload,
            sequence=context.next_business_sequence(),
            fallback_industry=context.fallback_industry,
        )

        for violation in evaluate_business_rules(business):
            if violation.is_hard:
                context.results.reject(business.name, [violation.message])
                return None
            context.results.warn(business.name, violation.message)
        return business
