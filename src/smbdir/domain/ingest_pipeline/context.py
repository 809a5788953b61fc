"""Shared context structures for the sealing pipeline (batch + run state)."""

from __future__ import annotations

from dataclasses import dataclass, field

from smbdir.domain.ingest_pipeline.bucketing import BucketMap
from smbdir.domain.model import Business, ValidationResults


@dataclass(slots=True)
class PipelineContext:
    """Mutable run-wide state shared across pipeline phases.

    The id counter, validation results and bucket map live for exactly one
    sealing run. ``buckets`` stays ``None`` until the validation phase starts
    accepting records.
    """

    results: ValidationResults = field(default_factory=ValidationResults)
    fallback_industry: str | None = None
    business_id_counter: int = 0
    buckets: BucketMap | None = None

    def next_business_sequence(self) -> int:
        self.business_id_counter += 1
        return self.business_id_counter


@dataclass(slots=True)
class IngestBatch:
    """Records flowing through a single run.

    ``raw_records`` holds the loader output untouched; ``accepted`` holds the
    canonical records in acceptance (input) order and is narrowed in place by
    deduplication.
    """

    raw_records: list[object] = field(default_factory=list[object])
    accepted: list[Business] = field(default_factory=list[Business])
