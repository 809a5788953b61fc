"""Entry point for running the default sealing pipeline over raw records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .bucketing import BucketMap
from .context import IngestBatch, PipelineContext
from .deduplication import DeduplicationPhase
from .orchestrator import IngestionPipeline
from .validation import ValidationPhase

if TYPE_CHECKING:
    from collections.abc import Iterable

    from smbdir.domain.model import ValidationResults


def default_pipeline() -> IngestionPipeline:
    return IngestionPipeline(phases=(ValidationPhase(), DeduplicationPhase()))


def run_sealing_pipeline(
    raw_records: Iterable[object],
    *,
    results: ValidationResults | None = None,
    fallback_industry: str | None = None,
) -> PipelineContext:
    """Run validation and deduplication over ``raw_records``.

    ``results`` lets the caller keep the counters the loader already started
    (``total``). The returned context carries the results and bucket map.
    """

    context = PipelineContext(fallback_industry=fallback_industry)
    if results is not None:
        context.results = results
    batch = IngestBatch(raw_records=list(raw_records))
    default_pipeline().run(batch, context=context)
    if context.buckets is None:
        context.buckets = BucketMap()
    return context
