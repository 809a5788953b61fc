"""Phase-based orchestrator for the sealing pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from smbdir.domain.ingest_pipeline.context import IngestBatch, PipelineContext

if TYPE_CHECKING:
    from collections.abc import Sequence

log = getLogger(__name__)


class PipelinePhase(Protocol):
    """One sealing stage.

    Phases mutate ``batch.accepted`` and record every rejection or warning on
    ``context.results``; they never raise for a single bad record.
    """

    name: str

    def run(self, batch: IngestBatch, *, context: PipelineContext) -> None: ...


@dataclass(slots=True)
class IngestionPipeline:
    """Ordered sequence of sealing phases sharing one context."""

    phases: Sequence[PipelinePhase] = field(default_factory=tuple)

    def with_phase(self, phase: PipelinePhase) -> IngestionPipeline:
        """Return a new pipeline appending ``phase`` at the end."""

        return IngestionPipeline(phases=(*self.phases, phase))

    def run(self, batch: IngestBatch, *, context: PipelineContext | None = None) -> IngestBatch:
        active_context = context or PipelineContext()
        for phase in self.phases:
            before = len(batch.accepted)
            log.info("Running %s phase", phase.name)
            phase.run(batch, context=active_context)
            log.debug(
                "%s phase finished: %d accepted (was %d), %d warnings so far",
                phase.name,
                len(batch.accepted),
                before,
                len(active_context.results.warnings),
            )
        return batch
