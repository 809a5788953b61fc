"""Cross-bucket duplicate detection over all accepted businesses."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from smbdir.domain.ingest_pipeline.orchestrator import PipelinePhase

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smbdir.domain.ingest_pipeline.context import IngestBatch, PipelineContext
    from smbdir.domain.model import Business


log = getLogger(__name__)


def is_duplicate(first: Business, second: Business) -> bool:
    """Return True when two records describe the same business.

    Any one of: identical formatted phone; same name (case-insensitive) in the
    same city; same street (case-insensitive), city and ZIP.
    """

    if first.phone == second.phone:
        return True

    same_city = first.address.city == second.address.city
    if same_city and first.name.lower() == second.name.lower():
        return True

    return (
        same_city
        and first.address.street.lower() == second.address.street.lower()
        and first.address.zip_code == second.address.zip_code
    )


def find_duplicates(businesses: Sequence[Business]) -> dict[str, Business]:
    """Map each duplicate's id to the first earlier record it matches.

    Every unordered pair is compared in input order, so the cost is O(n^2).
    Records already flagged still count as originals for later pairs.
    Narrowing candidates (by phone or normalized name) is the path for batches
    well beyond a few thousand records; the matching rules must stay the same.
    """

    originals: dict[str, Business] = {}
    for i, first in enumerate(businesses):
        for second in businesses[i + 1 :]:
            if second.id in originals:
                continue
            if is_duplicate(first, second):
                originals[second.id] = first
    return originals


@dataclass(slots=True)
class DeduplicationPhase(PipelinePhase):
    """Drop the later record of every duplicate pair from the batch and buckets.

    ``duplicates`` counts removed records: a record matching several earlier
    ones is counted and reported once, against the first of them.
    """

    name: str = "deduplication"

    def run(self, batch: IngestBatch, *, context: PipelineContext) -> None:
        buckets = context.buckets
        if buckets is None:
            raise RuntimeError("Validation must run before deduplication")

        originals = find_duplicates(batch.accepted)
        for business in batch.accepted:
            original = originals.get(business.id)
            if original is not None:
                context.results.flag_duplicate(business.name, original.name)

        batch.accepted[:] = [
            business for business in batch.accepted if business.id not in originals
        ]
        buckets.discard(originals.keys())
        log.info("Removed %d duplicate records", len(originals))
