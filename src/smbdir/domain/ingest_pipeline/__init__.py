"""Business-data sealing pipeline.

The pipeline is split into explicit, testable phases. Each phase operates on
an ``IngestBatch`` and communicates through a shared ``PipelineContext`` that
owns the run-wide id counter, validation results and bucket map.
"""

from __future__ import annotations

from .bucketing import BucketMap, bucket_key
from .context import IngestBatch, PipelineContext
from .deduplication import DeduplicationPhase, find_duplicates, is_duplicate
from .orchestrator import IngestionPipeline, PipelinePhase
from .runner import default_pipeline, run_sealing_pipeline
from .validation import ValidationPhase

__all__ = [
    "BucketMap",
    "DeduplicationPhase",
    "IngestBatch",
    "IngestionPipeline",
    "PipelineContext",
    "PipelinePhase",
    "ValidationPhase",
    "bucket_key",
    "default_pipeline",
    "find_duplicates",
    "is_duplicate",
    "run_sealing_pipeline",
]
