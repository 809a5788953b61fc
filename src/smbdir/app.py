"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from smbdir.adapters.backup import create_backup
from smbdir.adapters.raw_files import JsonDirectorySource, write_sample_structure
from smbdir.adapters.reports import write_reports
from smbdir.adapters.typescript import write_module
from smbdir.config import PipelineSettings
from smbdir.domain.directory import CITIES, city_display_name
from smbdir.domain.ingest_pipeline import BucketMap, run_sealing_pipeline
from smbdir.domain.model import ValidationResults

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from smbdir.config import SealingPaths
    from smbdir.domain.ports import RawRecordSource


log = getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class SealingResult:
    """Outcome of one sealing run."""

    results: ValidationResults
    buckets: BucketMap
    module_path: Path
    report_path: Path
    summary_path: Path
    backup_path: Path | None


def seal_business_data(
    paths: SealingPaths,
    *,
    settings: PipelineSettings | None = None,
    source: RawRecordSource | None = None,
    now_provider: Callable[[], datetime] = _utcnow,
) -> SealingResult:
    """Load, validate, deduplicate and publish the directory's business data.

    The previous module is backed up before anything is read. Raises
    ``NoInputDataError`` when no raw records exist; every per-record problem is
    recorded in the results instead.
    """

    effective_settings = settings or PipelineSettings()
    effective_source = source or JsonDirectorySource(paths.input_dir)

    paths.ensure_directories()
    backup_path = create_backup(paths.output_module, paths.backup_dir, timestamp=now_provider())

    log.info("Loading raw business data from %s", paths.input_dir)
    load = effective_source()
    results = ValidationResults(total=len(load.records))

    context = run_sealing_pipeline(
        load.records,
        results=results,
        fallback_industry=effective_settings.fallback_industry,
    )
    buckets = context.buckets or BucketMap()

    generated_at = now_provider()
    module_path = write_module(paths.output_module, buckets, generated_at=generated_at)
    report_paths = write_reports(paths.reports_dir, results, buckets, generated_at=generated_at)

    _log_results(results, buckets)
    return SealingResult(
        results=results,
        buckets=buckets,
        module_path=module_path,
        report_path=report_paths.report,
        summary_path=report_paths.summary,
        backup_path=backup_path,
    )


def create_sample_structure(paths: SealingPaths) -> Path:
    """Write the sample record template into the configured input directory."""

    return write_sample_structure(paths.input_dir)


def _log_results(results: ValidationResults, buckets: BucketMap) -> None:
    log.info(
        "Data sealing complete: total=%d, valid=%d, invalid=%d, duplicates=%d, warnings=%d",
        results.total,
        results.valid,
        results.invalid,
        results.duplicates,
        len(results.warnings),
    )
    for city in CITIES:
        city_total = buckets.city_total(city)
        if city_total:
            log.info("  %s: %d businesses", city_display_name(city), city_total)
    if results.warnings:
        log.warning(
            "%d warnings generated. Check validation reports for details.", len(results.warnings)
        )
