"""Validation report writers (machine-readable JSON and a plain-text summary)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from smbdir.domain.directory import CITIES, INDUSTRIES, city_display_name, industry_display_name

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path

    from smbdir.domain.ingest_pipeline import BucketMap
    from smbdir.domain.model import ValidationResults

log = getLogger(__name__)

REPORT_TITLE = "Oregon SMB Directory - Data Sealing Report"


@dataclass(frozen=True, slots=True)
class ReportPaths:
    report: Path
    summary: Path


def report_paths(reports_dir: Path, generated_at: datetime) -> ReportPaths:
    day = generated_at.date().isoformat()
    return ReportPaths(
        report=reports_dir / f"validation-report-{day}.json",
        summary=reports_dir / f"validation-summary-{day}.txt",
    )


def build_report(
    results: ValidationResults,
    buckets: BucketMap,
    *,
    generated_at: datetime,
) -> dict[str, object]:
    summary = results.to_dict()
    return {
        "timestamp": generated_at.isoformat(),
        "summary": summary,
        "businessDistribution": buckets.distribution(),
        "detailedWarnings": summary["warnings"],
    }


def _heading(title: str) -> list[str]:
    return [title, "=" * len(title)]


def render_summary(
    results: ValidationResults,
    buckets: BucketMap,
    *,
    generated_at: datetime,
) -> str:
    lines = [REPORT_TITLE, f"Generated: {generated_at.isoformat()}", ""]

    lines.extend(_heading("VALIDATION SUMMARY"))
    lines.extend(
        (
            f"Total Records Processed: {results.total}",
            f"Valid Records: {results.valid}",
            f"Invalid Records: {results.invalid}",
            f"Duplicates Removed: {results.duplicates}",
            f"Warnings: {len(results.warnings)}",
            "",
        )
    )

    lines.extend(_heading("BUSINESS DISTRIBUTION"))
    for city in CITIES:
        lines.append(f"{city_display_name(city)}:")
        for industry in INDUSTRIES:
            count = buckets.count(city, industry)
            if count:
                lines.append(f"  {industry_display_name(industry)}: {count}")
        lines.append(f"  Total: {buckets.city_total(city)}")
        lines.append("")

    if results.warnings:
        lines.extend(_heading("WARNINGS"))
        for warning in results.warnings:
            lines.append(f"{warning.business} [{warning.kind}]:")
            lines.extend(f"  - {issue}" for issue in warning.issues)
            lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"


def write_reports(
    reports_dir: Path,
    results: ValidationResults,
    buckets: BucketMap,
    *,
    generated_at: datetime,
) -> ReportPaths:
    """Overwrite the JSON report and text summary for ``generated_at``'s date."""

    reports_dir.mkdir(parents=True, exist_ok=True)
    paths = report_paths(reports_dir, generated_at)

    report = build_report(results, buckets, generated_at=generated_at)
    paths.report.write_text(json.dumps(report, indent=2) + "\n", encoding="utf-8")
    paths.summary.write_text(
        render_summary(results, buckets, generated_at=generated_at), encoding="utf-8"
    )

    log.info("Validation report: %s", paths.report)
    log.info("Summary report: %s", paths.summary)
    return paths
