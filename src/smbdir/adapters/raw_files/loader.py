"""Load raw business records from the candidate files of an input directory."""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final, cast

from smbdir.domain.errors import NoInputDataError
from smbdir.domain.ports import RawRecordLoad, RawRecordSource

from .sample import write_sample_structure

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)

CANDIDATE_SOURCES: Final[tuple[str, ...]] = (
    "businesses.json",
    "oregon-businesses.json",
    "collected-data.json",
    "business-listings.csv",
)


def _read_json_records(path: Path) -> list[object] | None:
    try:
        document: object = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        log.warning("Skipping %s: unreadable (%s)", path.name, exc)
        return None
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError
        log.warning("Skipping %s: invalid JSON (%s)", path.name, exc)
        return None
    if isinstance(document, list):
        return list(cast(list[object], document))
    return [document]


def load_raw_records(
    input_dir: Path,
    *,
    candidates: tuple[str, ...] = CANDIDATE_SOURCES,
) -> RawRecordLoad:
    """Concatenate the records of every existing candidate file, in order.

    A top-level JSON object counts as a single record. CSV candidates are not
    supported and are skipped with a log line. When nothing is found a sample
    template is written to ``input_dir`` and ``NoInputDataError`` is raised.
    """

    load = RawRecordLoad()
    for name in candidates:
        path = input_dir / name
        if not path.is_file():
            log.debug("No %s in %s", name, input_dir)
            continue
        if name.endswith(".csv"):
            log.warning("CSV parsing for %s is not supported; skipping", name)
            continue
        if not name.endswith(".json"):
            log.warning("Unsupported input format for %s; skipping", name)
            continue

        records = _read_json_records(path)
        if records is None:
            continue
        load.records.extend(records)
        load.sources.append(name)
        log.info("Loaded %d records from %s", len(records), name)

    if not load.records:
        sample_path = write_sample_structure(input_dir)
        raise NoInputDataError(input_dir, candidates, sample_path=sample_path)

    return load


@dataclass(frozen=True, slots=True)
class JsonDirectorySource(RawRecordSource):
    """``RawRecordSource`` reading the candidate JSON files of one directory."""

    input_dir: Path
    candidates: tuple[str, ...] = CANDIDATE_SOURCES

    def __call__(self) -> RawRecordLoad:
        return load_raw_records(self.input_dir, candidates=self.candidates)
