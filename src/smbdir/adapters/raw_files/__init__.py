"""Raw business record files (JSON drops in the input directory)."""

from __future__ import annotations

from .loader import CANDIDATE_SOURCES, JsonDirectorySource, load_raw_records
from .sample import SAMPLE_BUSINESS, SAMPLE_FILENAME, write_sample_structure

__all__ = [
    "CANDIDATE_SOURCES",
    "SAMPLE_BUSINESS",
    "SAMPLE_FILENAME",
    "JsonDirectorySource",
    "load_raw_records",
    "write_sample_structure",
]
