from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from smbdir.adapters.raw_files import (
    SAMPLE_FILENAME,
    JsonDirectorySource,
    load_raw_records,
)
from smbdir.domain.errors import NoInputDataError
from tests.helpers.businesses import make_raw_business

if TYPE_CHECKING:
    from pathlib import Path


def _write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


def test_loader_concatenates_candidates_in_order(tmp_path: Path) -> None:
    _write_json(tmp_path / "collected-data.json", [make_raw_business(name="Third")])
    _write_json(
        tmp_path / "businesses.json",
        [make_raw_business(name="First"), make_raw_business(name="Second")],
    )

    load = load_raw_records(tmp_path)

    names = [record["name"] for record in load.records]  # type: ignore[index]
    assert names == ["First", "Second", "Third"]
    assert load.sources == ["businesses.json", "collected-data.json"]


def test_loader_wraps_single_object(tmp_path: Path) -> None:
    _write_json(tmp_path / "oregon-businesses.json", make_raw_business(name="Solo"))

    load = load_raw_records(tmp_path)

    assert len(load.records) == 1
    assert load.sources == ["oregon-businesses.json"]


def test_loader_skips_csv_and_malformed_json(tmp_path: Path) -> None:
    (tmp_path / "business-listings.csv").write_text("name,phone\nA,503\n", encoding="utf-8")
    (tmp_path / "businesses.json").write_text("{not json", encoding="utf-8")
    _write_json(tmp_path / "collected-data.json", [make_raw_business()])

    load = load_raw_records(tmp_path)

    assert len(load.records) == 1
    assert load.sources == ["collected-data.json"]


def test_loader_writes_sample_when_nothing_found(tmp_path: Path) -> None:
    input_dir = tmp_path / "raw"

    with pytest.raises(NoInputDataError) as excinfo:
        load_raw_records(input_dir)

    sample_path = input_dir / SAMPLE_FILENAME
    assert sample_path.is_file()
    assert excinfo.value.sample_path == sample_path
    assert "businesses.json" in str(excinfo.value)
    assert "business-listings.csv" not in str(excinfo.value)
    sample = json.loads(sample_path.read_text(encoding="utf-8"))
    assert isinstance(sample, list)
    assert sample[0]["address"]["state"] == "OR"


def test_empty_candidate_list_counts_as_no_data(tmp_path: Path) -> None:
    _write_json(tmp_path / "businesses.json", [])

    with pytest.raises(NoInputDataError):
        load_raw_records(tmp_path)


def test_json_directory_source_reads_its_directory(tmp_path: Path) -> None:
    _write_json(tmp_path / "businesses.json", [make_raw_business()])
    source = JsonDirectorySource(tmp_path)

    load = source()

    assert load.sources == ["businesses.json"]


def test_loader_skips_undecodable_file(tmp_path: Path) -> None:
    (tmp_path / "businesses.json").write_bytes(b"\xff\xfe[{]")
    _write_json(tmp_path / "oregon-businesses.json", [make_raw_business()])

    load = load_raw_records(tmp_path)

    assert len(load.records) == 1
    assert load.sources == ["oregon-businesses.json"]
