from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from smbdir.app import create_sample_structure, seal_business_data
from smbdir.config import PipelineSettings
from smbdir.domain.errors import NoInputDataError
from smbdir.domain.model import IssueKind
from tests.helpers.businesses import FakeRawRecordSource, make_raw_business

if TYPE_CHECKING:
    from datetime import datetime

    from smbdir.config import SealingPaths


def _write_input(paths: SealingPaths, records: list[dict[str, object]]) -> None:
    paths.input_dir.mkdir(parents=True, exist_ok=True)
    (paths.input_dir / "businesses.json").write_text(json.dumps(records), encoding="utf-8")


def test_duplicate_phone_is_published_once(
    sealing_paths: SealingPaths, frozen_now: datetime
) -> None:
    _write_input(
        sealing_paths,
        [make_raw_business(), make_raw_business(name="Rose City Electrical Services")],
    )

    result = seal_business_data(sealing_paths, now_provider=lambda: frozen_now)

    assert result.results.total == 2
    assert result.results.valid == 2
    assert result.results.duplicates == 1
    assert result.buckets.count("portland", "electricians") == 1

    module = result.module_path.read_text(encoding="utf-8")
    assert "export const PORTLAND_ELECTRICIANS: Business[] = [" in module
    assert module.count("id: 'rose-city-electric-portland-1',") == 1
    assert "rose-city-electrical-services" not in module
    assert "phone: '(503) 555-1234'," in module
    assert "website: 'https://rosecityelectric.com'," in module
    assert "services: ['Panel Upgrades', 'EV Chargers']," in module
    assert "verified: true," in module

    report = json.loads(result.report_path.read_text(encoding="utf-8"))
    assert report["summary"]["duplicates"] == 1
    assert report["businessDistribution"] == {"portland": {"electricians": 1}}
    assert result.summary_path.is_file()


def test_unsupported_industry_is_rejected(
    sealing_paths: SealingPaths, frozen_now: datetime
) -> None:
    source = FakeRawRecordSource(records=[make_raw_business(industry="bakeries")])

    result = seal_business_data(sealing_paths, source=source, now_provider=lambda: frozen_now)

    assert source.calls == 1
    assert result.results.invalid == 1
    assert result.results.valid == 0
    assert result.buckets.total() == 0
    [rejection] = result.results.issues_of(IssueKind.HARD_REJECT)
    assert rejection.business == "Rose City Electric"
    assert rejection.issues == ("Unsupported industry: bakeries",)
    assert "Rose City Electric" not in result.module_path.read_text(encoding="utf-8")


def test_fallback_industry_routes_unmapped_trades(
    sealing_paths: SealingPaths, frozen_now: datetime
) -> None:
    source = FakeRawRecordSource(records=[make_raw_business(industry="bakeries")])

    result = seal_business_data(
        sealing_paths,
        settings=PipelineSettings(fallback_industry="electricians"),
        source=source,
        now_provider=lambda: frozen_now,
    )

    [business] = result.buckets.get("portland", "electricians")
    assert business.trade == "Service Provider"
    assert result.results.invalid == 0


def test_previous_module_is_backed_up_before_overwrite(
    sealing_paths: SealingPaths, frozen_now: datetime
) -> None:
    sealing_paths.output_module.parent.mkdir(parents=True)
    sealing_paths.output_module.write_text("// previous\n", encoding="utf-8")
    source = FakeRawRecordSource(records=[make_raw_business()])

    result = seal_business_data(sealing_paths, source=source, now_provider=lambda: frozen_now)

    assert result.backup_path is not None
    assert result.backup_path.read_text(encoding="utf-8") == "// previous\n"
    assert result.module_path.read_text(encoding="utf-8") != "// previous\n"


def test_missing_input_aborts_without_writing_module(
    sealing_paths: SealingPaths, frozen_now: datetime
) -> None:
    with pytest.raises(NoInputDataError):
        seal_business_data(sealing_paths, now_provider=lambda: frozen_now)

    assert not sealing_paths.output_module.exists()
    assert (sealing_paths.input_dir / "sample-business-structure.json").is_file()


def test_create_sample_structure_writes_template(sealing_paths: SealingPaths) -> None:
    path = create_sample_structure(sealing_paths)

    assert path.parent == sealing_paths.input_dir
    assert json.loads(path.read_text(encoding="utf-8"))[0]["industry"] == "electricians"
