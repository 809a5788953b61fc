from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from smbdir.domain.errors import NoInputDataError
from smbdir.ui import cli

if TYPE_CHECKING:
    from smbdir.config import PipelineSettings, SealingPaths


def _capture_seal(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    captured: dict[str, object] = {}

    def fake_seal(paths: SealingPaths, *, settings: PipelineSettings | None = None) -> object:
        captured["paths"] = paths
        captured["settings"] = settings

        class _Result:
            module_path = paths.output_module

        return _Result()

    monkeypatch.setattr(cli, "seal_business_data", fake_seal)
    return captured


def test_main_cli_defaults_to_seal(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture_seal(monkeypatch)

    cli.main([])

    paths = captured["paths"]
    assert paths.input_dir == Path("raw-business-data")  # type: ignore[attr-defined]
    assert paths.output_module == Path("lib/data/businesses.ts")  # type: ignore[attr-defined]
    assert captured["settings"].fallback_industry is None  # type: ignore[attr-defined]


def test_main_cli_with_flags(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured = _capture_seal(monkeypatch)

    cli.main(
        [
            "--input-dir",
            str(tmp_path / "in"),
            "--output",
            str(tmp_path / "out.ts"),
            "--fallback-industry",
            "plumbers",
        ]
    )

    paths = captured["paths"]
    assert paths.input_dir == tmp_path / "in"  # type: ignore[attr-defined]
    assert paths.output_module == tmp_path / "out.ts"  # type: ignore[attr-defined]
    assert paths.reports_dir == Path("validation-reports")  # type: ignore[attr-defined]
    assert captured["settings"].fallback_industry == "plumbers"  # type: ignore[attr-defined]


def test_main_cli_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture_seal(monkeypatch)
    monkeypatch.setenv("SMBDIR_REPORTS_DIR", "/tmp/reports")
    monkeypatch.setenv("SMBDIR_FALLBACK_INDUSTRY", "roofers")

    cli.main(["seal"])

    assert captured["paths"].reports_dir == Path("/tmp/reports")  # type: ignore[attr-defined]
    assert captured["settings"].fallback_industry == "roofers"  # type: ignore[attr-defined]


def test_main_cli_invalid_fallback_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    _capture_seal(monkeypatch)
    monkeypatch.setenv("SMBDIR_FALLBACK_INDUSTRY", "bakeries")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2


def test_main_cli_missing_input_exits_with_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_seal(paths: SealingPaths, **_: object) -> None:
        raise NoInputDataError(paths.input_dir, ("businesses.json",))

    monkeypatch.setattr(cli, "seal_business_data", fake_seal)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 1


def test_main_cli_sample_command(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def fail_seal(*_: object, **__: object) -> None:
        raise AssertionError("seal should not run")

    monkeypatch.setattr(cli, "seal_business_data", fail_seal)

    cli.main(["sample", "--input-dir", str(tmp_path)])

    assert (tmp_path / "sample-business-structure.json").is_file()
