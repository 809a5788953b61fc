from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from smbdir.config import SealingPaths

if TYPE_CHECKING:
    from pathlib import Path

FROZEN_NOW = datetime(2025, 8, 11, 9, 30, 15, tzinfo=UTC)


@pytest.fixture
def frozen_now() -> datetime:
    return FROZEN_NOW


@pytest.fixture
def sealing_paths(tmp_path: Path) -> SealingPaths:
    return SealingPaths(
        input_dir=tmp_path / "raw-business-data",
        output_module=tmp_path / "lib" / "data" / "businesses.ts",
        backup_dir=tmp_path / "data-backups",
        reports_dir=tmp_path / "validation-reports",
    )


@pytest.fixture(autouse=True)
def _clear_smbdir_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SMBDIR_INPUT_DIR",
        "SMBDIR_OUTPUT_MODULE",
        "SMBDIR_BACKUP_DIR",
        "SMBDIR_REPORTS_DIR",
        "SMBDIR_FALLBACK_INDUSTRY",
    ):
        monkeypatch.delenv(name, raising=False)
