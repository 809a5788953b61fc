"""Filesystem locations used by a sealing run."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Final

from .env import env_path

DEFAULT_INPUT_DIR: Final[Path] = Path("raw-business-data")
DEFAULT_OUTPUT_MODULE: Final[Path] = Path("lib/data/businesses.ts")
DEFAULT_BACKUP_DIR: Final[Path] = Path("data-backups")
DEFAULT_REPORTS_DIR: Final[Path] = Path("validation-reports")


@dataclass(frozen=True, slots=True)
class SealingPaths:
    input_dir: Path = DEFAULT_INPUT_DIR
    output_module: Path = DEFAULT_OUTPUT_MODULE
    backup_dir: Path = DEFAULT_BACKUP_DIR
    reports_dir: Path = DEFAULT_REPORTS_DIR

    def with_overrides(self, **overrides: Path | None) -> SealingPaths:
        """Return a copy with every non-``None`` override applied."""

        changes = {name: value for name, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def ensure_directories(self) -> None:
        for directory in (self.input_dir, self.backup_dir, self.reports_dir):
            directory.mkdir(parents=True, exist_ok=True)


def get_sealing_paths() -> SealingPaths:
    return SealingPaths(
        input_dir=env_path("SMBDIR_INPUT_DIR", DEFAULT_INPUT_DIR),
        output_module=env_path("SMBDIR_OUTPUT_MODULE", DEFAULT_OUTPUT_MODULE),
        backup_dir=env_path("SMBDIR_BACKUP_DIR", DEFAULT_BACKUP_DIR),
        reports_dir=env_path("SMBDIR_REPORTS_DIR", DEFAULT_REPORTS_DIR),
    )
