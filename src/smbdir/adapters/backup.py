"""Timestamped backups of the generated data module."""

from __future__ import annotations

import shutil
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path

log = getLogger(__name__)


def backup_filename(timestamp: datetime) -> str:
    stamp = timestamp.isoformat().replace(":", "-")
    return f"businesses-backup-{stamp}.ts"


def create_backup(source: Path, backup_dir: Path, *, timestamp: datetime) -> Path | None:
    """Copy ``source`` into ``backup_dir`` and return the copy's path.

    Returns ``None`` when there is nothing to back up yet.
    """

    if not source.is_file():
        log.info("No existing data to backup at %s", source)
        return None

    backup_dir.mkdir(parents=True, exist_ok=True)
    target = backup_dir / backup_filename(timestamp)
    shutil.copyfile(source, target)
    log.info("Backup created: %s", target.name)
    return target
