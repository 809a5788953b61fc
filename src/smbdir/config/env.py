"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from pathlib import Path


def optional_env(name: str) -> str | None:
    """Return the stripped value of ``name`` or ``None`` when unset/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_path(name: str, default: Path) -> Path:
    """Return ``name`` as a path, falling back to ``default``."""

    value = optional_env(name)
    return Path(value) if value else default
