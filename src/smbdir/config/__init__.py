"""Application configuration helpers."""

from __future__ import annotations

from .env import env_path, optional_env
from .errors import ConfigurationError
from .logging import configure_logging
from .pipeline import PipelineSettings, get_pipeline_settings
from .storage import SealingPaths, get_sealing_paths

__all__ = [
    "ConfigurationError",
    "PipelineSettings",
    "SealingPaths",
    "configure_logging",
    "env_path",
    "get_pipeline_settings",
    "get_sealing_paths",
    "optional_env",
]
