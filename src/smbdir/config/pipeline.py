"""Pipeline behaviour settings."""

from __future__ import annotations

from dataclasses import dataclass

from smbdir.domain.directory import INDUSTRIES

from .env import optional_env
from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class PipelineSettings:
    """Knobs for the sealing pipeline.

    ``fallback_industry`` routes records whose trade cannot be mapped into the
    given industry instead of rejecting them (legacy behaviour used
    ``electricians``).
    """

    fallback_industry: str | None = None

    def __post_init__(self) -> None:
        if self.fallback_industry is not None and self.fallback_industry not in INDUSTRIES:
            supported = ", ".join(INDUSTRIES)
            raise ConfigurationError(
                f"Unsupported fallback industry: {self.fallback_industry} "
                f"(expected one of: {supported})"
            )


def get_pipeline_settings() -> PipelineSettings:
    return PipelineSettings(fallback_industry=optional_env("SMBDIR_FALLBACK_INDUSTRY"))
