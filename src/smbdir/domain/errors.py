"""Pipeline error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class SealingError(RuntimeError):
    """Base class for errors that abort a sealing run."""


class NoInputDataError(SealingError):
    """Raised when no raw business records were found in any candidate source."""

    def __init__(
        self,
        input_dir: Path,
        candidates: Sequence[str],
        *,
        sample_path: Path | None = None,
    ) -> None:
        self.input_dir = input_dir
        self.candidates = tuple(candidates)
        self.sample_path = sample_path
        accepted = ", ".join(name for name in self.candidates if name.endswith(".json"))
        message = f"No business data found in {input_dir} (expected one of: {accepted})"
        if sample_path is not None:
            message += f"; sample structure written to {sample_path}"
        super().__init__(message)
