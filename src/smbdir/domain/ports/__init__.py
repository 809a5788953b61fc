"""Domain ports."""

from __future__ import annotations

from .sources import RawRecordLoad, RawRecordSource

__all__ = ["RawRecordLoad", "RawRecordSource"]
