"""Ports for loading raw business records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(slots=True)
class RawRecordLoad:
    """Raw records concatenated in source-then-array order."""

    records: list[object] = field(default_factory=list[object])
    sources: list[str] = field(default_factory=list[str])


@runtime_checkable
class RawRecordSource(Protocol):
    """Callable port returning every raw record available for a run."""

    def __call__(self) -> RawRecordLoad: ...


__all__ = ["RawRecordLoad", "RawRecordSource"]
