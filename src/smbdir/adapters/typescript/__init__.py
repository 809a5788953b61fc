"""TypeScript data-module generation."""

from __future__ import annotations

from .emitter import constant_name, render_module, ts_string, write_module

__all__ = ["constant_name", "render_module", "ts_string", "write_module"]
