"""Structural checks on untrusted raw business records."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import cast

from smbdir.domain.directory import OREGON_STATE_CODE

REQUIRED_FIELDS: tuple[str, ...] = ("name", "phone")
ADDRESS_FIELDS: tuple[str, ...] = ("street", "city", "state", "zipCode")


def is_blank(value: object) -> bool:
    """Return True for absent, falsy or whitespace-only values."""

    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, int | float):
        return value == 0 or math.isnan(value)
    return value is None


def validate_fields(raw: object) -> list[str]:
    """Return the structural issues of ``raw``; an empty list means it passes.

    ``name`` and ``phone`` must be present, ``address`` must be an object with
    every subfield filled in, and a present state must be exactly ``OR``.
    """

    if not isinstance(raw, Mapping):
        return ["Record is not an object"]
    record = cast(Mapping[str, object], raw)

    issues: list[str] = [
        f"Missing required field: {name}" for name in REQUIRED_FIELDS if is_blank(record.get(name))
    ]

    address = record.get("address")
    if not isinstance(address, Mapping):
        issues.append("Missing or invalid address object")
        return issues

    address_fields = cast(Mapping[str, object], address)
    issues.extend(
        f"Missing address.{name}" for name in ADDRESS_FIELDS if is_blank(address_fields.get(name))
    )

    state = address_fields.get("state")
    if not is_blank(state) and state != OREGON_STATE_CODE:
        issues.append(f"Invalid state: {state} (must be {OREGON_STATE_CODE})")

    return issues


def record_label(raw: object) -> str | None:
    """Best-effort display name of a raw record for the warnings list."""

    if not isinstance(raw, Mapping):
        return None
    name = cast(Mapping[str, object], raw).get("name")
    if is_blank(name):
        return None
    return str(name).strip()
