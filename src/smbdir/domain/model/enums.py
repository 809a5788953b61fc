"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class IssueKind(StrEnum):
    """Discriminator for entries in the validation warnings list."""

    HARD_REJECT = "hard-reject"
    SOFT_WARNING = "soft-warning"
    DUPLICATE = "duplicate"


class Severity(StrEnum):
    HARD = "hard"
    SOFT = "soft"
