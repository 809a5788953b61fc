"""Public domain model surface."""

from __future__ import annotations

from smbdir.domain.model.business import Address, Business
from smbdir.domain.model.enums import IssueKind, Severity
from smbdir.domain.model.validation import UNKNOWN_BUSINESS, ValidationIssue, ValidationResults

__all__ = [
    "UNKNOWN_BUSINESS",
    "Address",
    "Business",
    "IssueKind",
    "Severity",
    "ValidationIssue",
    "ValidationResults",
]
