"""Run-wide validation accumulator and tagged warning entries."""

from __future__ import annotations

from dataclasses import dataclass, field

from smbdir.domain.model.enums import IssueKind

UNKNOWN_BUSINESS = "Unknown"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """One warnings-list entry: which record, what kind, and the messages."""

    kind: IssueKind
    business: str
    issues: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        return {"business": self.business, "kind": str(self.kind), "issues": list(self.issues)}


@dataclass(slots=True)
class ValidationResults:
    """Counters and warnings accumulated across one sealing run."""

    total: int = 0
    valid: int = 0
    invalid: int = 0
    duplicates: int = 0
    warnings: list[ValidationIssue] = field(default_factory=list[ValidationIssue])

    def reject(self, business: str, issues: list[str] | tuple[str, ...]) -> None:
        self.invalid += 1
        self.warnings.append(ValidationIssue(IssueKind.HARD_REJECT, business, tuple(issues)))

    def warn(self, business: str, message: str) -> None:
        self.warnings.append(ValidationIssue(IssueKind.SOFT_WARNING, business, (message,)))

    def flag_duplicate(self, business: str, original: str) -> None:
        self.duplicates += 1
        self.warnings.append(
            ValidationIssue(IssueKind.DUPLICATE, business, (f"Potential duplicate of: {original}",))
        )

    def issues_of(self, kind: IssueKind) -> list[ValidationIssue]:
        return [issue for issue in self.warnings if issue.kind is kind]

    def to_dict(self) -> dict[str, object]:
        return {
            "total": self.total,
            "valid": self.valid,
            "invalid": self.invalid,
            "duplicates": self.duplicates,
            "warnings": [issue.to_dict() for issue in self.warnings],
        }
