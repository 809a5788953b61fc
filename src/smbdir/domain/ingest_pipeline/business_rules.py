"""Domain rules applied to canonical records after transformation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from smbdir.domain.directory import (
    INDUSTRIES,
    MAX_PHONE_DIGITS,
    MIN_PHONE_DIGITS,
    OREGON_AREA_CODES,
    OREGON_ZIP_PREFIX,
    SUPPORTED_CITY_NAMES,
    ZIP_CODE_PATTERN,
)
from smbdir.domain.ingest_pipeline.transformation import phone_digits
from smbdir.domain.model import Severity

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from smbdir.domain.model import Business


@dataclass(frozen=True, slots=True)
class RuleViolation:
    severity: Severity
    message: str

    @property
    def is_hard(self) -> bool:
        return self.severity is Severity.HARD


def _hard(message: str) -> RuleViolation:
    return RuleViolation(Severity.HARD, message)


def _soft(message: str) -> RuleViolation:
    return RuleViolation(Severity.SOFT, message)


def check_phone(business: Business) -> Iterator[RuleViolation]:
    digits = phone_digits(business.phone)
    if not MIN_PHONE_DIGITS <= len(digits) <= MAX_PHONE_DIGITS:
        yield _hard(f"Invalid phone number length: {business.phone}")
        return
    area_code = digits[:3]
    if area_code not in OREGON_AREA_CODES:
        yield _soft(f"Non-Oregon area code: {area_code}")


def check_zip_code(business: Business) -> Iterator[RuleViolation]:
    zip_code = business.address.zip_code
    if not ZIP_CODE_PATTERN.match(zip_code):
        yield _hard(f"Invalid ZIP code: {zip_code}")
        return
    if not zip_code.startswith(OREGON_ZIP_PREFIX):
        yield _soft(f"Non-Oregon ZIP code: {zip_code}")


def check_city(business: Business) -> Iterator[RuleViolation]:
    if business.city not in SUPPORTED_CITY_NAMES:
        yield _hard(f"Unsupported city: {business.city}")


def check_industry(business: Business) -> Iterator[RuleViolation]:
    if business.industry not in INDUSTRIES:
        yield _hard(f"Unsupported industry: {business.industry or business.trade}")


RULES: tuple[Callable[[Business], Iterator[RuleViolation]], ...] = (
    check_phone,
    check_zip_code,
    check_city,
    check_industry,
)


def evaluate_business_rules(business: Business) -> list[RuleViolation]:
    """Run every rule in order and stop at the first hard violation.

    Soft violations found before that point are kept so they still reach the
    warnings list.
    """

    violations: list[RuleViolation] = []
    for rule in RULES:
        for violation in rule(business):
            violations.append(violation)
            if violation.is_hard:
                return violations
    return violations
