"""Transform field-validated payloads into canonical ``Business`` records."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from smbdir.domain.directory import (
    CITY_NAME_TABLE,
    FALLBACK_TRADE,
    INDUSTRY_TO_TRADE,
    OREGON_STATE_CODE,
    TRADE_TO_INDUSTRY,
)
from smbdir.domain.model import Address, Business

if TYPE_CHECKING:
    from collections.abc import Iterable

    from smbdir.domain.ingest_pipeline.payload import BusinessPayload

NAME_SLUG_MAX_LENGTH = 30

_NON_WORD = re.compile(r"[^\w\s-]")
_WHITESPACE = re.compile(r"\s+")
_NON_DIGIT = re.compile(r"\D")


def slugify(value: str, *, max_length: int | None = None) -> str:
    """Lowercase, strip non-word characters and hyphenate whitespace."""

    slug = _NON_WORD.sub("", value.lower())
    slug = _WHITESPACE.sub("-", slug)
    if max_length is not None:
        slug = slug[:max_length]
    return slug


def phone_digits(phone: str) -> str:
    return _NON_DIGIT.sub("", phone)


def format_phone_number(phone: str) -> str:
    """Format 10-digit (or 1 + 10-digit) numbers as ``(NNN) NNN-NNNN``.

    Anything else is returned unchanged; the business rules reject it later.
    """

    digits = phone_digits(phone)
    if len(digits) == 11 and digits[0] == "1":
        digits = digits[1:]
    elif len(digits) != 10:
        return phone
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def format_website(website: str | None) -> str | None:
    if website is None:
        return None
    website = website.strip()
    if not website:
        return None
    if not website.startswith("http"):
        website = f"https://{website}"
    return website


def format_city_name(city: str) -> str:
    """Map known spellings onto the directory's city names; pass others through trimmed."""

    stripped = city.strip()
    return CITY_NAME_TABLE.get(stripped.lower(), stripped)


def format_services(services: Iterable[str]) -> tuple[str, ...]:
    return tuple(stripped for service in services if (stripped := service.strip()))


def trade_for(classification: str | None) -> str:
    """Resolve a raw industry slug or trade label to a trade display name."""

    if classification is None:
        return FALLBACK_TRADE
    value = classification.strip()
    if value in INDUSTRY_TO_TRADE:
        return INDUSTRY_TO_TRADE[value]
    if value in TRADE_TO_INDUSTRY:
        return value
    return FALLBACK_TRADE


def industry_for(
    trade: str,
    classification: str | None,
    *,
    fallback_industry: str | None = None,
) -> str:
    """Return the industry slug for ``trade``.

    Unmapped trades resolve to ``fallback_industry`` when one is configured;
    otherwise to the slugified raw classification so the rejection can name it.
    """

    industry = TRADE_TO_INDUSTRY.get(trade)
    if industry is not None:
        return industry
    if fallback_industry is not None:
        return fallback_industry
    return slugify(classification.strip()) if classification else ""


def transform_record(
    payload: BusinessPayload,
    *,
    sequence: int,
    fallback_industry: str | None = None,
) -> Business:
    """Build the canonical record for ``payload``.

    ``sequence`` is the run-wide counter value embedded in the id; the caller
    owns the counter so this function stays pure.
    """

    address = payload.address
    business_id = "-".join(
        (
            slugify(payload.name.strip(), max_length=NAME_SLUG_MAX_LENGTH),
            slugify(address.city.strip()),
            str(sequence),
        )
    )
    classification = payload.classification
    trade = trade_for(classification)

    return Business(
        id=business_id,
        name=payload.name.strip(),
        trade=trade,
        industry=industry_for(trade, classification, fallback_industry=fallback_industry),
        phone=format_phone_number(payload.phone),
        email=payload.email,
        website=format_website(payload.website),
        address=Address(
            street=address.street.strip(),
            city=format_city_name(address.city),
            state=OREGON_STATE_CODE,
            zip_code=address.zip_code.strip(),
        ),
        services=format_services(payload.services),
        specialties=tuple(payload.specialties),
        hours=payload.hours or "",
        rating=payload.rating,
        review_count=payload.review_count,
        license_number=payload.license_number,
        years_in_business=payload.years_in_business,
        verified=payload.license_number is not None or payload.bbb_rating is not None,
        featured=payload.featured,
        emergency_service=payload.emergency_service,
        bbb_rating=payload.bbb_rating,
    )
