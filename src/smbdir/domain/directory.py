"""Directory catalogue: supported cities, industries and Oregon contact rules."""

from __future__ import annotations

import re
from typing import Final

CITIES: Final[tuple[str, ...]] = (
    "grants-pass",
    "medford",
    "roseburg",
    "eugene",
    "salem",
    "portland",
)

INDUSTRIES: Final[tuple[str, ...]] = (
    "lawfirms",
    "roofers",
    "real-estate",
    "general-contractors",
    "plumbers",
    "electricians",
)

INDUSTRY_TO_TRADE: Final[dict[str, str]] = {
    "electricians": "Electrician",
    "plumbers": "Plumber",
    "roofers": "Roofer",
    "general-contractors": "General Contractor",
    "lawfirms": "Attorney",
    "real-estate": "Real Estate Agent",
}

TRADE_TO_INDUSTRY: Final[dict[str, str]] = {
    trade: industry for industry, trade in INDUSTRY_TO_TRADE.items()
}

FALLBACK_TRADE: Final[str] = "Service Provider"

# Lowercased, trimmed spellings seen in scraped listings.
CITY_NAME_TABLE: Final[dict[str, str]] = {
    "grants pass": "Grants Pass",
    "grantspass": "Grants Pass",
    "medford": "Medford",
    "roseburg": "Roseburg",
    "eugene": "Eugene",
    "salem": "Salem",
    "portland": "Portland",
}

OREGON_STATE_CODE: Final[str] = "OR"
OREGON_AREA_CODES: Final[frozenset[str]] = frozenset({"503", "971", "458", "541"})
OREGON_ZIP_PREFIX: Final[str] = "97"
ZIP_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{5}(-\d{4})?$")

MIN_PHONE_DIGITS: Final[int] = 10
MAX_PHONE_DIGITS: Final[int] = 11


def city_display_name(city_slug: str) -> str:
    """Return the Title Case display name for a city slug (``grants-pass`` -> ``Grants Pass``)."""

    return " ".join(word.capitalize() for word in city_slug.split("-"))


def industry_display_name(industry_slug: str) -> str:
    return industry_slug.replace("-", " ")


SUPPORTED_CITY_NAMES: Final[frozenset[str]] = frozenset(city_display_name(city) for city in CITIES)
