"""Render the sealed bucket map as the site's typed ``businesses.ts`` data module."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from smbdir.domain.directory import CITIES, INDUSTRIES, city_display_name, industry_display_name

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime
    from pathlib import Path

    from smbdir.domain.ingest_pipeline import BucketMap
    from smbdir.domain.model import Business

log = getLogger(__name__)

INDENT = "  "

BUSINESS_INTERFACE = """\
export interface Business {
  id: string;
  name: string;
  trade: string;
  phone: string;
  email?: string;
  website?: string;
  address: {
    street: string;
    city: string;
    state: string;
    zipCode: string;
  };
  services: string[];
  specialties?: string[];
  hours?: string;
  rating?: number;
  reviewCount?: number;
  licenseNumber?: string;
  yearsInBusiness?: number;
  verified: boolean;
  featured?: boolean;
  emergencyService?: boolean;
  bbbRating?: string;
}
"""


_TS_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        "'": "\\'",
        "\n": "\\n",
        "\r": "\\r",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def ts_string(value: str) -> str:
    """Return ``value`` as a single-quoted TypeScript string literal."""

    escaped = value.translate(_TS_ESCAPES)
    return f"'{escaped}'"


def ts_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def ts_string_array(values: Iterable[str]) -> str:
    return "[" + ", ".join(ts_string(value) for value in values) + "]"


def constant_name(city_slug: str, industry_slug: str) -> str:
    """``grants-pass`` + ``real-estate`` -> ``GRANTS_PASS_REAL_ESTATE``."""

    return f"{city_slug}_{industry_slug}".upper().replace("-", "_")


def bucket_label(city_slug: str, industry_slug: str) -> str:
    return f"{city_display_name(city_slug)} {industry_display_name(industry_slug)}"


def render_business(business: Business) -> list[str]:
    """Render one object literal; optional fields are omitted when empty."""

    field_indent = INDENT * 2
    address = business.address
    lines = [
        f"{INDENT}{{",
        f"{field_indent}id: {ts_string(business.id)},",
        f"{field_indent}name: {ts_string(business.name)},",
        f"{field_indent}trade: {ts_string(business.trade)},",
        f"{field_indent}phone: {ts_string(business.phone)},",
    ]
    if business.email:
        lines.append(f"{field_indent}email: {ts_string(business.email)},")
    if business.website:
        lines.append(f"{field_indent}website: {ts_string(business.website)},")
    lines.extend(
        (
            f"{field_indent}address: {{",
            f"{field_indent}{INDENT}street: {ts_string(address.street)},",
            f"{field_indent}{INDENT}city: {ts_string(address.city)},",
            f"{field_indent}{INDENT}state: {ts_string(address.state)},",
            f"{field_indent}{INDENT}zipCode: {ts_string(address.zip_code)},",
            f"{field_indent}}},",
            f"{field_indent}services: {ts_string_array(business.services)},",
        )
    )
    if business.specialties:
        lines.append(f"{field_indent}specialties: {ts_string_array(business.specialties)},")
    if business.hours:
        lines.append(f"{field_indent}hours: {ts_string(business.hours)},")
    if business.rating is not None:
        lines.append(f"{field_indent}rating: {ts_number(business.rating)},")
    if business.review_count is not None:
        lines.append(f"{field_indent}reviewCount: {business.review_count},")
    if business.license_number:
        lines.append(f"{field_indent}licenseNumber: {ts_string(business.license_number)},")
    if business.years_in_business is not None:
        lines.append(f"{field_indent}yearsInBusiness: {business.years_in_business},")
    lines.append(f"{field_indent}verified: {'true' if business.verified else 'false'},")
    if business.featured:
        lines.append(f"{field_indent}featured: true,")
    if business.emergency_service:
        lines.append(f"{field_indent}emergencyService: true,")
    if business.bbb_rating:
        lines.append(f"{field_indent}bbbRating: {ts_string(business.bbb_rating)},")
    lines.append(f"{INDENT}}},")
    return lines


def _render_lookup_by_city(exports: list[tuple[str, str, str]]) -> list[str]:
    lines = [
        "export async function getBusinessesByCity(",
        f"{INDENT}citySlug: string,",
        f"{INDENT}industrySlug: string,",
        "): Promise<Business[]> {",
        f"{INDENT}switch (`${{citySlug}}-${{industrySlug}}`) {{",
    ]
    for city, industry, name in exports:
        lines.append(f"{INDENT * 2}case {ts_string(f'{city}-{industry}')}:")
        lines.append(f"{INDENT * 3}return {name};")
    lines.extend(
        (
            f"{INDENT * 2}default:",
            f"{INDENT * 3}return [];",
            f"{INDENT}}}",
            "}",
        )
    )
    return lines


def _render_lookup_by_id(exports: list[tuple[str, str, str]]) -> list[str]:
    if exports:
        collected = [f"{INDENT}const allBusinesses: Business[] = ["]
        collected.extend(f"{INDENT * 2}...{name}," for _, _, name in exports)
        collected.append(f"{INDENT}];")
    else:
        collected = [f"{INDENT}const allBusinesses: Business[] = [];"]
    return [
        "export async function getBusinessById(id: string): Promise<Business | null> {",
        *collected,
        "",
        f"{INDENT}return allBusinesses.find((business) => business.id === id) || null;",
        "}",
    ]


def render_module(buckets: BucketMap, *, generated_at: datetime) -> str:
    """Return the full TypeScript source for ``buckets``.

    Buckets are walked in declared city x industry order and only non-empty
    ones produce a constant, so the output is deterministic for a given input.
    """

    total = buckets.total()
    lines = [
        f"// Generated by smbdir data sealing - {generated_at.isoformat()}",
        f"// Total businesses: {total}",
        f"// Cities: {len(CITIES)}, Industries: {len(INDUSTRIES)}",
        "",
        BUSINESS_INTERFACE,
    ]

    exports: list[tuple[str, str, str]] = []
    for city, industry, businesses in buckets.non_empty():
        name = constant_name(city, industry)
        exports.append((city, industry, name))
        lines.append(f"// {bucket_label(city, industry)} ({len(businesses)} businesses)")
        lines.append(f"export const {name}: Business[] = [")
        for business in businesses:
            lines.extend(render_business(business))
        lines.append("];")
        lines.append("")

    lines.extend(_render_lookup_by_city(exports))
    lines.append("")
    lines.extend(_render_lookup_by_id(exports))
    lines.append("")

    lines.append("// Business count summary:")
    lines.extend(
        f"// {bucket_label(city, industry)}: {len(businesses)} businesses"
        for city, industry, businesses in buckets.non_empty()
    )
    lines.append(f"// Total: {total} businesses")
    return "\n".join(lines) + "\n"


def write_module(path: Path, buckets: BucketMap, *, generated_at: datetime) -> Path:
    """Overwrite ``path`` with the rendered module."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_module(buckets, generated_at=generated_at), encoding="utf-8")
    log.info("TypeScript output generated: %s", path)
    return path
