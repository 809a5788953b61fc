"""Canonical business records emitted into the directory data module."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Address:
    street: str
    city: str
    state: str
    zip_code: str


@dataclass(frozen=True, slots=True)
class Business:
    """Validated, normalized business listing.

    ``industry`` is the slug used for bucketing and is not part of the emitted
    record shape; everything else maps one-to-one onto the generated
    ``Business`` interface.
    """

    id: str
    name: str
    trade: str
    industry: str
    phone: str
    address: Address
    email: str | None = None
    website: str | None = None
    services: tuple[str, ...] = ()
    specialties: tuple[str, ...] = ()
    hours: str = ""
    rating: float | None = None
    review_count: int | None = None
    license_number: str | None = None
    years_in_business: int | None = None
    verified: bool = False
    featured: bool = False
    emergency_service: bool = False
    bbb_rating: str | None = None

    @property
    def city(self) -> str:
        return self.address.city
