"""Pydantic models describing a structurally-valid raw business record."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _scalar_to_str(value: object) -> object:
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return str(value)
    return _blank_to_none(value)


def _falsy_to_none(value: object) -> object:
    if value in (0, "", False):
        return None
    return _blank_to_none(value)


def _optional_text(value: object) -> object:
    if value in (0, "", False):
        return None
    return _scalar_to_str(value)


def _string_items(value: object) -> list[str]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        return []
    return [item for item in value if isinstance(item, str)]


class PayloadBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class AddressPayload(PayloadBaseModel):
    street: str
    city: str
    state: str
    zip_code: str = Field(alias="zipCode")

    _normalize_zip = field_validator("zip_code", mode="before")(_scalar_to_str)


class BusinessPayload(PayloadBaseModel):
    """Raw listing after field validation; values are typed but not yet normalized."""

    name: str
    phone: str
    address: AddressPayload
    email: str | None = None
    website: str | None = None
    industry: str | None = None
    trade: str | None = None
    services: list[str] = Field(default_factory=list)
    specialties: list[str] = Field(default_factory=list)
    hours: str | None = None
    rating: float | None = Field(default=None, allow_inf_nan=False)
    review_count: int | None = Field(default=None, alias="reviewCount")
    license_number: str | None = Field(default=None, alias="licenseNumber")
    years_in_business: int | None = Field(default=None, alias="yearsInBusiness")
    emergency_service: bool = Field(default=False, alias="emergencyService")
    bbb_rating: str | None = Field(default=None, alias="bbbRating")
    featured: bool = False

    _normalize_phone = field_validator("phone", mode="before")(_scalar_to_str)
    _normalize_optional = field_validator(
        "email",
        "website",
        "industry",
        "trade",
        "hours",
        "license_number",
        "bbb_rating",
        mode="before",
    )(_optional_text)
    _normalize_numbers = field_validator(
        "rating", "review_count", "years_in_business", mode="before"
    )(_falsy_to_none)
    _normalize_lists = field_validator("services", "specialties", mode="before")(_string_items)

    @field_validator("emergency_service", "featured", mode="before")
    @classmethod
    def _none_to_false(cls, value: object) -> object:
        return False if value is None else value

    @property
    def classification(self) -> str | None:
        """Raw industry, falling back to the raw trade label."""

        return self.industry or self.trade
