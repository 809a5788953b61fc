"""Group accepted businesses by (city, industry) for output partitioning."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from smbdir.domain.directory import CITIES, INDUSTRIES
from smbdir.domain.ingest_pipeline.transformation import slugify

if TYPE_CHECKING:
    from collections.abc import Collection, Iterator

    from smbdir.domain.model import Business


def bucket_key_for(city_slug: str, industry_slug: str) -> str:
    return f"{city_slug}-{industry_slug}"


def bucket_key(business: Business) -> str:
    """Return ``"<city-slug>-<industry-slug>"`` for ``business``."""

    return bucket_key_for(slugify(business.city), business.industry)


@dataclass(slots=True)
class BucketMap:
    """Ordered mapping of bucket key to the businesses it holds."""

    buckets: dict[str, list[Business]] = field(default_factory=dict)

    def add(self, business: Business) -> str:
        key = bucket_key(business)
        self.buckets.setdefault(key, []).append(business)
        return key

    def get(self, city_slug: str, industry_slug: str) -> list[Business]:
        return list(self.buckets.get(bucket_key_for(city_slug, industry_slug), ()))

    def count(self, city_slug: str, industry_slug: str) -> int:
        return len(self.buckets.get(bucket_key_for(city_slug, industry_slug), ()))

    def discard(self, business_ids: Collection[str]) -> int:
        """Drop the given ids from every bucket and return how many were removed."""

        removed = 0
        for key, businesses in self.buckets.items():
            survivors = [business for business in businesses if business.id not in business_ids]
            removed += len(businesses) - len(survivors)
            self.buckets[key] = survivors
        return removed

    def non_empty(self) -> Iterator[tuple[str, str, list[Business]]]:
        """Yield ``(city, industry, businesses)`` in declared city x industry order."""

        for city in CITIES:
            for industry in INDUSTRIES:
                businesses = self.buckets.get(bucket_key_for(city, industry))
                if businesses:
                    yield city, industry, businesses

    def city_total(self, city_slug: str) -> int:
        return sum(self.count(city_slug, industry) for industry in INDUSTRIES)

    def distribution(self) -> dict[str, dict[str, int]]:
        result: dict[str, dict[str, int]] = {}
        for city, industry, businesses in self.non_empty():
            result.setdefault(city, {})[industry] = len(businesses)
        return result

    def all_businesses(self) -> list[Business]:
        return [business for _, _, businesses in self.non_empty() for business in businesses]

    def total(self) -> int:
        return sum(len(businesses) for businesses in self.buckets.values())
