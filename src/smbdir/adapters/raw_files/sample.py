"""Sample record template written when the input directory holds no data."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)

SAMPLE_FILENAME: Final[str] = "sample-business-structure.json"

SAMPLE_BUSINESS: Final[dict[str, object]] = {
    "name": "Example Electric Company",
    "phone": "(503) 555-0123",
    "email": "info@example-electric.com",
    "website": "www.example-electric.com",
    "address": {
        "street": "123 Main Street",
        "city": "Portland",
        "state": "OR",
        "zipCode": "97205",
    },
    "industry": "electricians",
    "services": ["Residential Electrical", "Commercial Electrical", "Emergency Repairs"],
    "licenseNumber": "123456",
    "yearsInBusiness": 15,
    "emergencyService": True,
    "hours": "Mon-Fri: 7AM-5PM",
    "specialties": ["Smart Home Systems", "Panel Upgrades"],
    "bbbRating": "A+",
    "rating": 4.8,
    "reviewCount": 47,
    "featured": False,
}


def write_sample_structure(input_dir: Path) -> Path:
    """Write a one-record template into ``input_dir`` and return its path."""

    input_dir.mkdir(parents=True, exist_ok=True)
    path = input_dir / SAMPLE_FILENAME
    path.write_text(json.dumps([SAMPLE_BUSINESS], indent=2) + "\n", encoding="utf-8")
    log.info("Sample structure created at %s", path)
    return path
