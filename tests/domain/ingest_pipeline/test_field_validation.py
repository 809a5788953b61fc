from __future__ import annotations

import pytest

from smbdir.domain.ingest_pipeline.field_validation import record_label, validate_fields
from tests.helpers.businesses import make_raw_business, with_address


def test_valid_record_has_no_issues() -> None:
    assert validate_fields(make_raw_business()) == []


@pytest.mark.parametrize("field", ["name", "phone"])
@pytest.mark.parametrize("value", [None, "", "   ", False, 0, 0.0])
def test_missing_required_scalar_fields(field: str, value: object) -> None:
    record = make_raw_business(**{field: value})

    assert validate_fields(record) == [f"Missing required field: {field}"]


def test_absent_required_field() -> None:
    record = make_raw_business()
    del record["phone"]

    assert validate_fields(record) == ["Missing required field: phone"]


@pytest.mark.parametrize("address", [None, "100 Main St, Portland", ["100 Main St"]])
def test_address_must_be_an_object(address: object) -> None:
    record = make_raw_business(address=address)

    assert validate_fields(record) == ["Missing or invalid address object"]


@pytest.mark.parametrize("subfield", ["street", "city", "state", "zipCode"])
def test_each_address_subfield_is_required(subfield: str) -> None:
    record = with_address(make_raw_business(), **{subfield: ""})

    assert validate_fields(record) == [f"Missing address.{subfield}"]


def test_non_oregon_state_is_named_in_issue() -> None:
    record = with_address(make_raw_business(), state="WA")

    assert validate_fields(record) == ["Invalid state: WA (must be OR)"]


def test_state_check_is_case_sensitive() -> None:
    record = with_address(make_raw_business(), state="or")

    assert validate_fields(record) == ["Invalid state: or (must be OR)"]


def test_issues_accumulate_in_order() -> None:
    record = {"address": {"street": "1 Main", "state": "CA"}}

    assert validate_fields(record) == [
        "Missing required field: name",
        "Missing required field: phone",
        "Missing address.city",
        "Missing address.zipCode",
        "Invalid state: CA (must be OR)",
    ]


def test_non_mapping_record() -> None:
    assert validate_fields(["not", "a", "record"]) == ["Record is not an object"]


def test_record_label() -> None:
    assert record_label(make_raw_business(name="  Acme Roofing ")) == "Acme Roofing"
    assert record_label(make_raw_business(name="")) is None
    assert record_label(42) is None
