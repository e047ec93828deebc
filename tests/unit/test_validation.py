from __future__ import annotations

import math

import pytest

from vehicle_catalog.domain.models import Vehicle
from vehicle_catalog.domain.validation import (
    EMPTY_BRAND,
    EMPTY_NAME,
    NON_POSITIVE_PRICE,
    NULL_VEHICLE,
    ValidationResult,
    validate,
)


def test_valid_vehicle_has_no_errors() -> None:
    result = validate(Vehicle(name="Civic", category="Honda", price=24000.0))

    assert result.is_valid()
    assert result.errors == []
    assert result.error_message() == ""


def test_missing_vehicle_reports_single_error() -> None:
    result = validate(None)

    assert result.errors == [NULL_VEHICLE]


def test_every_rule_is_reported_in_fixed_order() -> None:
    result = validate(Vehicle(name="   ", category=None, price=0))

    assert not result.is_valid()
    assert result.errors == [EMPTY_NAME, EMPTY_BRAND, NON_POSITIVE_PRICE]
    assert result.error_message() == f"{EMPTY_NAME}, {EMPTY_BRAND}, {NON_POSITIVE_PRICE}"


@pytest.mark.parametrize("price", [0.0, -1.0, -0.01, math.nan, math.inf, None])
def test_price_must_be_a_positive_finite_number(price) -> None:
    result = validate(Vehicle(name="Civic", category="Honda", price=price))

    assert result.errors == [NON_POSITIVE_PRICE]


def test_blank_brand_only() -> None:
    result = validate(Vehicle(name="Civic", category="\t", price=1.0))

    assert result.errors == [EMPTY_BRAND]


def test_validation_result_accumulates() -> None:
    result = ValidationResult()
    result.add_error("a")
    result.add_error("b")

    assert not result.is_valid()
    assert result.error_message() == "a, b"
