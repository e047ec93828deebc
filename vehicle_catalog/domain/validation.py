"""
Validation rules for vehicles prior to persistence.

Every rule is checked independently and in a fixed order (name, brand, price)
so the produced messages are deterministic.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

from vehicle_catalog.domain.models import Vehicle

NULL_VEHICLE = "Vehicle cannot be null."
EMPTY_NAME = "Vehicle name cannot be empty."
EMPTY_BRAND = "Vehicle brand cannot be empty."
NON_POSITIVE_PRICE = "Vehicle price must be greater than zero."


@dataclass
class ValidationResult:
    """Ordered collection of human-readable rule violations."""

    errors: List[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        self.errors.append(error)

    def is_valid(self) -> bool:
        return not self.errors

    def error_message(self) -> str:
        return ", ".join(self.errors)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate(vehicle: Optional[Vehicle]) -> ValidationResult:
    """
    Check a candidate vehicle against the catalog rules.

    Returns a result with one message per violated rule; a missing vehicle
    yields a single error.
    """
    result = ValidationResult()

    if vehicle is None:
        result.add_error(NULL_VEHICLE)
        return result

    if _is_blank(vehicle.name):
        result.add_error(EMPTY_NAME)

    if _is_blank(vehicle.category):
        result.add_error(EMPTY_BRAND)

    # NaN and infinity cannot be written as JSON numbers.
    if vehicle.price is None or not 0 < vehicle.price < math.inf:
        result.add_error(NON_POSITIVE_PRICE)

    return result


__all__ = [
    "ValidationResult",
    "validate",
    "NULL_VEHICLE",
    "EMPTY_NAME",
    "EMPTY_BRAND",
    "NON_POSITIVE_PRICE",
]
