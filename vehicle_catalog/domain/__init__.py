"""
Domain package for the vehicle catalog.

Exports the vehicle model and its validation rules. Keep this package focused
on data definitions and validation concerns.
"""

from vehicle_catalog.domain.models import Vehicle, new_vehicle_id
from vehicle_catalog.domain.validation import ValidationResult, validate

__all__ = [
    "Vehicle",
    "ValidationResult",
    "new_vehicle_id",
    "validate",
]
