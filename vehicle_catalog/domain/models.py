"""
Domain models for the vehicle catalog.

A `Vehicle` is an immutable value: its `id` is fixed at construction and an
update produces a new copy via `with_fields_of`. Field names used in the
persisted JSON (`uuid`, `brand`) are exposed as aliases so the model reads and
writes the file format directly.
"""
from __future__ import annotations

import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationInfo, model_validator

# Validation context marking data read back from storage.
STORED = {"stored": True}


def new_vehicle_id() -> str:
    """Generate a fresh, globally unique vehicle id."""
    return str(uuid.uuid4())


class Vehicle(BaseModel):
    """
    Representation of a single vehicle entry in the catalog.

    Descriptive fields are deliberately permissive (optional name/brand, any
    price) so that incomplete input can be constructed and then rejected by
    `vehicle_catalog.domain.validation.validate` with readable messages.
    """

    id: str = Field(
        default_factory=new_vehicle_id,
        alias="uuid",
        description="Unique identifier, assigned at creation and never changed.",
    )
    name: Optional[str] = Field(None, description="Display name of the vehicle.")
    category: Optional[str] = Field(
        None, alias="brand", description="Classification label (the brand)."
    )
    price: Optional[float] = Field(None, description="Price; must be positive to persist.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @model_validator(mode="before")
    @classmethod
    def require_stored_id(cls, data: Any, info: ValidationInfo) -> Any:
        """Stored records keep their id; only new vehicles get a generated one."""
        if info.context and info.context.get("stored") and isinstance(data, dict):
            if not data.get("uuid") and not data.get("id"):
                raise ValueError("stored vehicle is missing its uuid")
        return data

    def with_fields_of(self, other: "Vehicle") -> "Vehicle":
        """
        Return a copy carrying `other`'s name, category and price under this id.
        """
        return self.model_copy(
            update={
                "name": other.name,
                "category": other.category,
                "price": other.price,
            }
        )


__all__ = ["STORED", "Vehicle", "new_vehicle_id"]
