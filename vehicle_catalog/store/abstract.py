"""
Store interface for the vehicle catalog.

Concrete stores (currently the JSON file store) implement the VehicleStore
protocol so the service layer depends on the capability, not the adapter.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from vehicle_catalog.domain.models import Vehicle


@runtime_checkable
class VehicleStore(Protocol):
    """
    Durable collection of vehicles.

    Failures are reported through return values: reads collapse to an empty
    result and writes to ``False``. Implementations never raise for I/O or
    not-found conditions.
    """

    def find_all(self) -> List[Vehicle]:
        """Return every stored vehicle in storage order."""
        ...

    def find_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        """Return the vehicle with the given id, or None."""
        ...

    def save(self, vehicle: Vehicle) -> bool:
        """Append a new vehicle."""
        ...

    def update(self, vehicle: Vehicle) -> bool:
        """Replace name, brand and price of the stored vehicle with the same id."""
        ...

    def delete(self, vehicle_id: str) -> bool:
        """Remove the vehicle with the given id."""
        ...


__all__ = ["VehicleStore"]
