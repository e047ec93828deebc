"""
Catalog service: validate-then-persist orchestration over a VehicleStore.

Usage:
    from vehicle_catalog.services.catalog import CatalogService
    from vehicle_catalog.store import JsonVehicleStore

    service = CatalogService(JsonVehicleStore("data/vehicles.json"))
    service.add(Vehicle(name="Civic", category="Honda", price=24000.0))
    service.list()
"""

from __future__ import annotations

from typing import Callable, List, Optional

from rich.console import Console

from vehicle_catalog import reporter
from vehicle_catalog.domain.models import Vehicle
from vehicle_catalog.domain.validation import ValidationResult, validate
from vehicle_catalog.store.abstract import VehicleStore
from vehicle_catalog.utils.logging import get_logger

log = get_logger(__name__)

Validator = Callable[[Optional[Vehicle]], ValidationResult]


class CatalogService:
    """
    Coordinates validation, persistence and user-facing reporting.

    Every operation reports its outcome on the console and returns it, so the
    CLI can also translate it into an exit status.
    """

    def __init__(
        self,
        store: VehicleStore,
        validator: Validator = validate,
        console: Optional[Console] = None,
    ) -> None:
        self._store = store
        self._validator = validator
        self._console = console or Console()

    def _check(self, vehicle: Optional[Vehicle]) -> bool:
        result = self._validator(vehicle)
        if not result.is_valid():
            log.info("Rejected vehicle: %s", result.error_message())
            reporter.print_validation_errors(self._console, result.errors)
        return result.is_valid()

    def add(self, vehicle: Optional[Vehicle]) -> bool:
        if not self._check(vehicle):
            return False

        if not self._store.save(vehicle):
            reporter.print_failure(self._console, "Failed to save vehicle to storage.")
            return False
        reporter.print_vehicle_saved(self._console, vehicle, "added")
        return True

    def update(self, vehicle: Optional[Vehicle]) -> bool:
        if not self._check(vehicle):
            return False

        if not self._store.update(vehicle):
            reporter.print_failure(self._console, "Failed to update vehicle in storage.")
            return False
        reporter.print_vehicle_saved(self._console, vehicle, "updated")
        return True

    def list(self) -> List[Vehicle]:
        vehicles = self._store.find_all()
        reporter.print_vehicles(self._console, vehicles)
        return vehicles

    def delete_by_id(self, vehicle_id: str) -> bool:
        deleted = self._store.delete(vehicle_id)
        if deleted:
            reporter.print_success(self._console, "Vehicle deleted successfully!")
        else:
            reporter.print_failure(self._console, f"Vehicle with ID {vehicle_id} not found.")
        return deleted


__all__ = ["CatalogService", "Validator"]
