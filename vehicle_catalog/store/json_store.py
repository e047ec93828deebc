"""
JSON file store: the whole catalog lives in a single pretty-printed JSON array.

Every mutation reads the full collection, modifies it in memory and rewrites
the entire file. There is no locking; the file is assumed to be owned by a
single process.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from vehicle_catalog.domain.models import STORED, Vehicle
from vehicle_catalog.utils.logging import get_logger

log = get_logger(__name__)

_VEHICLE_LIST = TypeAdapter(List[Vehicle])
# A file holding `null` reads as an empty collection.
_VEHICLE_FILE = TypeAdapter(Optional[List[Vehicle]])
_EMPTY_COLLECTION = b"[]"


class JsonVehicleStore:
    """
    File-backed VehicleStore.

    Parameters
    ----------
    path : str | Path
        Location of the JSON file. Created, with missing parent directories,
        holding an empty array if it does not exist yet.
    write_attempts : int
        How many times a rewrite is attempted on ``OSError`` before the
        operation reports failure.
    """

    def __init__(self, path: Union[str, Path], write_attempts: int = 3) -> None:
        self.path = Path(path)
        self._write_attempts = max(1, write_attempts)
        self._ensure_file()

    def _ensure_file(self) -> None:
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(_EMPTY_COLLECTION)
            log.debug("Created empty catalog file", extra={"path": str(self.path)})
        except OSError as exc:
            log.warning("Could not create catalog file %s: %s", self.path, exc)

    def find_all(self) -> List[Vehicle]:
        try:
            if not self.path.exists():
                return []
            raw = self.path.read_bytes()
            if not raw.strip():
                return []
            return _VEHICLE_FILE.validate_json(raw, context=STORED) or []
        except (OSError, ValidationError, ValueError):
            log.exception("Error reading vehicles from %s", self.path)
            return []

    def find_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        return next((v for v in self.find_all() if v.id == vehicle_id), None)

    def save(self, vehicle: Vehicle) -> bool:
        vehicles = self.find_all()
        if any(v.id == vehicle.id for v in vehicles):
            log.error("Refusing to save duplicate vehicle id %s", vehicle.id)
            return False
        vehicles.append(vehicle)
        return self._rewrite(vehicles, action="save")

    def update(self, vehicle: Vehicle) -> bool:
        vehicles = self.find_all()
        for index, existing in enumerate(vehicles):
            if existing.id == vehicle.id:
                vehicles[index] = existing.with_fields_of(vehicle)
                return self._rewrite(vehicles, action="update")
        log.info("No vehicle with id %s to update", vehicle.id)
        return False

    def delete(self, vehicle_id: str) -> bool:
        vehicles = self.find_all()
        remaining = [v for v in vehicles if v.id != vehicle_id]
        if len(remaining) == len(vehicles):
            log.info("No vehicle with id %s to delete", vehicle_id)
            return False
        return self._rewrite(remaining, action="delete")

    def _rewrite(self, vehicles: List[Vehicle], action: str) -> bool:
        """Serialize the full collection and replace the file contents."""
        data = _VEHICLE_LIST.dump_json(vehicles, by_alias=True, indent=2)
        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self._write_attempts),
                wait=wait_exponential(multiplier=0.05, max=1),
                retry=retry_if_exception_type(OSError),
                reraise=True,
            ):
                with attempt:
                    self.path.write_bytes(data)
        except OSError:
            log.exception("Error writing vehicles during %s to %s", action, self.path)
            return False
        log.debug(
            "Rewrote catalog file",
            extra={"action": action, "vehicles": len(vehicles), "path": str(self.path)},
        )
        return True


__all__ = ["JsonVehicleStore"]
