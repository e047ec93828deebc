"""
Store package for the vehicle catalog.

Re-exports the store protocol and the concrete file-backed store so downstream
code can import from `vehicle_catalog.store` directly.
"""

from vehicle_catalog.store.abstract import VehicleStore
from vehicle_catalog.store.json_store import JsonVehicleStore

__all__ = [
    "VehicleStore",
    "JsonVehicleStore",
]
