"""
Vehicle Catalog - console manager for a JSON-backed vehicle catalog.

This package lets a user list, add, update and delete vehicle records kept in
a single pretty-printed JSON file:

- `domain`: the immutable `Vehicle` value and its validation rules
- `store`: the store protocol and the file-backed implementation
- `services`: validate-then-persist orchestration with console reporting
- `main`: the Typer CLI, including the interactive numbered menu
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from vehicle_catalog.config import Settings, get_settings
from vehicle_catalog.domain import ValidationResult, Vehicle, validate
from vehicle_catalog.services.catalog import CatalogService
from vehicle_catalog.store import JsonVehicleStore, VehicleStore
from vehicle_catalog.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Vehicle",
    "ValidationResult",
    "validate",
    # Persistence
    "VehicleStore",
    "JsonVehicleStore",
    # Orchestration
    "CatalogService",
    # Logging
    "configure_logging",
    "get_logger",
]
