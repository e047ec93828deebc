"""
Pytest configuration for the vehicle catalog.

Provides fixtures for:
- A file store rooted in a per-test temporary directory
- A rich Console recording into a buffer, for asserting user-facing output
- Settings isolation for CLI tests
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable, Generator

import pytest
from rich.console import Console

from vehicle_catalog.config import get_settings
from vehicle_catalog.services.catalog import CatalogService
from vehicle_catalog.store.json_store import JsonVehicleStore


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """
    Undo `configure_logging` calls so handlers never outlive a test's streams.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    """Location of the backing file; nested to exercise parent creation."""
    return tmp_path / "data" / "vehicles.json"


@pytest.fixture
def store(catalog_path: Path) -> JsonVehicleStore:
    return JsonVehicleStore(catalog_path, write_attempts=1)


@pytest.fixture
def console() -> Console:
    """Console writing plain text into an in-memory buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def console_output(console: Console) -> Callable[[], str]:
    """Return a callable yielding everything printed to the console so far."""

    def _read() -> str:
        return console.file.getvalue()  # type: ignore[attr-defined]

    return _read


@pytest.fixture
def service(store: JsonVehicleStore, console: Console) -> CatalogService:
    return CatalogService(store, console=console)


@pytest.fixture
def isolated_settings(
    catalog_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """
    Point the cached settings at the temporary catalog for the duration of a test.
    """
    monkeypatch.setenv("CATALOG_PATH", str(catalog_path))
    monkeypatch.setenv("STORE_WRITE_ATTEMPTS", "1")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield catalog_path
    get_settings.cache_clear()
