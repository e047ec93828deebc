from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console

from vehicle_catalog.config import get_settings
from vehicle_catalog.domain.models import Vehicle
from vehicle_catalog.menu import VehicleInput, run_menu
from vehicle_catalog.services.catalog import CatalogService
from vehicle_catalog.store.json_store import JsonVehicleStore
from vehicle_catalog.utils.logging import configure_logging

app = typer.Typer(help="Vehicle catalog manager.", no_args_is_help=True)


def _build() -> tuple[CatalogService, VehicleInput, Console]:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    console = Console()
    store = JsonVehicleStore(settings.catalog_path, write_attempts=settings.store_write_attempts)
    return CatalogService(store, console=console), VehicleInput(console), console


def _exit_on_failure(ok: bool) -> None:
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"catalog={settings.catalog_path} | env={settings.app_env} | "
        f"log_level={settings.log_level} json_logs={settings.log_json} | "
        f"write_attempts={settings.store_write_attempts}"
    )


@app.command("list")
def list_vehicles() -> None:
    """
    List every vehicle in the catalog.
    """
    service, _, _ = _build()
    service.list()


@app.command()
def add(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Vehicle name."),
    brand: Optional[str] = typer.Option(None, "--brand", "-b", help="Vehicle brand."),
    price: Optional[str] = typer.Option(None, "--price", "-p", help="Vehicle price."),
) -> None:
    """
    Add a new vehicle; prompts for any field not given as an option.
    """
    service, inputs, _ = _build()
    _exit_on_failure(service.add(_collect(inputs, name, brand, price)))


@app.command()
def update(
    vehicle_id: Optional[str] = typer.Argument(
        None, help="Id of the vehicle to update; prompted for when omitted."
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New vehicle name."),
    brand: Optional[str] = typer.Option(None, "--brand", "-b", help="New vehicle brand."),
    price: Optional[str] = typer.Option(None, "--price", "-p", help="New vehicle price."),
) -> None:
    """
    Replace name, brand and price of an existing vehicle.
    """
    service, inputs, _ = _build()
    target = vehicle_id.strip() if vehicle_id is not None else inputs.read_vehicle_id()
    _exit_on_failure(service.update(_collect(inputs, name, brand, price, vehicle_id=target)))


@app.command()
def delete(
    vehicle_id: str = typer.Argument(..., help="Id of the vehicle to delete."),
) -> None:
    """
    Delete a vehicle by id.
    """
    service, _, _ = _build()
    _exit_on_failure(service.delete_by_id(vehicle_id.strip()))


@app.command()
def menu() -> None:
    """
    Run the interactive numbered menu.
    """
    service, inputs, console = _build()
    run_menu(service, inputs, console)


def _collect(
    inputs: VehicleInput,
    name: Optional[str],
    brand: Optional[str],
    price: Optional[str],
    vehicle_id: Optional[str] = None,
) -> Vehicle:
    """Build a vehicle from the given options, prompting for the missing ones."""
    fields = {
        "name": name.strip() if name is not None else inputs.read_name(),
        "category": brand.strip() if brand is not None else inputs.read_brand(),
        "price": inputs.price_from(price) if price is not None else inputs.read_price(),
    }
    if vehicle_id is not None:
        fields["id"] = vehicle_id
    return Vehicle(**fields)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
