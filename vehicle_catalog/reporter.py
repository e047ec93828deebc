"""
Console rendering of catalog outcomes.

User-supplied text (names, brands, ids) is wrapped in `rich.text.Text` or
escaped so it is never interpreted as markup.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from vehicle_catalog.domain.models import Vehicle

NO_VEHICLES = "No vehicles found."


def format_price(price: Optional[float]) -> str:
    return f"${price or 0.0:.2f}"


def print_vehicles(console: Console, vehicles: Sequence[Vehicle]) -> None:
    """
    Render vehicles as a table, 1-indexed in storage order.
    """
    if not vehicles:
        console.print(f"[yellow]{NO_VEHICLES}[/yellow]")
        return

    table = Table(title="All Vehicles", box=box.ROUNDED)
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Brand", style="magenta")
    table.add_column("Price", justify="right", style="green", no_wrap=True)
    table.add_column("ID", style="dim", no_wrap=True)

    for index, vehicle in enumerate(vehicles, start=1):
        table.add_row(
            f"{index}.",
            Text(vehicle.name or ""),
            Text(vehicle.category or ""),
            format_price(vehicle.price),
            Text(vehicle.id),
        )

    console.print(table)


def print_validation_errors(console: Console, errors: Sequence[str]) -> None:
    console.print("[red]Validation failed:[/red]")
    for error in errors:
        console.print(f"  - {escape(error)}")


def print_vehicle_saved(console: Console, vehicle: Vehicle, verb: str) -> None:
    """Confirm a persisted vehicle; `verb` is "added" or "updated"."""
    console.print(f"[green]✓ Vehicle {verb} successfully![/green]")
    console.print(f"  Name: {escape(vehicle.name or '')}")
    console.print(f"  Brand: {escape(vehicle.category or '')}")
    console.print(f"  Price: {format_price(vehicle.price)}")


def print_failure(console: Console, message: str) -> None:
    console.print(f"[red]✗ {escape(message)}[/red]")


def print_success(console: Console, message: str) -> None:
    console.print(f"[green]✓ {escape(message)}[/green]")


__all__ = [
    "NO_VEHICLES",
    "format_price",
    "print_vehicles",
    "print_validation_errors",
    "print_vehicle_saved",
    "print_failure",
    "print_success",
]
