"""
Interactive console front end: field prompting and the numbered menu loop.

Menu choices: 1=list, 2=add, 3=delete, 4=rent and 5=return (announced but not
available yet), 6 or anything else exits.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

import typer
from rich.console import Console

from vehicle_catalog.domain.models import Vehicle
from vehicle_catalog.services.catalog import CatalogService

INVALID_PRICE = "Invalid price format. Setting price to 0."

MENU_OPTIONS = (
    "List Vehicles",
    "Add a Vehicle",
    "Remove a Vehicle",
    "Rent a Vehicle",
    "Return a Vehicle",
    "Exit",
)

Prompt = Callable[[str], str]


def _typer_prompt(text: str) -> str:
    return typer.prompt(text, default="", show_default=False)


def parse_price(raw: Optional[str]) -> Optional[float]:
    """
    Parse a price typed by the user.

    Returns None when the text is not a finite number; callers substitute 0.
    """
    try:
        value = float((raw or "").strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


class VehicleInput:
    """Collects vehicle fields from the user, one prompt per field."""

    def __init__(self, console: Console, prompt: Prompt = _typer_prompt) -> None:
        self._console = console
        self._prompt = prompt

    def price_from(self, raw: Optional[str]) -> float:
        price = parse_price(raw)
        if price is None:
            self._console.print(f"[yellow]{INVALID_PRICE}[/yellow]")
            return 0.0
        return price

    def read_name(self) -> str:
        return self._prompt("Enter vehicle name").strip()

    def read_brand(self) -> str:
        return self._prompt("Enter vehicle brand").strip()

    def read_price(self) -> float:
        return self.price_from(self._prompt("Enter vehicle price"))

    def read_vehicle(self) -> Vehicle:
        name = self.read_name()
        brand = self.read_brand()
        return Vehicle(name=name, category=brand, price=self.read_price())

    def read_vehicle_id(self) -> str:
        return self._prompt("Enter vehicle UUID").strip()

    def read_choice(self) -> int:
        """Menu selection; non-numeric input maps to 0, which exits."""
        raw = self._prompt("Enter your choice").strip()
        try:
            return int(raw)
        except ValueError:
            return 0


def _print_banner(console: Console) -> None:
    console.print()
    console.print("======================")
    console.print("Vehicle Rental System")
    console.print("======================")
    for number, label in enumerate(MENU_OPTIONS, start=1):
        console.print(f"{number}. {label}")


def run_menu(service: CatalogService, inputs: VehicleInput, console: Console) -> None:
    """
    Loop over the numbered menu until the user exits.
    """
    while True:
        _print_banner(console)
        choice = inputs.read_choice()
        console.print(f"You selected option: {choice}")

        if choice == 1:
            service.list()
        elif choice == 2:
            console.print("\n=== Add New Vehicle ===")
            service.add(inputs.read_vehicle())
        elif choice == 3:
            console.print("\n=== Delete Vehicle ===")
            service.delete_by_id(inputs.read_vehicle_id())
        elif choice in (4, 5):
            console.print(f"{MENU_OPTIONS[choice - 1]} is not available yet.")
        else:
            if choice != 6:
                console.print("Invalid option.")
            console.print("Goodbye!")
            return


__all__ = ["INVALID_PRICE", "VehicleInput", "parse_price", "run_menu"]
