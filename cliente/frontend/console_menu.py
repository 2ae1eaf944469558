"""Menu de texto para operar el inventario desde consola."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO, TypeVar

from cliente.backend.controller import AppController
from cliente.backend.validators import (
    parse_float,
    parse_int,
    parse_product_type,
    parse_yes_no,
)
from servidor.domain.models import ProductType
from shared.errors import ServiceError, ValidationError
from shared.protocol import ProductDraft

LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")

INVALID_INPUT_MESSAGE = "Invalid input. Please try again."

MENU_TEXT = (
    "\n=== Menu ===\n"
    "1. Display Inventory\n"
    "2. Add Product\n"
    "3. Sell Product\n"
    "4. Apply Discount\n"
    "5. Restock Low Inventory\n"
    "6. Save Inventory to File\n"
    "7. Load Inventory from File\n"
    "8. Exit"
)
EXIT_OPTION = 8


class ConsoleMenu:
    """Loop interactivo de entrada de productos y menu principal."""

    def __init__(
        self,
        controller: AppController,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self._controller = controller
        self._input = input_func
        self._output = output or sys.stdout
        self._actions: dict[int, Callable[[], None]] = {
            1: self._display_inventory,
            2: self._add_product,
            3: self._sell_product,
            4: self._apply_discount,
            5: self._restock,
            6: self._save,
            7: self._load,
        }

    def run(self) -> int:
        """Ejecuta entrada inicial de productos y luego el menu; retorna exit code."""
        self._print("=== Inventory Management System ===")
        try:
            self._product_entry_loop()
            self._menu_loop()
        except EOFError:
            LOGGER.info("Entrada finalizada (EOF); cerrando menu.")
        self._print("Exiting program. Goodbye!")
        return 0

    def _product_entry_loop(self) -> None:
        while self._prompt(
            "\nAdd a new product? (yes/no): ",
            parse_yes_no,
            invalid_message="Please enter 'yes' or 'no'.",
        ):
            self._add_product()

    def _menu_loop(self) -> None:
        while True:
            self._print(MENU_TEXT)
            option = self._prompt("Choose an option: ", lambda raw: parse_int(raw, 1))
            if option == EXIT_OPTION:
                self._controller.on_exit(None)
                return

            action = self._actions.get(option)
            if action is None:
                self._print("Invalid option. Please try again.")
                continue
            self._run_action(action)

    def _run_action(self, action: Callable[[], None]) -> None:
        """Ejecuta una accion reportando errores no fatales."""
        try:
            action()
        except ValidationError as exc:
            self._print(str(exc))
        except ServiceError as exc:
            LOGGER.error("Error de servicio: %s", exc)
            self._print(f"Error: {exc}")

    def _display_inventory(self) -> None:
        self._print(self._controller.on_display_inventory())

    def _add_product(self) -> None:
        """Solicita los datos de un producto y lo agrega."""
        name = self._input("Enter product name: ").strip()
        price = self._prompt("Enter product price: $", lambda raw: parse_float(raw, 0.0))
        stock = self._prompt("Enter stock quantity: ", lambda raw: parse_int(raw, 0))
        raw_type = self._input("Enter product type (Electronics or Food): ")

        try:
            product_type = parse_product_type(raw_type)
        except ValidationError:
            self._print("Invalid product type. Skipping...")
            return

        draft = ProductDraft(
            name=name,
            price=price,
            stock_quantity=stock,
            product_type=product_type.value,
        )
        if product_type is ProductType.ELECTRONICS:
            draft.warranty_period = self._prompt(
                "Enter warranty period (months): ",
                lambda raw: parse_int(raw, 0),
            )
        else:
            draft.expiration_date = self._input("Enter expiration date (YYYY-MM-DD): ").strip()

        self._run_action(lambda: self._print(self._controller.on_add_product(draft)))

    def _sell_product(self) -> None:
        self._print("\n=== Inventory ===")
        self._display_inventory()
        name = self._input("Enter product name to sell: ").strip()
        quantity = self._prompt("Enter quantity to sell: ", lambda raw: parse_int(raw, 1))
        self._print(self._controller.on_sell_product(name, quantity))

    def _apply_discount(self) -> None:
        name = self._input("Enter product name for discount: ").strip()
        percentage = self._prompt(
            "Enter discount percentage: ",
            lambda raw: parse_float(raw, 0.0),
        )
        self._print(self._controller.on_apply_discount(name, percentage))

    def _restock(self) -> None:
        threshold = self._prompt(
            "Enter stock threshold for restocking: ",
            lambda raw: parse_int(raw, 0),
        )
        self._print(self._controller.on_restock(threshold))

    def _save(self) -> None:
        self._print(self._controller.on_save())

    def _load(self) -> None:
        self._print(self._controller.on_load())

    def _prompt(
        self,
        prompt: str,
        parser: Callable[[str], _T],
        invalid_message: str = INVALID_INPUT_MESSAGE,
    ) -> _T:
        """Repite la pregunta hasta obtener un valor valido."""
        while True:
            raw = self._input(prompt)
            try:
                return parser(raw)
            except ValidationError:
                self._print(invalid_message)

    def _print(self, message: str) -> None:
        print(message, file=self._output)
