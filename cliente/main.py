"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalServerGateway
from cliente.backend.validators import validate_data_dir
from cliente.frontend.console_menu import ConsoleMenu
from parametros import APP_NAME, DATA_DIR, INVENTORY_FILENAME, TRANSACTION_LOG_FILENAME
from servidor.services.inventory_manager import InventoryManager
from servidor.services.inventory_store import InventoryFileStore
from servidor.services.transaction_log import TransactionLog
from shared.errors import ValidationError

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI para elegir interfaz y directorio de datos."""
    parser = argparse.ArgumentParser(
        prog="lazy-inventory",
        description=f"{APP_NAME}: inventario en memoria de Electronics y Food.",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Abre la ventana grafica en lugar del menu de texto.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help="Directorio para inventory.txt y transaction_log.txt.",
    )
    return parser.parse_args(argv)


def build_controller(data_dir: Path) -> AppController:
    """Arma manager, gateway y controller sobre un directorio de datos."""
    manager = InventoryManager(
        transaction_log=TransactionLog(data_dir / TRANSACTION_LOG_FILENAME),
        store=InventoryFileStore(data_dir / INVENTORY_FILENAME),
    )
    return AppController(gateway=LocalServerGateway(inventory_manager=manager))


def run_gui(controller: AppController) -> int:
    """Ejecuta la aplicacion grafica."""
    from PyQt6.QtWidgets import QApplication

    from cliente.frontend.main_window import MainWindow

    app = QApplication(sys.argv)
    window = MainWindow(controller=controller)
    window.show()

    LOGGER.info("Aplicacion grafica iniciada.")
    return app.exec()


def main(argv: Sequence[str] | None = None) -> int:
    """Punto de entrada CLI."""
    args = parse_args(argv)
    try:
        validate_data_dir(args.data_dir)
    except ValidationError as exc:
        LOGGER.error("%s", exc)
        return 1

    controller = build_controller(args.data_dir)
    LOGGER.info("Directorio de datos: %s", args.data_dir)

    if args.gui:
        return run_gui(controller)
    return ConsoleMenu(controller=controller).run()


if __name__ == "__main__":
    raise SystemExit(main())
