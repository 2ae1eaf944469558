"""Persistencia en archivo plano del inventario."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from parametros import INVENTORY_FILE
from servidor.domain.models import Product
from shared.errors import ServiceError

LOGGER = logging.getLogger(__name__)


def format_inventory_line(product: Product) -> str:
    """Construye la linea `nombre | tipo | stock | ` de un producto.

    Precio y campo especifico del tipo no se guardan.
    """
    return f"{product.name} | {product.product_type.value} | {product.stock_quantity} | "


class InventoryFileStore:
    """Escribe y lee el archivo de inventario."""

    def __init__(self, path: Path = INVENTORY_FILE) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def save(self, products: Iterable[Product]) -> Path:
        """Sobrescribe el archivo con una linea por producto."""
        if self._path.exists() and self._path.is_dir():
            raise ServiceError(f"La ruta de inventario es un directorio: {self._path}")

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as inventory_file:
                for product in products:
                    inventory_file.write(format_inventory_line(product) + "\n")
        except OSError as exc:
            raise ServiceError(
                f"No fue posible guardar el inventario: {self._path}"
            ) from exc

        LOGGER.info("Inventario guardado en: %s", self._path)
        return self._path

    def read_lines(self) -> list[str]:
        """Lee las lineas crudas del archivo; vacio si no existe."""
        if not self._path.exists():
            return []

        try:
            with self._path.open("r", encoding="utf-8") as inventory_file:
                return [line.rstrip("\n") for line in inventory_file]
        except OSError as exc:
            raise ServiceError(
                f"No fue posible leer el inventario: {self._path}"
            ) from exc
