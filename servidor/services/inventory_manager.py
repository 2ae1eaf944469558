"""Servicio que administra el inventario en memoria."""

from __future__ import annotations

import logging
from pathlib import Path

from parametros import RESTOCK_AMOUNT
from servidor.domain.models import Product
from servidor.services.inventory_store import InventoryFileStore
from servidor.services.transaction_log import TransactionKind, TransactionLog
from shared.errors import ServiceError

LOGGER = logging.getLogger(__name__)

EMPTY_INVENTORY_MESSAGE = "Inventory is empty."


class InventoryManager:
    """Duenio exclusivo de los productos, indexados por nombre."""

    def __init__(
        self,
        transaction_log: TransactionLog | None = None,
        store: InventoryFileStore | None = None,
        restock_amount: int = RESTOCK_AMOUNT,
    ) -> None:
        self._inventory: dict[str, Product] = {}
        self._transaction_log = transaction_log or TransactionLog()
        self._store = store or InventoryFileStore()
        self._restock_amount = restock_amount

    def __len__(self) -> int:
        return len(self._inventory)

    def add_product(self, product: Product) -> bool:
        """Agrega el producto si su nombre no existe; nunca sobrescribe."""
        if product.name in self._inventory:
            LOGGER.warning(
                "Product with name '%s' already exists. Skipping...",
                product.name,
            )
            return False

        self._inventory[product.name] = product
        LOGGER.info(
            "Producto agregado: %s (%s)",
            product.name,
            product.product_type.value,
        )
        return True

    def get_product(self, name: str) -> Product | None:
        return self._inventory.get(name)

    def list_products(self) -> list[Product]:
        """Lista productos ordenados por nombre."""
        return [self._inventory[name] for name in sorted(self._inventory)]

    def display_inventory(self) -> str:
        """Texto con el detalle de cada producto, o aviso de inventario vacio."""
        if not self._inventory:
            return EMPTY_INVENTORY_MESSAGE
        return "\n".join(product.display() for product in self.list_products())

    def sell_product(self, name: str, quantity: int) -> bool:
        """Vende unidades de un producto; registra la venta solo si se concreta."""
        product = self._inventory.get(name)
        if product is None:
            LOGGER.info("Venta rechazada, producto no encontrado: %s", name)
            return False

        success = product.sell(quantity)
        if success:
            self._record_transaction(TransactionKind.SALE, name, quantity)
        else:
            LOGGER.info(
                "Venta rechazada por stock insuficiente: %s (stock=%s, pedido=%s)",
                name,
                product.stock_quantity,
                quantity,
            )
        return success

    def apply_discount(self, name: str, percentage: float) -> bool:
        """Aplica un descuento porcentual; False si el producto no existe."""
        product = self._inventory.get(name)
        if product is None:
            LOGGER.warning("Product not found: %s", name)
            return False

        product.apply_discount(percentage)
        self._record_transaction(TransactionKind.DISCOUNT, name, float(percentage))
        return True

    def check_and_restock(self, threshold: int) -> list[str]:
        """Reabastece cada producto con stock estrictamente menor al umbral.

        Retorna la confirmacion de cada producto reabastecido, en orden de nombre.
        """
        return [
            self.restock_product(product)
            for product in self.list_products()
            if product.stock_quantity < threshold
        ]

    def restock_product(self, product: Product) -> str:
        """Suma la cantidad fija de reabastecimiento y registra la transaccion."""
        product.update_stock(self._restock_amount)
        self._record_transaction(TransactionKind.RESTOCK, product.name, self._restock_amount)
        confirmation = f"Restocked {product.name} by {self._restock_amount} units."
        LOGGER.info("%s", confirmation)
        return confirmation

    def save_inventory_to_file(self) -> Path:
        """Guarda nombre, tipo y stock de cada producto (formato con perdida)."""
        return self._store.save(self.list_products())

    def load_inventory_from_file(self) -> int:
        """Lee el archivo guardado sin reconstruir productos.

        La carga no esta soportada: el formato no guarda precio ni campo
        especifico. El inventario en memoria no se modifica.
        """
        lines = self._store.read_lines()
        LOGGER.warning(
            "Carga de inventario no soportada; se leyeron %s lineas de %s sin aplicar cambios.",
            len(lines),
            self._store.path,
        )
        return len(lines)

    def log_transaction(
        self,
        kind: TransactionKind | str,
        name: str,
        value: int | float,
    ) -> str:
        return self._transaction_log.log_transaction(kind, name, value)

    def _record_transaction(
        self,
        kind: TransactionKind,
        name: str,
        value: int | float,
    ) -> None:
        """Registra una transaccion ya aplicada; un fallo de escritura no la revierte."""
        try:
            self.log_transaction(kind, name, value)
        except ServiceError:
            LOGGER.exception(
                "No se pudo registrar la transaccion %s de %s; el cambio se mantiene.",
                kind.value,
                name,
            )
