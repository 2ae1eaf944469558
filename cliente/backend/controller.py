"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from shared.errors import (
    DuplicateProductError,
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from shared.protocol import (
    AddProductRequest,
    ApplyDiscountRequest,
    FailureReason,
    ProductDraft,
    RestockRequest,
    SellProductRequest,
)

from .gateway import ServerGateway
from .validators import parse_product_type

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones de UI y servicios de inventario."""

    def __init__(self, gateway: ServerGateway) -> None:
        self._gateway = gateway

    def on_add_product(self, draft: ProductDraft) -> str:
        """Valida el draft y agrega el producto al inventario."""
        self._validate_draft(draft)
        response = self._gateway.add_product(AddProductRequest(product=draft))
        if not response.added:
            raise DuplicateProductError(
                f"Product with name '{draft.name}' already exists. Skipping..."
            )

        LOGGER.info("Accion ejecutada: agregar producto %s", draft.name)
        return f"Producto agregado: {draft.name}"

    def on_display_inventory(self) -> str:
        """Retorna el texto del inventario para desplegar."""
        return self._gateway.list_inventory().display_text

    def on_sell_product(self, name: str, quantity: int) -> str:
        """Vende unidades y traduce el rechazo a un error de inventario."""
        if quantity < 1:
            raise ValidationError("La cantidad a vender debe ser al menos 1.")

        response = self._gateway.sell_product(SellProductRequest(name=name, quantity=quantity))
        if response.failure is FailureReason.NOT_FOUND:
            raise ProductNotFoundError(f"Sale failed. Product not found: {name}")
        if not response.success:
            raise InsufficientStockError(
                f"Sale failed. Insufficient stock for {name} "
                f"(available: {response.remaining_stock}, requested: {quantity})."
            )

        LOGGER.info("Accion ejecutada: venta de %s x%s", name, quantity)
        return f"Sale successful! Remaining stock for {name}: {response.remaining_stock}"

    def on_apply_discount(self, name: str, percentage: float) -> str:
        """Aplica un descuento porcentual sobre un producto existente."""
        if percentage < 0:
            raise ValidationError("El porcentaje de descuento no puede ser negativo.")

        response = self._gateway.apply_discount(
            ApplyDiscountRequest(name=name, percentage=percentage)
        )
        if not response.applied:
            raise ProductNotFoundError(f"Product not found: {name}")

        LOGGER.info("Accion ejecutada: descuento %s%% sobre %s", percentage, name)
        return f"Discount applied. New price for {name}: ${response.new_price:g}"

    def on_restock(self, threshold: int) -> str:
        """Reabastece productos con stock menor al umbral."""
        if threshold < 0:
            raise ValidationError("El umbral de reabastecimiento no puede ser negativo.")

        response = self._gateway.restock_low_inventory(RestockRequest(threshold=threshold))
        if not response.confirmations:
            return f"No products below threshold {threshold}."
        return "\n".join(response.confirmations)

    def on_save(self) -> str:
        """Guarda el inventario y retorna mensaje con la ruta."""
        response = self._gateway.save_inventory()
        LOGGER.info("Accion ejecutada: guardar inventario (%s productos)", response.product_count)
        return f"Inventory saved to {response.file_path}"

    def on_load(self) -> str:
        """Informa que la carga de inventario no esta soportada."""
        response = self._gateway.load_inventory()
        return (
            "Loading inventory is not supported; "
            f"{response.lines_read} saved lines were read and ignored."
        )

    def on_exit(
        self,
        app: QApplication | Callable[[], None] | None,
    ) -> None:
        """Cierra la aplicacion."""
        LOGGER.info("Accion ejecutada: salir")

        if callable(app):
            app()
            return

        if app is not None:
            app.quit()

    @staticmethod
    def _validate_draft(draft: ProductDraft) -> None:
        """Valida los campos minimos requeridos para crear un producto."""
        invalid_fields: list[str] = []

        if not draft.name.strip():
            invalid_fields.append("Nombre")
        if draft.price < 0:
            invalid_fields.append("Precio (debe ser mayor o igual a 0)")
        if draft.stock_quantity < 0:
            invalid_fields.append("Stock (debe ser mayor o igual a 0)")
        if draft.warranty_period < 0:
            invalid_fields.append("Garantia (debe ser mayor o igual a 0)")

        if invalid_fields:
            message = "Corrige los campos: " + ", ".join(invalid_fields)
            raise ValidationError(message)

        parse_product_type(draft.product_type)
