"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, TypeVar

from servidor.domain.models import Product, ProductType, create_product
from servidor.services.inventory_manager import InventoryManager
from shared.errors import ServiceError
from shared.protocol import (
    AddProductRequest,
    AddProductResponse,
    ApplyDiscountRequest,
    ApplyDiscountResponse,
    FailureReason,
    ListInventoryResponse,
    LoadInventoryResponse,
    ProductDraft,
    RestockRequest,
    RestockResponse,
    SaveInventoryResponse,
    SellProductRequest,
    SellProductResponse,
)

LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente a servicios del servidor."""

    def add_product(self, request: AddProductRequest) -> AddProductResponse:
        """Solicita agregar un producto."""

    def list_inventory(self) -> ListInventoryResponse:
        """Solicita el contenido del inventario."""

    def sell_product(self, request: SellProductRequest) -> SellProductResponse:
        """Solicita la venta de un producto."""

    def apply_discount(self, request: ApplyDiscountRequest) -> ApplyDiscountResponse:
        """Solicita aplicar un descuento."""

    def restock_low_inventory(self, request: RestockRequest) -> RestockResponse:
        """Solicita reabastecer productos bajo el umbral."""

    def save_inventory(self) -> SaveInventoryResponse:
        """Solicita guardar el inventario en archivo."""

    def load_inventory(self) -> LoadInventoryResponse:
        """Solicita cargar el inventario desde archivo (no soportado)."""


class LocalServerGateway:
    """Implementacion local del gateway usando servicios en memoria."""

    def __init__(self, inventory_manager: InventoryManager | None = None) -> None:
        self._inventory_manager = inventory_manager or InventoryManager()

    def add_product(self, request: AddProductRequest) -> AddProductResponse:
        """Construye el producto desde el draft y lo agrega."""
        product = self._call(
            lambda: self._build_product(request.product),
            "No fue posible construir el producto.",
        )
        added = self._call(
            lambda: self._inventory_manager.add_product(product),
            "No fue posible agregar el producto.",
        )
        if not added:
            return AddProductResponse(added=False, failure=FailureReason.DUPLICATE_NAME)
        return AddProductResponse(added=True)

    def list_inventory(self) -> ListInventoryResponse:
        """Retorna el texto de despliegue del inventario."""
        return ListInventoryResponse(
            display_text=self._inventory_manager.display_inventory(),
        )

    def sell_product(self, request: SellProductRequest) -> SellProductResponse:
        """Vende y distingue producto inexistente de stock insuficiente."""
        product = self._inventory_manager.get_product(request.name)
        if product is None:
            return SellProductResponse(success=False, failure=FailureReason.NOT_FOUND)

        success = self._call(
            lambda: self._inventory_manager.sell_product(request.name, request.quantity),
            "No fue posible registrar la venta.",
        )
        if not success:
            return SellProductResponse(
                success=False,
                remaining_stock=product.stock_quantity,
                failure=FailureReason.INSUFFICIENT_STOCK,
            )
        return SellProductResponse(success=True, remaining_stock=product.stock_quantity)

    def apply_discount(self, request: ApplyDiscountRequest) -> ApplyDiscountResponse:
        """Aplica el descuento y retorna el precio resultante."""
        applied = self._call(
            lambda: self._inventory_manager.apply_discount(request.name, request.percentage),
            "No fue posible aplicar el descuento.",
        )
        if not applied:
            return ApplyDiscountResponse(applied=False, failure=FailureReason.NOT_FOUND)

        product = self._inventory_manager.get_product(request.name)
        return ApplyDiscountResponse(
            applied=True,
            new_price=product.price if product is not None else None,
        )

    def restock_low_inventory(self, request: RestockRequest) -> RestockResponse:
        """Reabastece productos con stock menor al umbral."""
        confirmations = self._call(
            lambda: self._inventory_manager.check_and_restock(request.threshold),
            "No fue posible reabastecer el inventario.",
        )
        return RestockResponse(confirmations=confirmations)

    def save_inventory(self) -> SaveInventoryResponse:
        """Guarda el inventario y retorna la ruta escrita."""
        saved_path = self._call(
            self._inventory_manager.save_inventory_to_file,
            "No fue posible guardar el inventario.",
        )
        return SaveInventoryResponse(
            file_path=str(saved_path),
            product_count=len(self._inventory_manager),
        )

    def load_inventory(self) -> LoadInventoryResponse:
        """Delega la lectura del archivo; no reconstruye productos."""
        lines_read = self._call(
            self._inventory_manager.load_inventory_from_file,
            "No fue posible leer el archivo de inventario.",
        )
        return LoadInventoryResponse(lines_read=lines_read)

    @staticmethod
    def _build_product(draft: ProductDraft) -> Product:
        """Traduce un draft al producto de dominio segun su tipo."""
        product_type = ProductType.parse(draft.product_type)
        type_field: int | str = draft.expiration_date
        if product_type is ProductType.ELECTRONICS:
            type_field = draft.warranty_period
        return create_product(
            name=draft.name,
            price=draft.price,
            stock_quantity=draft.stock_quantity,
            product_type=product_type,
            type_field=type_field,
        )

    @staticmethod
    def _call(operation: Callable[[], _T], error_message: str) -> _T:
        """Ejecuta una operacion de servicio envolviendo fallos inesperados."""
        try:
            return operation()
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado: %s", error_message)
            raise ServiceError(error_message) from exc
