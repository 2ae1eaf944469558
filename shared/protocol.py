"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureReason(str, Enum):
    """Motivo por el que una operacion de inventario fue rechazada."""

    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"


@dataclass(slots=True)
class ProductDraft:
    """DTO para capturar datos de un producto nuevo desde la UI."""

    name: str
    price: float
    stock_quantity: int
    product_type: str
    warranty_period: int = 0
    expiration_date: str = ""


@dataclass(slots=True)
class AddProductRequest:
    """Solicitud para agregar un producto al inventario."""

    product: ProductDraft


@dataclass(slots=True)
class AddProductResponse:
    """Respuesta de agregado de producto."""

    added: bool
    failure: FailureReason | None = None


@dataclass(slots=True)
class ListInventoryResponse:
    """Respuesta con el contenido del inventario."""

    display_text: str


@dataclass(slots=True)
class SellProductRequest:
    """Solicitud de venta de unidades de un producto."""

    name: str
    quantity: int


@dataclass(slots=True)
class SellProductResponse:
    """Respuesta de venta con stock remanente cuando aplica."""

    success: bool
    remaining_stock: int | None = None
    failure: FailureReason | None = None


@dataclass(slots=True)
class ApplyDiscountRequest:
    """Solicitud de descuento porcentual sobre un producto."""

    name: str
    percentage: float


@dataclass(slots=True)
class ApplyDiscountResponse:
    """Respuesta de descuento con el precio resultante."""

    applied: bool
    new_price: float | None = None
    failure: FailureReason | None = None


@dataclass(slots=True)
class RestockRequest:
    """Solicitud de reabastecimiento bajo un umbral de stock."""

    threshold: int


@dataclass(slots=True)
class RestockResponse:
    """Respuesta con la confirmacion de cada producto reabastecido."""

    confirmations: list[str]


@dataclass(slots=True)
class SaveInventoryResponse:
    """Respuesta con la ruta del archivo de inventario guardado."""

    file_path: str
    product_count: int


@dataclass(slots=True)
class LoadInventoryResponse:
    """Respuesta de carga; la reconstruccion no esta soportada."""

    lines_read: int
