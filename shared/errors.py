"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class InventoryError(ValidationError):
    """Operacion de inventario rechazada (no fatal)."""


class DuplicateProductError(InventoryError):
    """Ya existe un producto con el mismo nombre."""


class ProductNotFoundError(InventoryError):
    """No existe un producto con el nombre indicado."""


class InsufficientStockError(InventoryError):
    """El stock disponible no alcanza para la venta."""
