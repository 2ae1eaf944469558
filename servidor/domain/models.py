"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProductType(str, Enum):
    """Categorias de producto soportadas."""

    ELECTRONICS = "Electronics"
    FOOD = "Food"

    @classmethod
    def parse(cls, raw: str) -> ProductType:
        """Resuelve el tipo ignorando mayusculas y espacios."""
        normalized = raw.strip().casefold()
        for member in cls:
            if member.value.casefold() == normalized:
                return member
        raise ValueError(f"Tipo de producto desconocido: {raw!r}")


@dataclass(slots=True)
class ElectronicsDetails:
    """Datos propios de un producto electronico."""

    warranty_period: int  # meses


@dataclass(slots=True)
class FoodDetails:
    """Datos propios de un producto alimenticio."""

    expiration_date: str  # texto libre, idealmente YYYY-MM-DD


ProductDetails = ElectronicsDetails | FoodDetails


@dataclass(slots=True)
class Product:
    """Representa un producto en inventario.

    El nombre identifica al producto dentro del inventario y no cambia
    despues de la creacion. Precio y stock se modifican en sitio.
    """

    name: str
    price: float
    stock_quantity: int
    details: ProductDetails

    def __setattr__(self, attr: str, value: object) -> None:
        if attr == "name" and hasattr(self, "name"):
            raise AttributeError("El nombre de un producto no se puede modificar.")
        object.__setattr__(self, attr, value)

    @property
    def product_type(self) -> ProductType:
        """Retorna el tipo de producto segun sus datos especificos."""
        match self.details:
            case ElectronicsDetails():
                return ProductType.ELECTRONICS
            case FoodDetails():
                return ProductType.FOOD
        raise TypeError(f"Detalle de producto no soportado: {self.details!r}")

    def display(self) -> str:
        """Construye el bloque de texto que describe el producto."""
        lines = [
            f"Product Name: {self.name}, Price: ${self.price:g}, "
            f"Stock Quantity: {self.stock_quantity}"
        ]
        match self.details:
            case ElectronicsDetails(warranty_period=months):
                lines.append(f"Warranty Period: {months} months")
            case FoodDetails(expiration_date=expiration):
                lines.append(f"Expiration Date: {expiration}")
        return "\n".join(lines)

    def apply_discount(self, percentage: float) -> None:
        """Descuenta un porcentaje del precio actual, sin limite superior."""
        self.price -= self.price * (percentage / 100)

    def update_stock(self, delta: int) -> None:
        """Suma (o resta) unidades al stock sin validar piso."""
        self.stock_quantity += delta

    def sell(self, quantity: int) -> bool:
        """Descuenta stock solo si alcanza; retorna si la venta se realizo."""
        if self.stock_quantity >= quantity:
            self.stock_quantity -= quantity
            return True
        return False


def create_product(
    name: str,
    price: float,
    stock_quantity: int,
    product_type: ProductType | str,
    type_field: int | str,
) -> Product:
    """Construye un producto del tipo indicado con su campo especifico."""
    if not isinstance(product_type, ProductType):
        product_type = ProductType.parse(product_type)

    details: ProductDetails
    if product_type is ProductType.ELECTRONICS:
        details = ElectronicsDetails(warranty_period=int(type_field))
    else:
        details = FoodDetails(expiration_date=str(type_field))

    return Product(name, price, stock_quantity, details)
