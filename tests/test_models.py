"""Tests para el modelo de productos."""

from __future__ import annotations

import unittest

from servidor.domain.models import (
    ElectronicsDetails,
    FoodDetails,
    Product,
    ProductType,
    create_product,
)


class ProductTests(unittest.TestCase):
    """Valida operaciones por producto."""

    def test_create_product_builds_variant_by_type(self) -> None:
        """Debe construir detalles especificos segun el tipo indicado."""
        laptop = create_product("Laptop", 1000.0, 5, ProductType.ELECTRONICS, 12)
        milk = create_product("Milk", 2.5, 30, "food", "2025-06-01")

        self.assertEqual(laptop.product_type, ProductType.ELECTRONICS)
        self.assertEqual(laptop.details, ElectronicsDetails(warranty_period=12))
        self.assertEqual(milk.product_type, ProductType.FOOD)
        self.assertEqual(milk.details, FoodDetails(expiration_date="2025-06-01"))

    def test_create_product_rejects_unknown_type(self) -> None:
        with self.assertRaises(ValueError):
            create_product("Chair", 10.0, 1, "Furniture", "")

    def test_product_type_values(self) -> None:
        """Los literales de tipo deben ser fijos por variante."""
        self.assertEqual(ProductType.ELECTRONICS.value, "Electronics")
        self.assertEqual(ProductType.FOOD.value, "Food")

    def test_name_is_read_only(self) -> None:
        product = create_product("Laptop", 1000.0, 5, ProductType.ELECTRONICS, 12)

        with self.assertRaises(AttributeError):
            product.name = "Desktop"  # type: ignore[misc]
        self.assertEqual(product.name, "Laptop")

    def test_constructor_uses_public_name_keyword(self) -> None:
        """El nombre se pasa y se muestra como `name`, no como campo privado."""
        product = Product(name="Milk", price=2.5, stock_quantity=3, details=FoodDetails("2025-06-01"))

        self.assertEqual(product.name, "Milk")
        self.assertTrue(repr(product).startswith("Product(name='Milk'"))

    def test_price_and_stock_remain_mutable(self) -> None:
        product = Product("Milk", 2.5, 3, FoodDetails("2025-06-01"))

        product.price = 3.0
        product.stock_quantity = 7

        self.assertEqual((product.price, product.stock_quantity), (3.0, 7))

    def test_apply_discount_uses_simple_percentage(self) -> None:
        """Debe descontar price * p / 100 sin componer ni acotar."""
        product = create_product("Laptop", 1000.0, 5, ProductType.ELECTRONICS, 12)

        product.apply_discount(10)
        self.assertAlmostEqual(product.price, 900.0)

        product.apply_discount(0)
        self.assertAlmostEqual(product.price, 900.0)

    def test_apply_discount_over_hundred_goes_negative(self) -> None:
        product = create_product("Bread", 4.0, 5, ProductType.FOOD, "2025-05-10")

        product.apply_discount(150)

        self.assertAlmostEqual(product.price, -2.0)

    def test_update_stock_allows_negative_delta_without_floor(self) -> None:
        product = Product("Bread", 4.0, 2, FoodDetails("2025-05-10"))

        product.update_stock(-5)

        self.assertEqual(product.stock_quantity, -3)

    def test_sell_succeeds_only_with_enough_stock(self) -> None:
        """Debe vender si stock >= cantidad y no mutar en caso contrario."""
        product = Product("Phone", 500.0, 3, ElectronicsDetails(24))

        self.assertTrue(product.sell(3))
        self.assertEqual(product.stock_quantity, 0)
        self.assertFalse(product.sell(1))
        self.assertEqual(product.stock_quantity, 0)

    def test_sell_does_not_reject_zero_or_negative_quantity(self) -> None:
        product = Product("Phone", 500.0, 3, ElectronicsDetails(24))

        self.assertTrue(product.sell(0))
        self.assertTrue(product.sell(-2))
        self.assertEqual(product.stock_quantity, 5)

    def test_display_includes_type_specific_field(self) -> None:
        laptop = create_product("Laptop", 1000.0, 5, ProductType.ELECTRONICS, 12)
        milk = create_product("Milk", 2.5, 30, ProductType.FOOD, "2025-06-01")

        self.assertEqual(
            laptop.display(),
            "Product Name: Laptop, Price: $1000, Stock Quantity: 5\n"
            "Warranty Period: 12 months",
        )
        self.assertEqual(
            milk.display(),
            "Product Name: Milk, Price: $2.5, Stock Quantity: 30\n"
            "Expiration Date: 2025-06-01",
        )


if __name__ == "__main__":
    unittest.main()
