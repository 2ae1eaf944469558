"""Tests para InventoryManager."""

from __future__ import annotations

import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from servidor.domain.models import ProductType, create_product
from servidor.services.inventory_manager import EMPTY_INVENTORY_MESSAGE, InventoryManager
from servidor.services.inventory_store import InventoryFileStore
from servidor.services.transaction_log import TransactionLog

FIXED_NOW = datetime(2025, 5, 9, 10, 0, 0)


class InventoryManagerTests(unittest.TestCase):
    """Valida operaciones del inventario y sus transacciones."""

    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self._temp_dir.cleanup)
        base_path = Path(self._temp_dir.name)
        self.log_path = base_path / "transaction_log.txt"
        self.inventory_path = base_path / "inventory.txt"
        self.manager = InventoryManager(
            transaction_log=TransactionLog(self.log_path, clock=lambda: FIXED_NOW),
            store=InventoryFileStore(self.inventory_path),
        )

    def _log_lines(self) -> list[str]:
        if not self.log_path.exists():
            return []
        return self.log_path.read_text(encoding="utf-8").splitlines()

    def test_add_product_rejects_duplicate_name_without_overwrite(self) -> None:
        """Un segundo add con el mismo nombre no debe alterar el primero."""
        first = create_product("Laptop", 1000.0, 5, ProductType.ELECTRONICS, 12)
        second = create_product("Laptop", 1.0, 99, ProductType.FOOD, "2025-01-01")

        self.assertTrue(self.manager.add_product(first))
        self.assertFalse(self.manager.add_product(second))

        stored = self.manager.get_product("Laptop")
        self.assertIs(stored, first)
        self.assertEqual(stored.price, 1000.0)
        self.assertEqual(len(self.manager), 1)

    def test_display_inventory_empty_and_key_order(self) -> None:
        self.assertEqual(self.manager.display_inventory(), EMPTY_INVENTORY_MESSAGE)

        self.manager.add_product(create_product("Milk", 2.5, 30, ProductType.FOOD, "2025-06-01"))
        self.manager.add_product(create_product("Apple", 0.5, 100, ProductType.FOOD, "2025-05-20"))

        text = self.manager.display_inventory()
        self.assertLess(text.index("Product Name: Apple"), text.index("Product Name: Milk"))
        self.assertEqual([p.name for p in self.manager.list_products()], ["Apple", "Milk"])

    def test_sell_unknown_product_fails_without_logging(self) -> None:
        self.assertFalse(self.manager.sell_product("Ghost", 1))
        self.assertEqual(self._log_lines(), [])

    def test_sell_logs_only_successful_sales(self) -> None:
        """Una venta rechazada no muta stock ni escribe en el log."""
        self.manager.add_product(create_product("Phone", 500.0, 4, ProductType.ELECTRONICS, 24))

        self.assertFalse(self.manager.sell_product("Phone", 5))
        self.assertEqual(self.manager.get_product("Phone").stock_quantity, 4)
        self.assertEqual(self._log_lines(), [])

        self.assertTrue(self.manager.sell_product("Phone", 4))
        self.assertEqual(self.manager.get_product("Phone").stock_quantity, 0)
        self.assertEqual(
            self._log_lines(),
            ["2025-05-09 10:00:00 Sale - Phone | Quantity: 4"],
        )

    def test_apply_discount_unknown_product_does_nothing(self) -> None:
        self.assertFalse(self.manager.apply_discount("Ghost", 10))
        self.assertEqual(self._log_lines(), [])

    def test_apply_discount_always_logs_when_found(self) -> None:
        """El descuento se registra incluso con porcentaje 0."""
        self.manager.add_product(create_product("Bread", 4.0, 5, ProductType.FOOD, "2025-05-10"))

        self.assertTrue(self.manager.apply_discount("Bread", 0))
        self.assertTrue(self.manager.apply_discount("Bread", 150))

        self.assertAlmostEqual(self.manager.get_product("Bread").price, -2.0)
        self.assertEqual(
            self._log_lines(),
            [
                "2025-05-09 10:00:00 Discount - Bread | Discount: 0%",
                "2025-05-09 10:00:00 Discount - Bread | Discount: 150%",
            ],
        )

    def test_check_and_restock_adds_fixed_amount_below_threshold(self) -> None:
        """Solo productos con stock < umbral reciben exactamente la cantidad fija."""
        self.manager.add_product(create_product("A", 1.0, 0, ProductType.FOOD, ""))
        self.manager.add_product(create_product("B", 1.0, 4, ProductType.FOOD, ""))
        self.manager.add_product(create_product("C", 1.0, 5, ProductType.FOOD, ""))
        self.manager.add_product(create_product("D", 1.0, 50, ProductType.FOOD, ""))

        confirmations = self.manager.check_and_restock(5)

        self.assertEqual(
            confirmations,
            ["Restocked A by 10 units.", "Restocked B by 10 units."],
        )
        stocks = {p.name: p.stock_quantity for p in self.manager.list_products()}
        self.assertEqual(stocks, {"A": 10, "B": 14, "C": 5, "D": 50})
        self.assertEqual(
            self._log_lines(),
            [
                "2025-05-09 10:00:00 Restock - A | Quantity: 10",
                "2025-05-09 10:00:00 Restock - B | Quantity: 10",
            ],
        )

    def test_restock_product_returns_confirmation(self) -> None:
        product = create_product("Milk", 2.5, 1, ProductType.FOOD, "2025-06-01")
        self.manager.add_product(product)

        message = self.manager.restock_product(product)

        self.assertEqual(message, "Restocked Milk by 10 units.")
        self.assertEqual(product.stock_quantity, 11)

    def test_load_inventory_from_file_does_not_modify_inventory(self) -> None:
        """La carga lee lineas pero no reconstruye productos."""
        self.manager.add_product(create_product("Milk", 2.5, 30, ProductType.FOOD, "2025-06-01"))
        self.manager.save_inventory_to_file()

        fresh = InventoryManager(
            transaction_log=TransactionLog(self.log_path, clock=lambda: FIXED_NOW),
            store=InventoryFileStore(self.inventory_path),
        )
        lines_read = fresh.load_inventory_from_file()

        self.assertEqual(lines_read, 1)
        self.assertEqual(len(fresh), 0)

    def test_failed_log_write_keeps_applied_changes(self) -> None:
        """Si el log no se puede escribir, la venta y el reabastecimiento se mantienen."""
        broken_log_dir = Path(self._temp_dir.name) / "log_as_directory"
        broken_log_dir.mkdir()
        manager = InventoryManager(
            transaction_log=TransactionLog(broken_log_dir, clock=lambda: FIXED_NOW),
            store=InventoryFileStore(self.inventory_path),
        )
        manager.add_product(create_product("Laptop", 1000.0, 5, ProductType.ELECTRONICS, 12))
        manager.add_product(create_product("Phone", 500.0, 1, ProductType.ELECTRONICS, 24))

        with self.assertLogs("servidor.services.inventory_manager", level="ERROR") as logs:
            sold = manager.sell_product("Laptop", 3)
            discounted = manager.apply_discount("Laptop", 10)
            confirmations = manager.check_and_restock(100)

        self.assertTrue(sold)
        self.assertTrue(discounted)
        self.assertEqual(len(confirmations), 2)
        self.assertEqual(manager.get_product("Laptop").stock_quantity, 12)
        self.assertEqual(manager.get_product("Phone").stock_quantity, 11)
        self.assertAlmostEqual(manager.get_product("Laptop").price, 900.0)
        self.assertEqual(len(logs.records), 4)

    def test_end_to_end_laptop_scenario(self) -> None:
        """Flujo completo: vender, rechazar, descontar, reabastecer y guardar."""
        self.manager.add_product(create_product("Laptop", 1000.0, 5, ProductType.ELECTRONICS, 12))

        self.assertTrue(self.manager.sell_product("Laptop", 3))
        self.assertEqual(self.manager.get_product("Laptop").stock_quantity, 2)

        self.assertFalse(self.manager.sell_product("Laptop", 10))
        self.assertEqual(self.manager.get_product("Laptop").stock_quantity, 2)

        self.manager.apply_discount("Laptop", 10)
        self.assertAlmostEqual(self.manager.get_product("Laptop").price, 900.0)

        self.manager.check_and_restock(5)
        self.assertEqual(self.manager.get_product("Laptop").stock_quantity, 12)

        saved_path = self.manager.save_inventory_to_file()
        content = saved_path.read_text(encoding="utf-8")

        self.assertIn("Laptop | Electronics | 12 |", content)
        self.assertEqual(
            self._log_lines(),
            [
                "2025-05-09 10:00:00 Sale - Laptop | Quantity: 3",
                "2025-05-09 10:00:00 Discount - Laptop | Discount: 10%",
                "2025-05-09 10:00:00 Restock - Laptop | Quantity: 10",
            ],
        )


if __name__ == "__main__":
    unittest.main()
