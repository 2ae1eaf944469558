"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
from pathlib import Path

APP_NAME = "Lazy Inventory"

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
INVENTORY_FILENAME = "inventory.txt"
TRANSACTION_LOG_FILENAME = "transaction_log.txt"
INVENTORY_FILE = DATA_DIR / INVENTORY_FILENAME
TRANSACTION_LOG_FILE = DATA_DIR / TRANSACTION_LOG_FILENAME

# Unidades agregadas por cada reabastecimiento, sin importar el deficit.
RESTOCK_AMOUNT = 10

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
