"""Registro append-only de transacciones de inventario."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from pathlib import Path

from parametros import TRANSACTION_LOG_FILE
from shared.errors import ServiceError

LOGGER = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class TransactionKind(str, Enum):
    """Tipos de transaccion registrados."""

    SALE = "Sale"
    DISCOUNT = "Discount"
    RESTOCK = "Restock"


def format_transaction_line(
    timestamp: datetime,
    kind: TransactionKind | str,
    product_name: str,
    value: int | float,
) -> str:
    """Construye una linea del log.

    Un entero se registra como cantidad y un float como porcentaje de
    descuento, sin importar el tipo de transaccion.
    """
    kind_text = kind.value if isinstance(kind, TransactionKind) else kind
    prefix = f"{timestamp.strftime(TIMESTAMP_FORMAT)} {kind_text} - {product_name}"
    if isinstance(value, float):
        return f"{prefix} | Discount: {value:g}%"
    return f"{prefix} | Quantity: {value}"


class TransactionLog:
    """Agrega lineas con timestamp local al archivo de transacciones."""

    def __init__(
        self,
        path: Path = TRANSACTION_LOG_FILE,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._path = path
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def log_transaction(
        self,
        kind: TransactionKind | str,
        product_name: str,
        value: int | float,
    ) -> str:
        """Agrega una transaccion al final del archivo y retorna la linea escrita."""
        line = format_transaction_line(self._clock(), kind, product_name, value)

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as log_file:
                log_file.write(line + "\n")
        except OSError as exc:
            raise ServiceError(
                f"No fue posible escribir el log de transacciones: {self._path}"
            ) from exc

        LOGGER.debug("Transaccion registrada: %s", line)
        return line
