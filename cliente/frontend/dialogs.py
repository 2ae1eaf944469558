"""Helpers de dialogos para frontend."""

from __future__ import annotations

from PyQt6.QtWidgets import QInputDialog, QMessageBox, QWidget

_MAX_INT = 2_147_483_647
_MAX_FLOAT = 1e12


def show_info(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo informativo."""
    QMessageBox.information(parent, title, message)


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo de error."""
    QMessageBox.critical(parent, title, message)


def ask_text(parent: QWidget | None, title: str, label: str) -> str | None:
    """Pide un texto; None si el usuario cancela."""
    text, accepted = QInputDialog.getText(parent, title, label)
    return text.strip() if accepted else None


def ask_int(
    parent: QWidget | None,
    title: str,
    label: str,
    minimum: int = 0,
    value: int = 0,
) -> int | None:
    """Pide un entero mayor o igual a `minimum`; None si se cancela."""
    number, accepted = QInputDialog.getInt(
        parent, title, label, max(value, minimum), minimum, _MAX_INT
    )
    return number if accepted else None


def ask_float(
    parent: QWidget | None,
    title: str,
    label: str,
    minimum: float = 0.0,
) -> float | None:
    """Pide un decimal con dos cifras; None si se cancela."""
    number, accepted = QInputDialog.getDouble(
        parent, title, label, minimum, minimum, _MAX_FLOAT, 2
    )
    return number if accepted else None
