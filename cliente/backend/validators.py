"""Validaciones para entradas del cliente."""

from __future__ import annotations

from pathlib import Path

from servidor.domain.models import ProductType
from shared.errors import ValidationError

_YES_ANSWERS = frozenset({"yes", "y", "si", "s"})
_NO_ANSWERS = frozenset({"no", "n"})


def validate_data_dir(path: Path) -> None:
    """Valida que la ruta de datos sea utilizable para los archivos de inventario."""
    if path.exists() and not path.is_dir():
        raise ValidationError(f"La ruta no es un directorio: {path}")

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ValidationError(f"No se pudo crear/acceder al directorio: {path}") from exc


def parse_int(raw: str, minimum: int | None = None) -> int:
    """Convierte texto a entero, exigiendo un minimo opcional."""
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ValidationError(f"Valor entero invalido: {raw!r}") from exc

    if minimum is not None and value < minimum:
        raise ValidationError(f"El valor debe ser mayor o igual a {minimum}.")
    return value


def parse_float(raw: str, minimum: float | None = None) -> float:
    """Convierte texto a decimal, exigiendo un minimo opcional."""
    try:
        value = float(raw.strip())
    except ValueError as exc:
        raise ValidationError(f"Valor decimal invalido: {raw!r}") from exc

    if value != value or value in (float("inf"), float("-inf")):
        raise ValidationError(f"Valor decimal invalido: {raw!r}")
    if minimum is not None and value < minimum:
        raise ValidationError(f"El valor debe ser mayor o igual a {minimum}.")
    return value


def parse_product_type(raw: str) -> ProductType:
    """Resuelve Electronics/Food sin distinguir mayusculas."""
    try:
        return ProductType.parse(raw)
    except ValueError as exc:
        raise ValidationError(
            "Tipo de producto invalido. Usa Electronics o Food."
        ) from exc


def parse_yes_no(raw: str) -> bool:
    """Interpreta respuestas si/no."""
    answer = raw.strip().casefold()
    if answer in _YES_ANSWERS:
        return True
    if answer in _NO_ANSWERS:
        return False
    raise ValidationError("Responde yes o no.")
