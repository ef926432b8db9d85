"""Validaciones para entradas del cliente."""

from __future__ import annotations

import math

from shared.errors import ValidationError
from shared.protocol import ProductDraft

NAME_MIN_LENGTH = 2
ENTITY_PRICE_MIN = 1
ENTITY_STOCK_MIN = 0


def validate_product_draft(draft: ProductDraft) -> None:
    """Valida reglas de negocio de un producto antes de enviarlo al servidor."""
    invalid_fields: list[str] = []

    if len((draft.name or "").strip()) < NAME_MIN_LENGTH:
        invalid_fields.append(f"Nombre (minimo {NAME_MIN_LENGTH} caracteres)")
    if not is_number(draft.price) or draft.price < ENTITY_PRICE_MIN:
        invalid_fields.append(f"Precio (debe ser mayor o igual a {ENTITY_PRICE_MIN})")
    if not is_integer(draft.stock) or draft.stock < ENTITY_STOCK_MIN:
        invalid_fields.append(f"Stock (debe ser un entero mayor o igual a {ENTITY_STOCK_MIN})")

    if invalid_fields:
        raise ValidationError("Producto invalido: " + ", ".join(invalid_fields))


def is_number(value: object) -> bool:
    """Indica si el valor es un numero finito (excluye bool)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_integer(value: object) -> bool:
    """Indica si el valor es un entero (excluye bool)."""
    return isinstance(value, int) and not isinstance(value, bool)
