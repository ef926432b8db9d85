"""Formateo de montos en pesos chilenos (CLP)."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

_CURRENCY_SYMBOL = "$"
_THOUSANDS_SEPARATOR = "."


def format_clp(value: float | int | None, show_symbol: bool = True) -> str:
    """Formatea un monto con separador de miles ``.`` y sin decimales.

    Valores vacios o no numericos se muestran como cero. El signo negativo
    queda inmediatamente antes de los digitos: ``$-1.000``.
    """
    amount = _round_to_integer(value)
    formatted = f"{amount:,}".replace(",", _THOUSANDS_SEPARATOR)
    return f"{_CURRENCY_SYMBOL}{formatted}" if show_symbol else formatted


def _round_to_integer(value: object) -> int:
    """Redondea al entero mas cercano (mitades lejos de cero)."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        if value.is_integer():
            return int(value)
        value = Decimal(str(value))
    if not value.is_finite():
        return 0

    return int(value.to_integral_value(rounding=ROUND_HALF_UP))
