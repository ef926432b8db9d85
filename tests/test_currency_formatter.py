"""Tests para formateo de montos CLP."""

from __future__ import annotations

import unittest
from decimal import Decimal

from cliente.backend.currency_formatter import format_clp


class FormatClpTests(unittest.TestCase):
    """Valida separador de miles, simbolo y casos borde."""

    def test_format_simple_numbers(self) -> None:
        """Debe agrupar miles con punto."""
        self.assertEqual(format_clp(100), "$100")
        self.assertEqual(format_clp(1000), "$1.000")
        self.assertEqual(format_clp(10000), "$10.000")

    def test_format_product_prices(self) -> None:
        """Debe formatear precios tipicos del catalogo."""
        self.assertEqual(format_clp(849990), "$849.990")
        self.assertEqual(format_clp(2499990), "$2.499.990")
        self.assertEqual(format_clp(249990), "$249.990")

    def test_format_millions(self) -> None:
        """Debe agrupar millones en bloques de tres."""
        self.assertEqual(format_clp(1000000), "$1.000.000")
        self.assertEqual(format_clp(15000000), "$15.000.000")

    def test_zero(self) -> None:
        self.assertEqual(format_clp(0), "$0")
        self.assertEqual(format_clp(0, show_symbol=False), "0")

    def test_empty_and_nan_values(self) -> None:
        """Valores vacios o NaN deben mostrarse como cero."""
        self.assertEqual(format_clp(None), "$0")
        self.assertEqual(format_clp(float("nan")), "$0")
        self.assertEqual(format_clp(float("inf")), "$0")
        self.assertEqual(format_clp(None, show_symbol=False), "0")
        self.assertEqual(format_clp("849990"), "$0")  # type: ignore[arg-type]

    def test_negative_numbers(self) -> None:
        """El signo debe ir justo antes de los digitos."""
        self.assertEqual(format_clp(-1000), "$-1.000")
        self.assertEqual(format_clp(-849990), "$-849.990")
        self.assertEqual(format_clp(-1000, show_symbol=False), "-1.000")

    def test_without_symbol(self) -> None:
        """Sin simbolo no debe aparecer ``$``."""
        self.assertEqual(format_clp(849990, False), "849.990")
        self.assertEqual(format_clp(1299990, show_symbol=False), "1.299.990")
        self.assertNotIn("$", format_clp(-1500.5, show_symbol=False))

    def test_never_shows_decimals(self) -> None:
        """Debe redondear a cero decimales."""
        self.assertEqual(format_clp(1000.0), "$1.000")
        self.assertEqual(format_clp(849990.00), "$849.990")
        self.assertEqual(format_clp(1234.4), "$1.234")
        self.assertEqual(format_clp(1234.5), "$1.235")
        self.assertEqual(format_clp(-1234.5), "$-1.235")
        self.assertEqual(format_clp(Decimal("999.5")), "$1.000")

    def test_small_negative_rounds_to_plain_zero(self) -> None:
        self.assertEqual(format_clp(-0.4), "$0")


if __name__ == "__main__":
    unittest.main()
