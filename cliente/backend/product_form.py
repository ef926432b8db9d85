"""Formulario de creacion de productos con validacion por campo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shared.errors import ValidationError
from shared.protocol import ProductDraft

from .validators import NAME_MIN_LENGTH, is_integer, is_number

FORM_PRICE_MIN = 100
FORM_STOCK_MIN = 1

FIELD_NAMES = ("name", "price", "stock")


@dataclass(slots=True)
class ProductForm:
    """Valores crudos del formulario; ``None`` representa un campo vacio.

    Las reglas del formulario son mas estrictas que las de negocio: precio
    minimo 100 y stock minimo 1.
    """

    name: str | None = None
    price: Any = None
    stock: Any = None

    def reset(self) -> None:
        """Deja todos los campos vacios."""
        self.name = None
        self.price = None
        self.stock = None

    def patch(self, **values: Any) -> None:
        """Actualiza solo los campos indicados."""
        for field_name, value in values.items():
            if field_name not in FIELD_NAMES:
                raise KeyError(f"Campo de formulario desconocido: {field_name}")
            setattr(self, field_name, value)

    def field_errors(self, field_name: str) -> list[str]:
        """Retorna los mensajes de error de un campo."""
        if field_name == "name":
            return self._name_errors()
        if field_name == "price":
            return self._number_errors(self.price, FORM_PRICE_MIN, integer=False)
        if field_name == "stock":
            return self._number_errors(self.stock, FORM_STOCK_MIN, integer=True)
        raise KeyError(f"Campo de formulario desconocido: {field_name}")

    def errors(self) -> dict[str, list[str]]:
        """Retorna errores por campo, omitiendo campos validos."""
        all_errors: dict[str, list[str]] = {}
        for field_name in FIELD_NAMES:
            messages = self.field_errors(field_name)
            if messages:
                all_errors[field_name] = messages
        return all_errors

    @property
    def is_valid(self) -> bool:
        return not self.errors()

    def value(self) -> ProductDraft:
        """Retorna el producto capturado o lanza ``ValidationError``."""
        form_errors = self.errors()
        if form_errors:
            details = "; ".join(
                f"{field_name}: {', '.join(messages)}"
                for field_name, messages in form_errors.items()
            )
            raise ValidationError(f"Formulario invalido ({details})")

        return ProductDraft(name=self.name, price=self.price, stock=self.stock)

    def _name_errors(self) -> list[str]:
        name = self.name if isinstance(self.name, str) else ""
        if not name.strip():
            return ["El nombre es obligatorio."]
        if len(name.strip()) < NAME_MIN_LENGTH:
            return [f"El nombre debe tener al menos {NAME_MIN_LENGTH} caracteres."]
        return []

    @staticmethod
    def _number_errors(value: Any, minimum: int, integer: bool) -> list[str]:
        if value is None or value == "":
            return ["El campo es obligatorio."]
        valid_type = is_integer(value) if integer else is_number(value)
        if not valid_type:
            kind = "un numero entero" if integer else "un numero"
            return [f"El valor debe ser {kind}."]
        if value < minimum:
            return [f"El valor minimo es {minimum}."]
        return []
