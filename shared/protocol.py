"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shared.errors import ServiceError


@dataclass(slots=True, frozen=True)
class ProductDraft:
    """Producto aun no persistido: el servidor asigna el ID al crearlo."""

    name: str
    price: float
    stock: int


@dataclass(slots=True, frozen=True)
class Product:
    """Producto persistido con ID asignado por el servidor."""

    id: int
    name: str
    price: float
    stock: int

    def to_draft(self) -> ProductDraft:
        """Retorna los datos editables del producto, sin ID."""
        return ProductDraft(name=self.name, price=self.price, stock=self.stock)


def product_to_payload(draft: ProductDraft | Product) -> dict[str, Any]:
    """Construye el cuerpo JSON enviado al servidor (nunca incluye ID)."""
    return {"name": draft.name, "price": draft.price, "stock": draft.stock}


def product_from_payload(payload: Any) -> Product:
    """Construye un ``Product`` desde un registro JSON del servidor."""
    if not isinstance(payload, dict):
        raise ServiceError(f"Respuesta inesperada del servidor: {payload!r}")

    try:
        raw_id = payload["id"]
        name = payload["name"]
        price = payload["price"]
        stock = payload["stock"]
    except KeyError as exc:
        raise ServiceError(f"Producto sin campo requerido: {exc.args[0]}") from exc

    if isinstance(raw_id, bool) or not isinstance(raw_id, (int, str)):
        raise ServiceError(f"ID de producto invalido: {raw_id!r}")
    try:
        product_id = int(raw_id)
    except ValueError as exc:
        raise ServiceError(f"ID de producto invalido: {raw_id!r}") from exc

    if not isinstance(name, str):
        raise ServiceError(f"Nombre de producto invalido: {name!r}")
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ServiceError(f"Precio de producto invalido: {price!r}")
    if isinstance(stock, bool) or not isinstance(stock, int):
        raise ServiceError(f"Stock de producto invalido: {stock!r}")

    return Product(id=product_id, name=name, price=price, stock=stock)
