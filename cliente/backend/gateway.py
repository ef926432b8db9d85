"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Protocol

import requests

from parametros import API_BASE_URL
from shared.errors import HttpError, ServiceError
from shared.protocol import (
    Product,
    ProductDraft,
    product_from_payload,
    product_to_payload,
)

from .validators import validate_product_draft

LOGGER = logging.getLogger(__name__)

SEED_PRODUCTS: tuple[ProductDraft, ...] = (
    ProductDraft(name="iPhone 15", price=849990, stock=10),
    ProductDraft(name="MacBook Pro", price=2499990, stock=5),
    ProductDraft(name="iPad Air", price=649990, stock=15),
    ProductDraft(name="Apple Watch Series 9", price=399990, stock=20),
    ProductDraft(name="AirPods Pro", price=249990, stock=25),
    ProductDraft(name="Mac Studio", price=1999990, stock=3),
)


class ProductGateway(Protocol):
    """Interfaz de acceso del cliente a la coleccion de productos."""

    def list_products(self) -> list[Product]:
        """Retorna todos los productos en el orden entregado por el servidor."""

    def create_product(self, draft: ProductDraft) -> Product:
        """Crea un producto y lo retorna con su ID asignado."""

    def get_product(self, product_id: int) -> Product:
        """Retorna un producto por ID."""

    def update_product(self, product_id: int, draft: ProductDraft) -> Product:
        """Reemplaza nombre, precio y stock de un producto."""

    def delete_product(self, product_id: int) -> None:
        """Elimina un producto por ID."""

    def reset_products(self) -> list[Product]:
        """Elimina todos los productos y recrea los datos iniciales."""


class HttpProductGateway:
    """Implementacion REST/JSON del gateway usando ``requests``.

    No se configura timeout: aplica el comportamiento por defecto del
    transporte.

    La misma ``session`` se usa desde los hilos del reset y desde el hilo
    del ``TaskRunner``. Se asume que solo se emiten solicitudes sin cambiar
    headers, cookies ni adapters de la sesion mientras hay llamadas en curso;
    el pool de conexiones de urllib3 admite uso concurrente.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_session = session is None
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def list_products(self) -> list[Product]:
        """Obtiene la coleccion completa de productos."""
        payload = self._request("GET", self._base_url)
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ServiceError("El servidor no retorno una lista de productos.")

        return [product_from_payload(item) for item in payload]

    def create_product(self, draft: ProductDraft) -> Product:
        """Envia un POST con el producto sin ID."""
        validate_product_draft(draft)
        payload = self._request("POST", self._base_url, product_to_payload(draft))
        product = product_from_payload(payload)
        LOGGER.info("Producto creado: id=%s, name=%s", product.id, product.name)
        return product

    def get_product(self, product_id: int) -> Product:
        """Obtiene un producto por ID."""
        return product_from_payload(self._request("GET", self._item_url(product_id)))

    def update_product(self, product_id: int, draft: ProductDraft) -> Product:
        """Envia un PUT que reemplaza el registro completo."""
        validate_product_draft(draft)
        payload = self._request("PUT", self._item_url(product_id), product_to_payload(draft))
        product = product_from_payload(payload)
        LOGGER.info("Producto actualizado: id=%s", product.id)
        return product

    def delete_product(self, product_id: int) -> None:
        """Envia un DELETE por ID; la respuesta no trae contenido util."""
        self._request("DELETE", self._item_url(product_id), expect_body=False)
        LOGGER.info("Producto eliminado: id=%s", product_id)

    def reset_products(self) -> list[Product]:
        """Restaura los datos iniciales borrando todo y recreando el seed.

        Los DELETE se emiten en paralelo y se esperan todos antes de emitir
        los POST, tambien en paralelo. El pool tiene un hilo por llamada de la
        fase mas grande. Si alguna llamada falla, el reset completo falla y el
        servidor puede quedar con datos mezclados.
        """
        existing_products = self.list_products()

        max_workers = max(len(existing_products), len(SEED_PRODUCTS))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            if existing_products:
                delete_futures = [
                    executor.submit(self.delete_product, product.id)
                    for product in existing_products
                ]
                for future in delete_futures:
                    future.result()
                LOGGER.info("Reset: %s productos eliminados.", len(delete_futures))
            else:
                LOGGER.info("Reset: no hay productos que eliminar.")

            create_futures = [
                executor.submit(self.create_product, draft) for draft in SEED_PRODUCTS
            ]
            created_products = [future.result() for future in create_futures]

        LOGGER.info("Reset: %s productos iniciales creados.", len(created_products))
        return created_products

    def close(self) -> None:
        """Cierra la sesion HTTP si fue creada por el gateway."""
        if self._owns_session:
            self._session.close()

    def _item_url(self, product_id: int) -> str:
        return f"{self._base_url}/{product_id}"

    def _request(
        self,
        method: str,
        url: str,
        body: dict[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Any:
        """Ejecuta la solicitud y traduce fallos a ``HttpError``."""
        try:
            response = self._session.request(method, url, json=body)
        except requests.RequestException as exc:
            LOGGER.error("Sin respuesta del servidor en %s %s: %s", method, url, exc)
            raise HttpError(0, f"No fue posible conectar con {url}.") from exc

        if not response.ok:
            LOGGER.error("%s %s respondio con estado %s.", method, url, response.status_code)
            raise HttpError(response.status_code)

        if not expect_body or not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            raise ServiceError(f"Respuesta JSON invalida desde {url}.") from exc
