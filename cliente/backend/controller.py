"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from functools import partial
from typing import Protocol

from shared.protocol import Product, ProductDraft

from .gateway import ProductGateway
from .product_form import ProductForm
from .task_runner import InlineTaskRunner, TaskRunner

LOGGER = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = (
    "Error al cargar los productos. Asegúrate de que json-server esté ejecutándose."
)
CREATE_ERROR_MESSAGE = "Error al agregar el producto"
DELETE_ERROR_MESSAGE = (
    "Error al eliminar el producto. Verifica que json-server esté ejecutándose."
)
RESET_ERROR_MESSAGE = (
    "Error al resetear la base de datos. Verifica que json-server esté ejecutándose."
)
INVALID_ID_MESSAGE = "Error: ID de producto inválido"
RESET_CONFIRM_MESSAGE = (
    "¿Estás seguro de que quieres resetear la base de datos? Esto eliminará "
    "todos los cambios y restaurará los datos originales."
)


class DashboardView(Protocol):
    """Operaciones de UI que el controlador puede solicitar."""

    def open_create_dialog(self) -> None:
        """Presenta el dialogo de creacion."""

    def close_create_dialog(self) -> None:
        """Oculta el dialogo de creacion si esta abierto."""

    def open_delete_dialog(self, product_id: int) -> None:
        """Presenta la confirmacion de eliminacion."""

    def close_delete_dialog(self) -> None:
        """Oculta la confirmacion de eliminacion si esta abierta."""

    def confirm(self, message: str) -> bool:
        """Pregunta si/no al usuario."""

    def refresh(self) -> None:
        """Redibuja la vista con el estado actual del controlador."""


class DashboardController:
    """Coordina el listado de productos, el formulario y los dialogos.

    Sin ``view`` no hay contexto interactivo: las operaciones de dialogo no
    muestran nada y el reset no procede porque no se puede confirmar.
    """

    def __init__(
        self,
        gateway: ProductGateway,
        view: DashboardView | None = None,
        runner: TaskRunner | None = None,
    ) -> None:
        self._gateway = gateway
        self._view = view
        self._runner = runner or InlineTaskRunner()
        self.products: list[Product] = []
        self.is_loading = False
        self.error_message = ""
        self.pending_delete_id: int | None = None
        self.is_submitting = False
        self.form = ProductForm()

    def attach_view(self, view: DashboardView | None) -> None:
        """Asocia la vista que presenta dialogos y estado."""
        self._view = view

    def initialize(self) -> None:
        """Carga inicial, se invoca una vez al iniciar la UI."""
        self.load_products()

    def load_products(self) -> None:
        """Reemplaza la lista local con la coleccion del servidor."""
        self.is_loading = True
        self.error_message = ""
        self._refresh_view()
        self._runner.submit(
            self._gateway.list_products,
            self._on_products_loaded,
            self._on_load_failed,
        )

    def open_create_form(self) -> None:
        """Limpia el formulario y presenta el dialogo de creacion."""
        if self._view is None:
            return

        LOGGER.info("Accion ejecutada: abrir dialogo crear producto")
        self.form.reset()
        self._view.open_create_dialog()

    def close_create_form(self) -> None:
        """Limpia el formulario y oculta el dialogo de creacion."""
        if self._view is not None:
            self._view.close_create_dialog()
        self.form.reset()

    def submit_create(self) -> bool:
        """Envia el producto del formulario si es valido.

        Retorna True si se emitio la solicitud. Un formulario invalido no
        genera llamadas ni cambios de estado; la UI es responsable de mostrar
        los errores por campo.
        """
        if self.is_submitting or not self.form.is_valid:
            return False

        draft: ProductDraft = self.form.value()
        self.is_submitting = True
        self._refresh_view()
        self._runner.submit(
            partial(self._gateway.create_product, draft),
            self._on_product_created,
            self._on_create_failed,
        )
        return True

    def request_delete(self, product_id: int | None) -> None:
        """Registra el producto a eliminar y pide confirmacion."""
        LOGGER.info("Accion ejecutada: solicitar eliminacion de id=%s", product_id)
        if not product_id:
            LOGGER.error("ID de producto invalido: %r", product_id)
            self.error_message = INVALID_ID_MESSAGE
            self._refresh_view()
            return

        self.pending_delete_id = product_id
        if self._view is not None:
            self._view.open_delete_dialog(product_id)

    def confirm_delete(self) -> None:
        """Elimina el producto pendiente; se descarta aun si falla."""
        product_id = self.pending_delete_id
        if product_id is None:
            return

        self.is_loading = True
        self.error_message = ""
        if self._view is not None:
            self._view.close_delete_dialog()
        self._refresh_view()
        self._runner.submit(
            partial(self._gateway.delete_product, product_id),
            lambda _result: self._on_product_deleted(product_id),
            lambda exc: self._on_delete_failed(product_id, exc),
        )

    def cancel_delete(self) -> None:
        """Descarta la eliminacion pendiente sin llamar al servidor."""
        if self._view is not None:
            self._view.close_delete_dialog()
        self.pending_delete_id = None

    def reset_database(self) -> None:
        """Restaura los datos iniciales tras confirmacion explicita."""
        if self._view is None or not self._view.confirm(RESET_CONFIRM_MESSAGE):
            LOGGER.info("Reset de base de datos cancelado.")
            return

        self.is_loading = True
        self.error_message = ""
        self._refresh_view()
        self._runner.submit(
            self._gateway.reset_products,
            self._on_database_reset,
            self._on_reset_failed,
        )

    def find_product(self, product_id: int) -> Product | None:
        """Busca un producto en la lista local."""
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    @staticmethod
    def identity_key(index: int, product: Product | ProductDraft) -> int:
        """Retorna el ID del producto o el indice si no tiene ID."""
        return getattr(product, "id", None) or index

    def _on_products_loaded(self, products: list[Product]) -> None:
        self.products = products
        self.is_loading = False
        LOGGER.info("Productos cargados: %s", len(products))
        self._refresh_view()

    def _on_load_failed(self, exc: Exception) -> None:
        LOGGER.error("Error cargando productos: %s", exc)
        self.error_message = LOAD_ERROR_MESSAGE
        self.is_loading = False
        self._refresh_view()

    def _on_product_created(self, product: Product) -> None:
        self.is_submitting = False
        self.products.append(product)
        self.close_create_form()
        self._refresh_view()

    def _on_create_failed(self, exc: Exception) -> None:
        LOGGER.error("Error agregando producto: %s", exc)
        self.is_submitting = False
        self.error_message = CREATE_ERROR_MESSAGE
        self._refresh_view()

    def _on_product_deleted(self, product_id: int) -> None:
        self.products = [product for product in self.products if product.id != product_id]
        self.is_loading = False
        self.pending_delete_id = None
        self._refresh_view()

    def _on_delete_failed(self, product_id: int, exc: Exception) -> None:
        LOGGER.error("Error eliminando producto id=%s: %s", product_id, exc)
        self.error_message = DELETE_ERROR_MESSAGE
        self.is_loading = False
        self.pending_delete_id = None
        self._refresh_view()

    def _on_database_reset(self, products: list[Product]) -> None:
        self.products = products
        self.error_message = ""
        self.is_loading = False
        LOGGER.info("Base de datos reseteada.")
        self._refresh_view()

    def _on_reset_failed(self, exc: Exception) -> None:
        LOGGER.error("Error reseteando base de datos: %s", exc)
        self.error_message = RESET_ERROR_MESSAGE
        self.is_loading = False
        self._refresh_view()

    def _refresh_view(self) -> None:
        if self._view is not None:
            self._view.refresh()
