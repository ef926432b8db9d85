"""Tests del gateway HTTP de productos."""

from __future__ import annotations

import threading
import unittest
from unittest import mock

import requests

from cliente.backend.gateway import SEED_PRODUCTS, HttpProductGateway
from fake_json_server import BASE_URL, FakeJsonServer
from shared.errors import HttpError, ServiceError, ValidationError
from shared.protocol import Product, ProductDraft


class HttpProductGatewayTests(unittest.TestCase):
    """Valida verbos, URLs, cuerpos y errores de cada operacion."""

    def setUp(self) -> None:
        self.server = FakeJsonServer()
        self.gateway = HttpProductGateway(base_url=BASE_URL, session=self.server)

    def test_list_products_returns_server_order(self) -> None:
        """Debe retornar productos tipados en el orden del servidor."""
        self.server.seed(
            {"id": 3, "name": "iPad Air", "price": 649990, "stock": 15},
            {"id": 1, "name": "iPhone 15", "price": 849990, "stock": 10},
        )

        products = self.gateway.list_products()

        self.assertEqual(
            products,
            [
                Product(id=3, name="iPad Air", price=649990, stock=15),
                Product(id=1, name="iPhone 15", price=849990, stock=10),
            ],
        )
        self.assertEqual(self.server.calls, [("GET", BASE_URL, None)])

    def test_list_products_empty(self) -> None:
        """Debe retornar lista vacia cuando no hay productos."""
        self.assertEqual(self.gateway.list_products(), [])

    def test_list_products_http_error(self) -> None:
        """Debe propagar el estado HTTP del servidor."""
        self.server.fail_on("GET", 500)

        with self.assertRaises(HttpError) as ctx:
            self.gateway.list_products()

        self.assertEqual(ctx.exception.status, 500)

    def test_create_product_sends_body_without_id(self) -> None:
        """Debe enviar POST sin ID y retornar el producto con ID asignado."""
        draft = ProductDraft(name="Apple Watch", price=399990, stock=20)

        product = self.gateway.create_product(draft)

        self.assertEqual(
            self.server.calls,
            [("POST", BASE_URL, {"name": "Apple Watch", "price": 399990, "stock": 20})],
        )
        self.assertEqual(product, Product(id=1, name="Apple Watch", price=399990, stock=20))

    def test_create_then_list_includes_created_record(self) -> None:
        """Un producto creado debe aparecer en el listado con su ID."""
        self.server.seed({"name": "iPhone 15", "price": 849990, "stock": 10})

        created = self.gateway.create_product(ProductDraft(name="AirPods Pro", price=249990, stock=25))

        self.assertIn(created, self.gateway.list_products())
        self.assertEqual(created.id, 2)

    def test_create_product_validation_rejected_by_server(self) -> None:
        """Debe exponer estado 400 cuando el servidor rechaza el producto."""
        self.server.fail_on("POST", 400)

        with self.assertRaises(HttpError) as ctx:
            self.gateway.create_product(ProductDraft(name="Producto", price=1000, stock=1))

        self.assertEqual(ctx.exception.status, 400)

    def test_create_product_checks_business_rules_before_sending(self) -> None:
        """No debe llamar al servidor con un producto que viola reglas de negocio."""
        with self.assertRaises(ValidationError):
            self.gateway.create_product(ProductDraft(name="X", price=0, stock=-1))

        self.assertEqual(self.server.calls, [])

    def test_get_product_by_id(self) -> None:
        """Debe leer un producto por ID usando la URL del item."""
        [product_id] = self.server.seed({"name": "Mac Studio", "price": 1999990, "stock": 3})

        product = self.gateway.get_product(product_id)

        self.assertEqual(product.name, "Mac Studio")
        self.assertEqual(self.server.calls[-1], ("GET", f"{BASE_URL}/{product_id}", None))

    def test_get_product_not_found(self) -> None:
        """Debe fallar con 404 para un ID inexistente."""
        with self.assertRaises(HttpError) as ctx:
            self.gateway.get_product(999)

        self.assertEqual(ctx.exception.status, 404)

    def test_update_product_replaces_record(self) -> None:
        """Debe enviar PUT con el registro completo y retornar el actualizado."""
        [product_id] = self.server.seed({"name": "iPhone 15", "price": 849990, "stock": 10})
        draft = ProductDraft(name="iPhone 15 Pro Max", price=1399990, stock=8)

        product = self.gateway.update_product(product_id, draft)

        self.assertEqual(product, Product(id=product_id, name="iPhone 15 Pro Max", price=1399990, stock=8))
        self.assertEqual(
            self.server.calls[-1],
            ("PUT", f"{BASE_URL}/{product_id}", {"name": "iPhone 15 Pro Max", "price": 1399990, "stock": 8}),
        )

    def test_update_product_not_found(self) -> None:
        """Debe fallar con 404 al actualizar un ID inexistente."""
        with self.assertRaises(HttpError) as ctx:
            self.gateway.update_product(42, ProductDraft(name="Producto", price=1000, stock=1))

        self.assertEqual(ctx.exception.status, 404)

    def test_update_product_invalid_payload(self) -> None:
        """Debe exponer estado 400 cuando el servidor rechaza el PUT."""
        [product_id] = self.server.seed({"name": "iPhone 15", "price": 849990, "stock": 10})
        self.server.fail_on("PUT", 400, product_id)

        with self.assertRaises(HttpError) as ctx:
            self.gateway.update_product(product_id, ProductDraft(name="iPhone", price=1000, stock=1))

        self.assertEqual(ctx.exception.status, 400)

    def test_delete_then_get_fails_with_not_found(self) -> None:
        """Tras eliminar, la lectura por ID debe fallar con 404."""
        created = self.gateway.create_product(ProductDraft(name="iPad Air", price=649990, stock=15))

        self.assertIsNone(self.gateway.delete_product(created.id))
        self.assertEqual(self.server.calls[-1], ("DELETE", f"{BASE_URL}/{created.id}", None))

        with self.assertRaises(HttpError) as ctx:
            self.gateway.get_product(created.id)
        self.assertEqual(ctx.exception.status, 404)

    def test_delete_product_not_found(self) -> None:
        """Debe fallar con 404 al eliminar un ID inexistente."""
        with self.assertRaises(HttpError) as ctx:
            self.gateway.delete_product(7)

        self.assertEqual(ctx.exception.status, 404)

    def test_connection_error_maps_to_status_zero(self) -> None:
        """Sin respuesta del servidor el estado debe ser 0."""
        session = mock.Mock()
        session.request.side_effect = requests.ConnectionError("connection refused")
        gateway = HttpProductGateway(base_url=BASE_URL, session=session)

        with self.assertRaises(HttpError) as ctx:
            gateway.list_products()

        self.assertEqual(ctx.exception.status, 0)

    def test_malformed_record_raises_service_error(self) -> None:
        """Un registro sin campos requeridos no debe convertirse en Product."""
        self.server.records[1] = {"id": 1, "name": "Sin precio"}

        with self.assertRaises(ServiceError):
            self.gateway.list_products()

    def test_close_does_not_close_injected_session(self) -> None:
        """Solo debe cerrar sesiones propias."""
        self.gateway.close()
        self.assertFalse(self.server.closed)

    def test_base_url_trailing_slash_is_ignored(self) -> None:
        """Debe construir URLs de item sin doble slash."""
        gateway = HttpProductGateway(base_url=BASE_URL + "/", session=self.server)
        gateway.list_products()
        self.assertEqual(self.server.calls[-1][1], BASE_URL)


class ResetProductsTests(unittest.TestCase):
    """Valida el reset compuesto de la coleccion."""

    def setUp(self) -> None:
        self.server = FakeJsonServer()
        self.gateway = HttpProductGateway(base_url=BASE_URL, session=self.server)

    def test_reset_replaces_existing_products_with_seed(self) -> None:
        """Tras reset, el listado debe contener exactamente los seis productos iniciales."""
        old_ids = self.server.seed(
            {"name": "Viejo 1", "price": 1000, "stock": 1},
            {"name": "Viejo 2", "price": 2000, "stock": 2},
        )

        created = self.gateway.reset_products()

        listed = self.gateway.list_products()
        self.assertEqual(len(listed), 6)
        self.assertEqual(sorted(listed, key=lambda product: product.id), sorted(created, key=lambda product: product.id))
        self.assertEqual([product.to_draft() for product in created], list(SEED_PRODUCTS))
        self.assertTrue(all(product.id not in old_ids for product in listed))

    def test_reset_deletes_before_creating(self) -> None:
        """Todos los DELETE deben ocurrir antes del primer POST."""
        self.server.seed(
            {"name": "Viejo 1", "price": 1000, "stock": 1},
            {"name": "Viejo 2", "price": 2000, "stock": 2},
            {"name": "Viejo 3", "price": 3000, "stock": 3},
        )

        self.gateway.reset_products()

        methods = [method for method, _, _ in self.server.calls]
        self.assertEqual(methods[0], "GET")
        self.assertEqual(methods[1:4], ["DELETE"] * 3)
        self.assertEqual(methods[4:], ["POST"] * 6)

    def test_reset_issues_deletes_and_creates_concurrently(self) -> None:
        """Todos los DELETE y luego todos los POST deben estar en curso a la vez."""
        existing = [
            {"name": f"Viejo {index}", "price": 1000, "stock": 1} for index in range(8)
        ]
        self.server.seed(*existing)
        self.server.barriers["DELETE"] = threading.Barrier(len(existing))
        self.server.barriers["POST"] = threading.Barrier(len(SEED_PRODUCTS))

        created = self.gateway.reset_products()

        self.assertEqual(self.server.peak_in_flight["DELETE"], len(existing))
        self.assertEqual(self.server.peak_in_flight["POST"], len(SEED_PRODUCTS))
        self.assertEqual([product.to_draft() for product in created], list(SEED_PRODUCTS))
        self.assertEqual(len(self.gateway.list_products()), len(SEED_PRODUCTS))

    def test_reset_on_empty_backend_skips_deletes(self) -> None:
        """Sin productos existentes debe crear el seed directamente."""
        created = self.gateway.reset_products()

        methods = [method for method, _, _ in self.server.calls]
        self.assertNotIn("DELETE", methods)
        self.assertEqual(methods.count("POST"), 6)
        self.assertEqual([product.name for product in created], [draft.name for draft in SEED_PRODUCTS])

    def test_reset_fails_when_a_delete_fails(self) -> None:
        """Un DELETE fallido debe hacer fallar el reset sin crear el seed."""
        [first_id, _] = self.server.seed(
            {"name": "Viejo 1", "price": 1000, "stock": 1},
            {"name": "Viejo 2", "price": 2000, "stock": 2},
        )
        self.server.fail_on("DELETE", 500, first_id)

        with self.assertRaises(HttpError) as ctx:
            self.gateway.reset_products()

        self.assertEqual(ctx.exception.status, 500)
        methods = [method for method, _, _ in self.server.calls]
        self.assertNotIn("POST", methods)

    def test_reset_fails_when_a_create_fails(self) -> None:
        """Un POST fallido debe hacer fallar el reset completo."""
        self.server.fail_on("POST", 500)

        with self.assertRaises(HttpError):
            self.gateway.reset_products()


if __name__ == "__main__":
    unittest.main()
