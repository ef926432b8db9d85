"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class HttpError(ServiceError):
    """Fallo de una llamada HTTP al servidor de productos.

    ``status`` es el codigo HTTP de la respuesta, o ``0`` cuando no hubo
    respuesta (servidor caido, DNS, conexion rechazada).
    """

    def __init__(self, status: int, message: str = "") -> None:
        self.status = status
        super().__init__(message or f"La solicitud fallo con estado HTTP {status}.")
