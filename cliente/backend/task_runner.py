"""Ejecucion de llamadas al servidor con entrega del resultado por callback."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from shared.errors import ServiceError, ValidationError

Task = Callable[[], Any]
SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[Exception], None]


class TaskRunner(Protocol):
    """Ejecuta ``task`` y entrega su resultado a ``on_success`` u ``on_error``.

    Los callbacks se invocan siempre en el hilo dueño del estado del
    controller, nunca en paralelo entre si.
    """

    def submit(
        self,
        task: Task,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        """Programa la tarea."""


class InlineTaskRunner:
    """Ejecuta la tarea en el mismo hilo y llama al callback antes de retornar.

    Solo se capturan errores de servicio y de validacion; cualquier otro
    error se propaga al llamador.
    """

    def submit(
        self,
        task: Task,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        try:
            result = task()
        except (ServiceError, ValidationError) as exc:
            on_error(exc)
            return

        on_success(result)
