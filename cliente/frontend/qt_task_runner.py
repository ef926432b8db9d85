"""Ejecucion de llamadas al servidor en un QThreadPool."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtBoundSignal, pyqtSignal, pyqtSlot

from cliente.backend.task_runner import ErrorCallback, SuccessCallback, Task
from shared.errors import ServiceError, ValidationError

LOGGER = logging.getLogger(__name__)


class _BackgroundTask(QRunnable):
    """Ejecuta una tarea en un hilo del pool y emite su resultado."""

    def __init__(self, task_id: int, task: Task, completed: pyqtBoundSignal) -> None:
        super().__init__()
        self._task_id = task_id
        self._task = task
        self._completed = completed

    def run(self) -> None:
        try:
            result = self._task()
        except (ServiceError, ValidationError) as exc:
            self._completed.emit(self._task_id, False, exc)
            return
        except Exception as exc:
            LOGGER.exception("Fallo inesperado en tarea de fondo.")
            error = ServiceError("Fallo inesperado al comunicarse con el servidor.")
            error.__cause__ = exc
            self._completed.emit(self._task_id, False, error)
            return

        self._completed.emit(self._task_id, True, result)


class QtTaskRunner(QObject):
    """Implementacion de ``TaskRunner`` para la UI.

    La tarea corre fuera del hilo de la UI; los callbacks se invocan en el
    hilo dueño de este objeto mediante una conexion encolada, de modo que el
    event loop puede pintar el estado de carga mientras la llamada sigue en
    curso.
    """

    _completed = pyqtSignal(int, bool, object)

    def __init__(
        self,
        pool: QThreadPool | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._pool = pool or QThreadPool.globalInstance()
        self._callbacks: dict[int, tuple[SuccessCallback, ErrorCallback]] = {}
        self._next_task_id = 0
        self._completed.connect(self._dispatch)

    @property
    def pending_count(self) -> int:
        return len(self._callbacks)

    def submit(
        self,
        task: Task,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        """Programa la tarea en el pool."""
        task_id = self._next_task_id
        self._next_task_id += 1
        self._callbacks[task_id] = (on_success, on_error)
        self._pool.start(_BackgroundTask(task_id, task, self._completed))

    def wait_for_done(self, msecs: int = -1) -> bool:
        """Espera a que terminen las tareas del pool."""
        return self._pool.waitForDone(msecs)

    @pyqtSlot(int, bool, object)
    def _dispatch(self, task_id: int, succeeded: bool, payload: Any) -> None:
        on_success, on_error = self._callbacks.pop(task_id)
        if succeeded:
            on_success(payload)
        else:
            on_error(payload)
