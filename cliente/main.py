"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from PyQt6.QtWidgets import QApplication

from cliente.backend.controller import DashboardController
from cliente.backend.gateway import HttpProductGateway
from cliente.frontend.main_window import MainWindow
from cliente.frontend.qt_task_runner import QtTaskRunner
from parametros import API_BASE_URL, APP_TITLE

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI de la aplicacion."""
    parser = argparse.ArgumentParser(description=APP_TITLE)
    parser.add_argument(
        "--api-url",
        default=API_BASE_URL,
        help=(
            "URL base de la coleccion de productos "
            f"(por defecto {API_BASE_URL} o la variable PRODUCTS_API_URL)."
        ),
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Ejecuta la aplicacion grafica."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_TITLE)

    gateway = HttpProductGateway(base_url=args.api_url)
    runner = QtTaskRunner(parent=app)
    controller = DashboardController(gateway=gateway, runner=runner)
    window = MainWindow(controller=controller)
    controller.attach_view(window)
    window.show()

    LOGGER.info("Aplicacion iniciada contra %s", gateway.base_url)
    controller.initialize()
    try:
        return app.exec()
    finally:
        runner.wait_for_done()
        gateway.close()


if __name__ == "__main__":
    raise SystemExit(main())
