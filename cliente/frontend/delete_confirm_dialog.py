"""Dialogo de confirmacion para eliminar un producto."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)


class DeleteConfirmDialog(QDialog):
    """Dialogo modal pequeño con acciones Eliminar/Cancelar."""

    def __init__(self, product_label: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._product_label = product_label.strip()

        self.setWindowTitle("Eliminar producto")
        self.setModal(True)
        self.setMinimumWidth(360)

        self.confirm_button: QPushButton
        self.cancel_button: QPushButton

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        """Construye layout y widgets del dialogo."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)
        root_layout.setSpacing(12)

        title_label = QLabel("¿Eliminar producto?", self)
        title_label.setObjectName("deleteTitle")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        message_label = QLabel(
            f"Se eliminará «{self._product_label}». Esta acción no se puede deshacer.",
            self,
        )
        message_label.setWordWrap(True)

        buttons_layout = QHBoxLayout()
        buttons_layout.setSpacing(10)
        buttons_layout.addStretch(1)

        self.cancel_button = QPushButton("Cancelar", self)
        self.cancel_button.setObjectName("cancelButton")
        self.confirm_button = QPushButton("Eliminar", self)
        self.confirm_button.setObjectName("dangerButton")

        buttons_layout.addWidget(self.cancel_button)
        buttons_layout.addWidget(self.confirm_button)

        root_layout.addWidget(title_label)
        root_layout.addWidget(message_label)
        root_layout.addLayout(buttons_layout)

    def _apply_styles(self) -> None:
        """Aplica estilos alineados al look general de la app."""
        self.setStyleSheet(
            """
            QDialog {
                background-color: #ffffff;
            }
            QLabel {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 13px;
            }
            QLabel#deleteTitle {
                color: #20232a;
                font-size: 16px;
                font-weight: 700;
            }
            QPushButton {
                border: none;
                border-radius: 10px;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 36px;
                min-width: 90px;
                padding: 6px 12px;
            }
            QPushButton#dangerButton {
                background-color: #C80202;
                color: #ffffff;
            }
            QPushButton#dangerButton:hover {
                background-color: #A30202;
            }
            QPushButton#cancelButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#cancelButton:hover {
                background-color: #d1d5db;
            }
            """
        )
