"""Dialogo para crear nuevos productos."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QDialog,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.frontend.dialogs import show_error

if TYPE_CHECKING:
    from cliente.backend.controller import DashboardController


class CreateProductDialog(QDialog):
    """Dialogo modal con el formulario de creacion de producto."""

    def __init__(
        self,
        controller: DashboardController,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._inputs: dict[str, QLineEdit] = {}
        self._error_labels: dict[str, QLabel] = {}
        self._save_button: QPushButton
        self._awaiting_result = False

        self.setWindowTitle("Agregar producto")
        self.setModal(True)
        self.setMinimumSize(520, 420)
        self.resize(560, 460)

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        """Construye widgets del dialogo."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)

        card = QFrame(self)
        card.setObjectName("dialogCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(24, 24, 24, 24)
        card_layout.setSpacing(8)

        title_label = QLabel("Agregar producto", card)
        title_label.setObjectName("titleLabel")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        card_layout.addWidget(title_label)
        card_layout.addSpacing(8)

        fields = (
            ("name", "Nombre", "iPhone 15"),
            ("price", "Precio (CLP)", "849990"),
            ("stock", "Stock", "10"),
        )
        for field_name, label_text, placeholder in fields:
            field_label = QLabel(label_text, card)
            field_label.setObjectName("fieldLabel")

            field_input = QLineEdit(card)
            field_input.setPlaceholderText(placeholder)

            error_label = QLabel("", card)
            error_label.setObjectName("errorLabel")
            error_label.setVisible(False)

            self._inputs[field_name] = field_input
            self._error_labels[field_name] = error_label

            card_layout.addWidget(field_label)
            card_layout.addWidget(field_input)
            card_layout.addWidget(error_label)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)

        cancel_button = QPushButton("Cancelar", card)
        cancel_button.setObjectName("cancelButton")
        self._save_button = QPushButton("Guardar", card)
        self._save_button.setDefault(True)

        cancel_button.clicked.connect(self.reject)
        self._save_button.clicked.connect(self._on_save_clicked)

        buttons_layout.addWidget(cancel_button)
        buttons_layout.addWidget(self._save_button)

        card_layout.addSpacing(8)
        card_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 35))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)
        self._inputs["name"].setFocus()

    def _apply_styles(self) -> None:
        """Aplica estilos visuales consistentes con la app."""
        self.setStyleSheet(
            """
            QDialog {
                background-color: #eef1f4;
            }
            QFrame#dialogCard {
                background-color: #ffffff;
                border-radius: 16px;
            }
            QLabel#titleLabel {
                color: #20232a;
                font-family: "Segoe UI";
                font-size: 22px;
                font-weight: 700;
            }
            QLabel#fieldLabel {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
            }
            QLabel#errorLabel {
                color: #b91c1c;
                font-family: "Segoe UI";
                font-size: 12px;
            }
            QLineEdit {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 13px;
                padding: 10px;
            }
            QLineEdit:focus {
                border: 1px solid #2563eb;
                background-color: #ffffff;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 40px;
                min-width: 100px;
                padding: 8px 12px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton:disabled {
                background-color: #93c5fd;
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

    def _on_save_clicked(self) -> None:
        """Copia los valores al formulario del controller y envia."""
        form = self._controller.form
        form.patch(
            name=self._inputs["name"].text(),
            price=_parse_number(self._inputs["price"].text(), integer=False),
            stock=_parse_number(self._inputs["stock"].text(), integer=True),
        )
        self._show_field_errors()
        if not form.is_valid:
            return

        self._awaiting_result = self._controller.submit_create()
        self.sync_with_controller()

    def sync_with_controller(self) -> None:
        """Refleja el envio en curso y muestra el error si la creacion fallo."""
        submitting = self._controller.is_submitting
        self._save_button.setEnabled(not submitting)
        if submitting or not self._awaiting_result:
            return

        self._awaiting_result = False
        if self._controller.error_message:
            show_error(self, "Error al agregar producto", self._controller.error_message)

    def _show_field_errors(self) -> None:
        """Muestra bajo cada campo los errores del formulario."""
        for field_name, error_label in self._error_labels.items():
            messages = self._controller.form.field_errors(field_name)
            error_label.setText(" ".join(messages))
            error_label.setVisible(bool(messages))


def _parse_number(text: str, integer: bool) -> int | float | str | None:
    """Convierte texto del input a numero; retorna el texto si no es numerico."""
    cleaned = text.strip()
    if not cleaned:
        return None

    try:
        return int(cleaned)
    except ValueError:
        pass

    if integer:
        return cleaned

    try:
        return float(cleaned.replace(",", "."))
    except ValueError:
        return cleaned
