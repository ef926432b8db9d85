"""Ventana principal del panel de productos."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QGuiApplication
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMainWindow,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import DashboardController
from cliente.backend.currency_formatter import format_clp
from cliente.frontend.create_product_dialog import CreateProductDialog
from cliente.frontend.delete_confirm_dialog import DeleteConfirmDialog
from cliente.frontend.dialogs import ask_confirmation
from parametros import APP_TITLE

_COLUMN_HEADERS = ("ID", "Nombre", "Precio", "Stock")


class MainWindow(QMainWindow):
    """Ventana con el listado de productos y sus acciones.

    Implementa ``DashboardView``: el controller le pide abrir y cerrar
    dialogos y redibujar su estado.
    """

    def __init__(self, controller: DashboardController) -> None:
        super().__init__()
        self._controller = controller
        self._create_dialog: CreateProductDialog | None = None
        self._delete_dialog: DeleteConfirmDialog | None = None
        self._busy_cursor = False

        self._table: QTableWidget
        self._error_label: QLabel
        self._loading_label: QLabel
        self._add_button: QPushButton
        self._reload_button: QPushButton
        self._delete_button: QPushButton
        self._reset_button: QPushButton

        self.setWindowTitle(APP_TITLE)
        screen = QGuiApplication.primaryScreen()
        geo = screen.availableGeometry()
        w = int(geo.width() * 0.65)
        h = int(geo.height() * 0.75)
        self.resize(w, h)
        self.setMinimumSize(int(w * 0.70), int(h * 0.70))
        self._build_ui()
        self._apply_styles()
        self._connect_signals()

    def _build_ui(self) -> None:
        """Construye encabezado, mensajes y tabla de productos."""
        page = QWidget(self)
        self.setCentralWidget(page)

        root_layout = QVBoxLayout(page)
        root_layout.setContentsMargins(32, 32, 32, 32)

        card = QFrame(page)
        card.setObjectName("mainCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(28, 28, 28, 28)
        card_layout.setSpacing(14)

        title_label = QLabel(APP_TITLE, card)
        title_label.setObjectName("titleLabel")
        title_label.setFont(QFont("Segoe UI", 20, QFont.Weight.Bold))

        actions_layout = QHBoxLayout()
        actions_layout.setSpacing(10)
        self._add_button = self._build_button("Agregar producto")
        self._reload_button = self._build_button("Recargar")
        self._reload_button.setObjectName("secondaryButton")
        self._delete_button = self._build_button("Eliminar")
        self._delete_button.setObjectName("dangerButton")
        self._delete_button.setEnabled(False)
        self._reset_button = self._build_button("Resetear base de datos")
        self._reset_button.setObjectName("secondaryButton")
        actions_layout.addWidget(self._add_button)
        actions_layout.addWidget(self._reload_button)
        actions_layout.addWidget(self._delete_button)
        actions_layout.addStretch(1)
        actions_layout.addWidget(self._reset_button)

        self._error_label = QLabel("", card)
        self._error_label.setObjectName("errorBanner")
        self._error_label.setWordWrap(True)
        self._error_label.setVisible(False)

        self._loading_label = QLabel("Cargando...", card)
        self._loading_label.setObjectName("loadingLabel")
        self._loading_label.setVisible(False)

        self._table = QTableWidget(0, len(_COLUMN_HEADERS), card)
        self._table.setHorizontalHeaderLabels(_COLUMN_HEADERS)
        self._table.verticalHeader().setVisible(False)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        header = self._table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)

        self._empty_label = QLabel("No hay productos registrados.", card)
        self._empty_label.setObjectName("emptyLabel")
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty_label.setVisible(False)

        card_layout.addWidget(title_label)
        card_layout.addLayout(actions_layout)
        card_layout.addWidget(self._error_label)
        card_layout.addWidget(self._loading_label)
        card_layout.addWidget(self._table)
        card_layout.addWidget(self._empty_label)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(38)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 38))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)

    def _apply_styles(self) -> None:
        """Aplica estilos QSS de la interfaz."""
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #eef1f4;
            }
            QFrame#mainCard {
                background-color: #ffffff;
                border-radius: 18px;
            }
            QLabel#titleLabel {
                color: #111827;
            }
            QLabel#errorBanner {
                background-color: #fef2f2;
                border: 1px solid #fecaca;
                border-radius: 8px;
                color: #b91c1c;
                font-family: "Segoe UI";
                font-size: 13px;
                padding: 10px;
            }
            QLabel#loadingLabel, QLabel#emptyLabel {
                color: #475569;
                font-family: "Segoe UI";
                font-size: 13px;
            }
            QTableWidget {
                border: 1px solid #d1d5db;
                border-radius: 8px;
                font-family: "Segoe UI";
                font-size: 13px;
            }
            QPushButton {
                background-color: #C80202;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 14px;
                font-weight: 600;
                min-height: 40px;
                padding: 8px 14px;
            }
            QPushButton:hover {
                background-color: #A30202;
            }
            QPushButton:pressed {
                background-color: #820101;
            }
            QPushButton:disabled {
                background-color: #d5a3a3;
                color: #f5e8e8;
            }
            QPushButton#secondaryButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#secondaryButton:hover {
                background-color: #d1d5db;
            }
            QPushButton#dangerButton {
                background-color: #ffffff;
                border: 1px solid #C80202;
                color: #C80202;
            }
            QPushButton#dangerButton:disabled {
                border: 1px solid #e5e7eb;
                color: #9ca3af;
            }
            """
        )

    def _connect_signals(self) -> None:
        """Conecta botones de UI con acciones del controller."""
        self._add_button.clicked.connect(self._on_add_clicked)
        self._reload_button.clicked.connect(self._on_reload_clicked)
        self._delete_button.clicked.connect(self._on_delete_clicked)
        self._reset_button.clicked.connect(self._on_reset_clicked)
        self._table.itemSelectionChanged.connect(self._update_delete_button)

    def open_create_dialog(self) -> None:
        """Presenta el formulario de creacion como dialogo modal."""
        dialog = CreateProductDialog(controller=self._controller, parent=self)
        dialog.rejected.connect(self._controller.close_create_form)
        self._create_dialog = dialog
        dialog.exec()
        self._create_dialog = None

    def close_create_dialog(self) -> None:
        """Cierra el dialogo de creacion si sigue visible."""
        dialog = self._create_dialog
        self._create_dialog = None
        if dialog is not None and dialog.isVisible():
            dialog.accept()

    def open_delete_dialog(self, product_id: int) -> None:
        """Presenta la confirmacion de eliminacion del producto indicado."""
        product = self._controller.find_product(product_id)
        label = product.name if product is not None else f"ID {product_id}"
        dialog = DeleteConfirmDialog(product_label=label, parent=self)
        dialog.confirm_button.clicked.connect(self._controller.confirm_delete)
        dialog.cancel_button.clicked.connect(self._controller.cancel_delete)
        dialog.rejected.connect(self._controller.cancel_delete)
        self._delete_dialog = dialog
        dialog.exec()
        self._delete_dialog = None

    def close_delete_dialog(self) -> None:
        """Cierra la confirmacion de eliminacion si sigue visible."""
        dialog = self._delete_dialog
        self._delete_dialog = None
        if dialog is not None and dialog.isVisible():
            dialog.accept()

    def confirm(self, message: str) -> bool:
        """Pregunta si/no al usuario con un dialogo estandar."""
        return ask_confirmation(self, "Confirmar", message)

    def refresh(self) -> None:
        """Redibuja mensajes, estado de carga y tabla."""
        controller = self._controller

        self._error_label.setText(controller.error_message)
        self._error_label.setVisible(bool(controller.error_message))
        self._loading_label.setVisible(controller.is_loading)
        for button in (self._add_button, self._reload_button, self._reset_button):
            button.setEnabled(not controller.is_loading)
        self._set_busy_cursor(controller.is_loading)

        self._populate_table()
        self._update_delete_button()
        if self._create_dialog is not None:
            self._create_dialog.sync_with_controller()

    def _populate_table(self) -> None:
        """Rellena la tabla en el orden entregado por el servidor.

        La fila seleccionada se conserva entre redibujos usando
        ``identity_key`` guardada en la columna ID.
        """
        selected_key = self._selected_key()
        products = self._controller.products
        self._table.clearSelection()
        self._table.setRowCount(len(products))
        for row, product in enumerate(products):
            id_item = QTableWidgetItem(str(product.id))
            id_item.setData(
                Qt.ItemDataRole.UserRole,
                self._controller.identity_key(row, product),
            )
            price_item = QTableWidgetItem(format_clp(product.price))
            price_item.setTextAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            stock_item = QTableWidgetItem(str(product.stock))
            stock_item.setTextAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )

            self._table.setItem(row, 0, id_item)
            self._table.setItem(row, 1, QTableWidgetItem(product.name))
            self._table.setItem(row, 2, price_item)
            self._table.setItem(row, 3, stock_item)

            if selected_key is not None and id_item.data(Qt.ItemDataRole.UserRole) == selected_key:
                self._table.selectRow(row)

        self._empty_label.setVisible(not products and not self._controller.is_loading)

    def _selected_key(self) -> int | None:
        """Retorna la clave de identidad de la fila seleccionada."""
        row = self._table.currentRow()
        if row < 0 or not self._table.selectionModel().isRowSelected(row):
            return None
        item = self._table.item(row, 0)
        return item.data(Qt.ItemDataRole.UserRole) if item is not None else None

    def _selected_product_id(self) -> int | None:
        """Retorna el ID del producto seleccionado en la tabla."""
        row = self._table.currentRow()
        products = self._controller.products
        if row < 0 or row >= len(products):
            return None
        if not self._table.selectionModel().isRowSelected(row):
            return None
        return products[row].id

    def _update_delete_button(self) -> None:
        self._delete_button.setEnabled(
            not self._controller.is_loading and self._selected_product_id() is not None
        )

    def _set_busy_cursor(self, busy: bool) -> None:
        """Muestra cursor de espera mientras hay una llamada en curso."""
        if busy and not self._busy_cursor:
            QApplication.setOverrideCursor(Qt.CursorShape.WaitCursor)
        elif not busy and self._busy_cursor:
            QApplication.restoreOverrideCursor()
        self._busy_cursor = busy

    def _on_add_clicked(self, _checked: bool = False) -> None:
        self._controller.open_create_form()

    def _on_reload_clicked(self, _checked: bool = False) -> None:
        self._controller.load_products()

    def _on_delete_clicked(self, _checked: bool = False) -> None:
        self._controller.request_delete(self._selected_product_id())

    def _on_reset_clicked(self, _checked: bool = False) -> None:
        self._controller.reset_database()

    @staticmethod
    def _build_button(text: str) -> QPushButton:
        """Construye un boton estandar de la barra de acciones."""
        button = QPushButton(text)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button
