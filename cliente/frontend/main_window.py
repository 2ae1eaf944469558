"""Ventana principal de Lazy Inventory."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QGuiApplication
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import AppController
from cliente.frontend.dialogs import ask_float, ask_int, ask_text, show_error, show_info
from cliente.frontend.product_dialog import AddProductDialog
from parametros import APP_NAME
from shared.errors import ServiceError, ValidationError


class MainWindow(QMainWindow):
    """Ventana principal con el menu de acciones del inventario."""

    def __init__(self, controller: AppController) -> None:
        super().__init__()
        self._controller = controller

        self._stack: QStackedWidget
        self._menu_page: QWidget
        self._inventory_page: QWidget
        self._inventory_view: QPlainTextEdit

        self._display_button: QPushButton
        self._add_button: QPushButton
        self._sell_button: QPushButton
        self._discount_button: QPushButton
        self._restock_button: QPushButton
        self._save_button: QPushButton
        self._load_button: QPushButton
        self._exit_button: QPushButton
        self._back_button: QPushButton

        self.setWindowTitle(APP_NAME)
        screen = QGuiApplication.primaryScreen()
        if screen is not None:
            geo = screen.availableGeometry()
            w = int(geo.width() * 0.5)
            h = int(geo.height() * 0.8)
            self.resize(w, h)
            self.setMinimumSize(int(w * 0.7), int(h * 0.7))
        self._build_ui()
        self._apply_styles()
        self._connect_signals()

    def _build_ui(self) -> None:
        """Construye la estructura de paginas de la ventana principal."""
        self._stack = QStackedWidget(self)
        self.setCentralWidget(self._stack)

        self._menu_page = self._build_menu_page()
        self._inventory_page = self._build_inventory_page()

        self._stack.addWidget(self._menu_page)
        self._stack.addWidget(self._inventory_page)
        self._show_menu_page()

    def _build_menu_page(self) -> QWidget:
        """Construye y retorna la pagina de menu principal."""
        page = QWidget(self)

        root_layout = QVBoxLayout(page)
        root_layout.setContentsMargins(40, 40, 40, 40)
        root_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        card = QFrame(page)
        card.setObjectName("mainCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(40, 40, 40, 40)
        card_layout.setSpacing(12)

        title_label = QLabel(APP_NAME, card)
        title_label.setObjectName("titleLabel")
        title_label.setFont(QFont("Segoe UI", 24, QFont.Weight.Bold))
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._display_button = self._build_button("Ver inventario")
        self._add_button = self._build_button("Agregar producto")
        self._sell_button = self._build_button("Vender producto")
        self._discount_button = self._build_button("Aplicar descuento")
        self._restock_button = self._build_button("Reabastecer stock bajo")
        self._save_button = self._build_button("Guardar inventario")
        self._load_button = self._build_button("Cargar inventario")
        self._load_button.setToolTip("La carga desde archivo no esta soportada")
        self._exit_button = self._build_button("Salir")
        self._exit_button.setObjectName("exitButton")

        card_layout.addWidget(title_label)
        card_layout.addSpacing(18)
        for button in (
            self._display_button,
            self._add_button,
            self._sell_button,
            self._discount_button,
            self._restock_button,
            self._save_button,
            self._load_button,
        ):
            card_layout.addWidget(button)
        card_layout.addSpacing(8)
        card_layout.addWidget(self._exit_button)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(38)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 38))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)
        return page

    def _build_inventory_page(self) -> QWidget:
        """Construye la pagina de solo lectura con el inventario."""
        page = QWidget(self)
        layout = QVBoxLayout(page)
        layout.setContentsMargins(40, 40, 40, 40)

        title_label = QLabel("Inventario", page)
        title_label.setFont(QFont("Segoe UI", 18, QFont.Weight.Bold))

        self._inventory_view = QPlainTextEdit(page)
        self._inventory_view.setReadOnly(True)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)
        self._back_button = self._build_button("Volver")
        self._back_button.setObjectName("exitButton")
        buttons_layout.addWidget(self._back_button)

        layout.addWidget(title_label)
        layout.addWidget(self._inventory_view, 1)
        layout.addLayout(buttons_layout)
        return page

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
                min-width: 420px;
                max-width: 520px;
            }
            QPlainTextEdit {
                background-color: #ffffff;
                border: 1px solid #d1d5db;
                border-radius: 10px;
                font-family: "Consolas";
                font-size: 13px;
                padding: 10px;
            }
            QPushButton {
                background-color: #1f6f43;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 15px;
                font-weight: 600;
                min-height: 44px;
                padding: 8px 14px;
            }
            QPushButton:hover {
                background-color: #185a36;
            }
            QPushButton#exitButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#exitButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _connect_signals(self) -> None:
        """Conecta botones de UI con acciones del controller."""
        self._display_button.clicked.connect(self._on_display_clicked)
        self._add_button.clicked.connect(self._on_add_clicked)
        self._sell_button.clicked.connect(self._on_sell_clicked)
        self._discount_button.clicked.connect(self._on_discount_clicked)
        self._restock_button.clicked.connect(self._on_restock_clicked)
        self._save_button.clicked.connect(self._on_save_clicked)
        self._load_button.clicked.connect(self._on_load_clicked)
        self._exit_button.clicked.connect(self._on_exit_clicked)
        self._back_button.clicked.connect(self._show_menu_page)

    def _show_menu_page(self) -> None:
        self._stack.setCurrentWidget(self._menu_page)

    def _on_display_clicked(self, _checked: bool = False) -> None:
        """Muestra la pagina de inventario con datos actualizados."""
        self._inventory_view.setPlainText(self._controller.on_display_inventory())
        self._stack.setCurrentWidget(self._inventory_page)

    def _on_add_clicked(self, _checked: bool = False) -> None:
        dialog = AddProductDialog(controller=self._controller, parent=self)
        dialog.exec()

    def _on_sell_clicked(self, _checked: bool = False) -> None:
        name = ask_text(self, "Vender producto", "Nombre del producto:")
        if not name:
            return
        quantity = ask_int(self, "Vender producto", "Cantidad a vender:", minimum=1, value=1)
        if quantity is None:
            return
        self._run_action("Venta", lambda: self._controller.on_sell_product(name, quantity))

    def _on_discount_clicked(self, _checked: bool = False) -> None:
        name = ask_text(self, "Aplicar descuento", "Nombre del producto:")
        if not name:
            return
        percentage = ask_float(self, "Aplicar descuento", "Porcentaje de descuento:")
        if percentage is None:
            return
        self._run_action(
            "Descuento",
            lambda: self._controller.on_apply_discount(name, percentage),
        )

    def _on_restock_clicked(self, _checked: bool = False) -> None:
        threshold = ask_int(self, "Reabastecer", "Umbral de stock:", minimum=0)
        if threshold is None:
            return
        self._run_action("Reabastecimiento", lambda: self._controller.on_restock(threshold))

    def _on_save_clicked(self, _checked: bool = False) -> None:
        self._run_action("Guardar inventario", self._controller.on_save)

    def _on_load_clicked(self, _checked: bool = False) -> None:
        self._run_action("Cargar inventario", self._controller.on_load)

    def _on_exit_clicked(self) -> None:
        """Solicita al controller el cierre de la app."""
        self._controller.on_exit(QApplication.instance())

    def _run_action(self, title: str, action: Callable[[], str]) -> None:
        """Ejecuta una accion del controller mostrando resultado o error."""
        try:
            message = action()
        except (ValidationError, ServiceError) as exc:
            show_error(self, f"Error: {title}", str(exc))
            return
        show_info(self, title, message)

    @staticmethod
    def _build_button(text: str) -> QPushButton:
        """Construye un boton estandar del menu principal."""
        button = QPushButton(text)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button
