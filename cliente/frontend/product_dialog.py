"""Dialogo para agregar productos al inventario."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QDoubleSpinBox,
    QFormLayout,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from cliente.frontend.dialogs import show_error, show_info
from servidor.domain.models import ProductType
from shared.errors import ServiceError, ValidationError
from shared.protocol import ProductDraft

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class AddProductDialog(QDialog):
    """Dialogo modal para capturar un producto Electronics o Food."""

    def __init__(
        self,
        controller: AppController,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._name_input: QLineEdit
        self._price_input: QDoubleSpinBox
        self._stock_input: QSpinBox
        self._type_combo: QComboBox
        self._warranty_label: QLabel
        self._warranty_input: QSpinBox
        self._expiration_label: QLabel
        self._expiration_input: QLineEdit

        self.setWindowTitle("Agregar producto")
        self.setModal(True)
        self.setMinimumSize(460, 380)

        self._build_ui()
        self._apply_styles()
        self._on_type_changed(self._type_combo.currentIndex())

    def _build_ui(self) -> None:
        """Construye widgets del dialogo."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)

        card = QFrame(self)
        card.setObjectName("dialogCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(24, 24, 24, 24)
        card_layout.setSpacing(12)

        title_label = QLabel("Agregar producto", card)
        title_label.setObjectName("titleLabel")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        form = QFormLayout()
        self._name_input = QLineEdit(card)
        self._name_input.setPlaceholderText("Laptop")

        self._price_input = QDoubleSpinBox(card)
        self._price_input.setRange(0.0, 1e12)
        self._price_input.setDecimals(2)
        self._price_input.setPrefix("$ ")

        self._stock_input = QSpinBox(card)
        self._stock_input.setRange(0, 2_147_483_647)

        self._type_combo = QComboBox(card)
        for product_type in ProductType:
            self._type_combo.addItem(product_type.value, product_type)

        self._warranty_label = QLabel("Garantia (meses)", card)
        self._warranty_input = QSpinBox(card)
        self._warranty_input.setRange(0, 1200)

        self._expiration_label = QLabel("Vencimiento", card)
        self._expiration_input = QLineEdit(card)
        self._expiration_input.setPlaceholderText("YYYY-MM-DD")

        form.addRow("Nombre", self._name_input)
        form.addRow("Precio", self._price_input)
        form.addRow("Stock", self._stock_input)
        form.addRow("Tipo", self._type_combo)
        form.addRow(self._warranty_label, self._warranty_input)
        form.addRow(self._expiration_label, self._expiration_input)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)
        cancel_button = QPushButton("Cancelar", card)
        cancel_button.setObjectName("cancelButton")
        add_button = QPushButton("Agregar", card)

        cancel_button.clicked.connect(self.reject)
        add_button.clicked.connect(self._on_add_clicked)
        self._type_combo.currentIndexChanged.connect(self._on_type_changed)

        buttons_layout.addWidget(cancel_button)
        buttons_layout.addWidget(add_button)

        card_layout.addWidget(title_label)
        card_layout.addLayout(form)
        card_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 35))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)
        self._name_input.setFocus()

    def _apply_styles(self) -> None:
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
            QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                padding: 6px;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-weight: 600;
                min-height: 36px;
                min-width: 100px;
            }
            QPushButton#cancelButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            """
        )

    def _on_type_changed(self, _index: int) -> None:
        """Muestra solo el campo especifico del tipo seleccionado."""
        is_electronics = self._selected_type() is ProductType.ELECTRONICS
        self._warranty_label.setVisible(is_electronics)
        self._warranty_input.setVisible(is_electronics)
        self._expiration_label.setVisible(not is_electronics)
        self._expiration_input.setVisible(not is_electronics)

    def _selected_type(self) -> ProductType:
        return self._type_combo.currentData()

    def _build_draft(self) -> ProductDraft:
        product_type = self._selected_type()
        draft = ProductDraft(
            name=self._name_input.text().strip(),
            price=self._price_input.value(),
            stock_quantity=self._stock_input.value(),
            product_type=product_type.value,
        )
        if product_type is ProductType.ELECTRONICS:
            draft.warranty_period = self._warranty_input.value()
        else:
            draft.expiration_date = self._expiration_input.text().strip()
        return draft

    def _on_add_clicked(self) -> None:
        """Agrega el producto usando el controller."""
        try:
            message = self._controller.on_add_product(self._build_draft())
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error al agregar producto", str(exc))
            return

        show_info(self, "Producto agregado", message)
        self.accept()
