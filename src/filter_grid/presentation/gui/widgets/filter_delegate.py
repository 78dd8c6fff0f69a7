"""Delegate that paints and edits the filter row."""

from PyQt5.QtCore import QEvent, QModelIndex, QObject, Qt, pyqtSignal
from PyQt5.QtGui import QColor, QPainter, QPen
from PyQt5.QtWidgets import (
    QAction, QLineEdit, QStyle, QStyledItemDelegate, QStyleOptionViewItem, QWidget
)

from filter_grid.application.filter_controller import FilterController
from filter_grid.infrastructure.config import AppConfig
from filter_grid.infrastructure.logging import get_logger
from filter_grid.presentation.gui.models.filter_table_model import FILTER_ROW, PLACEHOLDER
from filter_grid.shared.exceptions import StoreError
from filter_grid.shared.types import RecordField

logger = get_logger(__name__)

FIELD_PROPERTY = "filter_field"
CLEAR_ACTION_NAME = "clear_filter_action"


class FilterRowDelegate(QStyledItemDelegate):
    """Paints filter cells and wires their line edits to the controller.

    Signals:
        query_failed: Emitted with a message when a commit/clear query fails
    """

    query_failed = pyqtSignal(str)

    def __init__(self, controller: FilterController, config: AppConfig, parent=None):
        """Initialize delegate.

        Args:
            controller: Filter controller receiving edits
            config: Application configuration
            parent: Parent object
        """
        super().__init__(parent)
        self._controller = controller
        self._config = config

    # ----- painting -----

    def paint(self, painter: QPainter, option: QStyleOptionViewItem, index: QModelIndex):
        if index.row() != FILTER_ROW:
            super().paint(painter, option, index)
            return

        rect = option.rect
        painter.save()
        painter.fillRect(rect, QColor(self._config.filter_back_color))

        text = index.data(Qt.DisplayRole) or ""
        if not text.strip():
            text = PLACEHOLDER
            painter.setPen(QColor(Qt.gray))
        else:
            painter.setPen(QColor(Qt.black))
        painter.drawText(
            rect.adjusted(4, 0, -4, 0),
            Qt.AlignVCenter | Qt.AlignLeft,
            text
        )

        # Column rule on the right, heavy rule under the row
        painter.setPen(QPen(QColor(Qt.black), 1))
        painter.drawLine(rect.right(), rect.top(), rect.right(), rect.bottom())
        painter.setPen(QPen(QColor(Qt.black), 2))
        painter.drawLine(rect.left(), rect.bottom(), rect.right(), rect.bottom())
        painter.restore()

    # ----- editing -----

    def createEditor(self, parent: QWidget, option: QStyleOptionViewItem, index: QModelIndex):
        if index.row() != FILTER_ROW:
            return None

        field = RecordField.from_index(index.column())
        editor = QLineEdit(parent)
        editor.setPlaceholderText(PLACEHOLDER)
        editor.setFrame(False)
        editor.setProperty(FIELD_PROPERTY, field.value)

        clear_action = editor.addAction(
            editor.style().standardIcon(QStyle.SP_LineEditClearButton),
            QLineEdit.TrailingPosition
        )
        clear_action.setObjectName(CLEAR_ACTION_NAME)
        clear_action.setToolTip("Clear filter")
        clear_action.setVisible(False)
        clear_action.triggered.connect(lambda: self._on_clear(editor, field))

        editor.textChanged.connect(lambda text: self._on_text_changed(editor, field, text))
        editor.installEventFilter(self)
        return editor

    def setEditorData(self, editor: QWidget, index: QModelIndex):
        if isinstance(editor, QLineEdit):
            text = index.data(Qt.EditRole) or ""
            if editor.text() != text:
                editor.blockSignals(True)
                editor.setText(text)
                editor.blockSignals(False)
            self._update_clear_action(editor)
            return
        super().setEditorData(editor, index)

    def setModelData(self, editor: QWidget, model, index: QModelIndex):
        if isinstance(editor, QLineEdit):
            model.setData(index, editor.text(), Qt.EditRole)
            return
        super().setModelData(editor, model, index)

    def updateEditorGeometry(self, editor: QWidget, option: QStyleOptionViewItem, index: QModelIndex):
        editor.setGeometry(option.rect.adjusted(0, 0, -1, -2))

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if (
            isinstance(obj, QLineEdit)
            and event.type() == QEvent.KeyPress
            and event.key() in (Qt.Key_Return, Qt.Key_Enter)
        ):
            field = RecordField(obj.property(FIELD_PROPERTY))
            self._guarded(self._controller.commit, field, obj.text())
        return super().eventFilter(obj, event)

    def _on_text_changed(self, editor: QLineEdit, field: RecordField, text: str):
        self._update_clear_action(editor)
        self._controller.edit(field, text)

    def _on_clear(self, editor: QLineEdit, field: RecordField):
        editor.blockSignals(True)
        editor.clear()
        editor.blockSignals(False)
        self._update_clear_action(editor)
        self._guarded(self._controller.clear, field)

    def _update_clear_action(self, editor: QLineEdit):
        action = editor.findChild(QAction, CLEAR_ACTION_NAME)
        if action is not None:
            action.setVisible(bool(editor.text().strip()))

    def _guarded(self, func, *args):
        """Run a controller action, reporting store failures instead of raising."""
        try:
            func(*args)
        except StoreError as e:
            self.query_failed.emit(str(e))
