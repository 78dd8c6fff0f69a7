"""Table model exposing the controller's displayed rows to Qt."""

from typing import Any, List, Optional

from PyQt5.QtCore import QAbstractTableModel, QModelIndex, Qt
from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import QApplication, QStyle

from filter_grid.application.filter_controller import FilterController
from filter_grid.domain.models import Record
from filter_grid.infrastructure.config import AppConfig
from filter_grid.shared.types import RecordField

FILTER_ROW = 0
PLACEHOLDER = "Filter"


class FilterTableModel(QAbstractTableModel):
    """Row 0 is the editable filter row; every other row is a read-only record."""

    def __init__(self, controller: FilterController, config: AppConfig, parent=None):
        """Initialize model.

        Args:
            controller: Filter controller owning the rows
            config: Application configuration
            parent: Parent object
        """
        super().__init__(parent)
        self._controller = controller
        self._config = config
        self._records: List[Record] = controller.records
        controller.add_listener(self._on_rows_changed)

    @property
    def controller(self) -> FilterController:
        return self._controller

    def is_filter_row(self, index: QModelIndex) -> bool:
        """Check whether an index belongs to the filter row."""
        return index.isValid() and index.row() == FILTER_ROW

    def field_at(self, index: QModelIndex) -> RecordField:
        """Get the record field shown in an index's column."""
        return RecordField.from_index(index.column())

    def record(self, row: int) -> Optional[Record]:
        """Get the record shown in a grid row (None for the filter row)."""
        if row <= FILTER_ROW or row > len(self._records):
            return None
        return self._records[row - 1]

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._records) + 1

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(RecordField)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        if not index.isValid():
            return None

        field = self.field_at(index)

        if self.is_filter_row(index):
            text = self._controller.pattern(field)
            if role in (Qt.DisplayRole, Qt.EditRole):
                return text
            if role == Qt.BackgroundRole:
                return QColor(self._config.filter_back_color)
            if role == Qt.ToolTipRole:
                return f"Type to filter by {self.header_text(field)}"
            return None

        record = self.record(index.row())
        if record is None:
            return None
        if role in (Qt.DisplayRole, Qt.EditRole, Qt.ToolTipRole):
            return record.get(field)
        return None

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.EditRole) -> bool:
        if role != Qt.EditRole or not self.is_filter_row(index):
            return False
        self._controller.end_edit(self.field_at(index), str(value or ""))
        self.dataChanged.emit(index, index, [Qt.DisplayRole, Qt.EditRole])
        return True

    def flags(self, index: QModelIndex) -> Qt.ItemFlags:
        if not index.isValid():
            return Qt.NoItemFlags
        flags = Qt.ItemIsEnabled | Qt.ItemIsSelectable
        if self.is_filter_row(index):
            flags |= Qt.ItemIsEditable
        return flags

    def header_text(self, field: RecordField) -> str:
        """Column header text, honouring the configured description header."""
        if field == RecordField.DESCRIPTION:
            return self._config.description_header
        return field.header

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.DisplayRole) -> Any:
        if orientation == Qt.Horizontal:
            if role == Qt.DisplayRole and 0 <= section < len(RecordField):
                return self.header_text(RecordField.from_index(section))
            return None

        if section == FILTER_ROW:
            if role == Qt.DecorationRole:
                style = QApplication.style()
                return style.standardIcon(QStyle.SP_DialogResetButton) if style else None
            if role == Qt.ToolTipRole:
                return "Clear all filters"
            if role == Qt.DisplayRole:
                return ""
            return None

        if role == Qt.DisplayRole:
            return str(section)
        return None

    def _on_rows_changed(self, rows: List[Any]) -> None:
        """Replace the record rows, leaving the filter row (and its editor) alone."""
        old_count = len(self._records)
        if old_count:
            self.beginRemoveRows(QModelIndex(), FILTER_ROW + 1, old_count)
            self._records = []
            self.endRemoveRows()

        new_records = list(rows[FILTER_ROW + 1:])
        if new_records:
            self.beginInsertRows(QModelIndex(), FILTER_ROW + 1, len(new_records))
            self._records = new_records
            self.endInsertRows()

        self.dataChanged.emit(
            self.index(FILTER_ROW, 0),
            self.index(FILTER_ROW, self.columnCount() - 1)
        )
