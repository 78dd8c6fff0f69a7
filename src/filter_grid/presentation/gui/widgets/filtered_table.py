"""Grid view with an embedded filter row."""

from PyQt5.QtCore import QModelIndex, Qt, pyqtSignal
from PyQt5.QtWidgets import QAbstractItemDelegate, QAbstractItemView, QHeaderView, QTableView

from filter_grid.application.filter_controller import FilterController
from filter_grid.infrastructure.config import AppConfig
from filter_grid.infrastructure.logging import get_logger
from filter_grid.presentation.gui.models.filter_table_model import FILTER_ROW, FilterTableModel
from filter_grid.presentation.gui.widgets.filter_delegate import FilterRowDelegate
from filter_grid.shared.exceptions import StoreError
from filter_grid.shared.types import RecordField

logger = get_logger(__name__)


class FilteredTableView(QTableView):
    """Read-only record grid whose first row holds per-column filters.

    Clicking a filter cell opens its editor; clicking the filter row's
    header cell clears every filter.

    Signals:
        query_failed: Emitted with a message when a query fails
    """

    query_failed = pyqtSignal(str)

    def __init__(self, controller: FilterController, config: AppConfig, parent=None):
        """Initialize table view.

        Args:
            controller: Filter controller
            config: Application configuration
            parent: Parent widget
        """
        super().__init__(parent)
        self._controller = controller
        self._config = config

        self._model = FilterTableModel(controller, config, self)
        self.setModel(self._model)

        self._delegate = FilterRowDelegate(controller, config, self)
        self._delegate.query_failed.connect(self.query_failed)
        self.setItemDelegate(self._delegate)

        controller.add_error_listener(lambda e: self.query_failed.emit(str(e)))
        self.query_failed.connect(lambda message: logger.warning(f"Query failed: {message}"))

        self._setup_table()

    def _setup_table(self):
        """Setup table structure and appearance."""
        self.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setEditTriggers(
            QAbstractItemView.EditKeyPressed | QAbstractItemView.AnyKeyPressed
        )

        header = self.horizontalHeader()
        header.setSectionResizeMode(RecordField.CODE.column_index(), QHeaderView.Interactive)
        header.setSectionResizeMode(RecordField.DESCRIPTION.column_index(), QHeaderView.Stretch)
        self.setColumnWidth(RecordField.CODE.column_index(), self._config.code_column_width)

        vertical = self.verticalHeader()
        vertical.setDefaultSectionSize(24)
        vertical.setSectionsClickable(True)
        vertical.sectionClicked.connect(self._on_row_header_clicked)

    @property
    def filter_model(self) -> FilterTableModel:
        return self._model

    @property
    def filter_delegate(self) -> FilterRowDelegate:
        return self._delegate

    def filter_index(self, field: RecordField) -> QModelIndex:
        """Index of a field's filter cell."""
        return self._model.index(FILTER_ROW, field.column_index())

    def edit_filter(self, field: RecordField) -> None:
        """Open the editor of a field's filter cell."""
        index = self.filter_index(field)
        self.setCurrentIndex(index)
        self.edit(index)

    def clear_filters(self) -> None:
        """Close any filter editor and clear all filters."""
        current = self.currentIndex()
        if self._model.is_filter_row(current):
            editor = self.indexWidget(current)
            if editor is not None:
                self.closeEditor(editor, QAbstractItemDelegate.NoHint)
        try:
            self._controller.clear_all()
        except StoreError as e:
            self.query_failed.emit(str(e))

    def mousePressEvent(self, event):
        super().mousePressEvent(event)
        index = self.indexAt(event.pos())
        if event.button() == Qt.LeftButton and self._model.is_filter_row(index):
            self.edit(index)

    def _on_row_header_clicked(self, section: int):
        if section == FILTER_ROW:
            self.clear_filters()
