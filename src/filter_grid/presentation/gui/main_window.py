"""Main window hosting the filtered grid."""

from PyQt5.QtWidgets import QAction, QMainWindow

from filter_grid.application.filter_controller import FilterController
from filter_grid.infrastructure.config import AppConfig
from filter_grid.infrastructure.logging import get_logger
from filter_grid.presentation.gui.widgets.filtered_table import FilteredTableView

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Top-level window: the grid plus a status bar with the match count."""

    def __init__(self, controller: FilterController, config: AppConfig, parent=None):
        """Initialize main window.

        Args:
            controller: Filter controller
            config: Application configuration
            parent: Parent widget
        """
        super().__init__(parent)
        self._controller = controller
        self._config = config

        self.setWindowTitle("Filter Grid")
        self.resize(config.window_width, config.window_height)

        self.table = FilteredTableView(controller, config, self)
        self.setCentralWidget(self.table)
        self.table.query_failed.connect(self._on_query_failed)

        self._create_actions()
        self._create_menus()

        controller.add_listener(self._on_rows_changed)
        self._on_rows_changed(controller.rows)

    def _create_actions(self):
        self.clear_filters_action = QAction("&Clear Filters", self)
        self.clear_filters_action.setShortcut("Ctrl+Shift+L")
        self.clear_filters_action.setStatusTip("Clear all column filters")
        self.clear_filters_action.triggered.connect(self.table.clear_filters)

        self.exit_action = QAction("E&xit", self)
        self.exit_action.setShortcut("Ctrl+Q")
        self.exit_action.triggered.connect(self.close)

    def _create_menus(self):
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.exit_action)

        edit_menu = self.menuBar().addMenu("&Edit")
        edit_menu.addAction(self.clear_filters_action)

    def _on_rows_changed(self, rows):
        count = len(rows) - 1
        self.statusBar().showMessage(f"{count} record(s)")

    def _on_query_failed(self, message: str):
        self.statusBar().showMessage(f"Query failed: {message}")
