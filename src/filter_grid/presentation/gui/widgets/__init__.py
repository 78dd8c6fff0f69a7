"""Reusable GUI widgets."""

from filter_grid.presentation.gui.widgets.filter_delegate import FilterRowDelegate
from filter_grid.presentation.gui.widgets.filtered_table import FilteredTableView

__all__ = [
    "FilterRowDelegate",
    "FilteredTableView",
]
