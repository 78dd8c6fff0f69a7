"""Qt item models."""

from filter_grid.presentation.gui.models.filter_table_model import FilterTableModel

__all__ = ["FilterTableModel"]
