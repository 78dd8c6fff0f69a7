"""Domain services."""

from filter_grid.domain.services.query_builder import Query, build_query, escape_like

__all__ = ["Query", "build_query", "escape_like"]
