"""Filter Grid - grid control with an embedded per-column filter row."""

__version__ = "0.1.0"

__all__ = ["__version__"]
