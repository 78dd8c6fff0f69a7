"""Common path utilities."""

import sys
from pathlib import Path

def get_config_dir() -> Path:
    """Get configuration directory."""
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Roaming" / "FilterGrid"
    elif sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "Filter Grid"
    else:
        return Path.home() / ".config" / "filter-grid"

def get_log_dir() -> Path:
    """Get log directory."""
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Local" / "FilterGrid" / "logs"
    elif sys.platform == "darwin":
        return Path.home() / "Library" / "Logs" / "FilterGrid"
    else:
        return Path.home() / ".local" / "state" / "filter-grid"
