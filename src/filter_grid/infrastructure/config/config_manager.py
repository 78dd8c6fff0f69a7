"""Configuration management for Filter Grid."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from filter_grid.infrastructure.config.paths import get_config_dir
from filter_grid.infrastructure.logging import get_logger
from filter_grid.shared.exceptions import ConfigError
from filter_grid.shared.types import DEFAULT_DEBOUNCE_MS, DEFAULT_PAGE_SIZE

logger = get_logger(__name__)


@dataclass
class AppConfig:
    """Application configuration."""
    # Filter behaviour
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    page_size: int = DEFAULT_PAGE_SIZE

    # UI Settings
    filter_back_color: str = "#FFFFFF"
    code_column_width: int = 150
    description_header: str = "Formal Title"
    window_width: int = 800
    window_height: int = 500

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Check value types and ranges.

        Raises:
            ConfigError: If a value has the wrong type or is out of range
        """
        for f in fields(self):
            value = getattr(self, f.name)
            expected = int if f.type in (int, "int") else str
            # bool is an int subclass but never a valid setting here
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ConfigError(
                    f"{f.name} must be {expected.__name__}, got {value!r}",
                    key=f.name
                )

        if self.debounce_ms < 0:
            raise ConfigError(
                f"debounce_ms must be >= 0, got {self.debounce_ms}",
                key="debounce_ms"
            )
        if self.page_size < 1:
            raise ConfigError(
                f"page_size must be >= 1, got {self.page_size}",
                key="page_size"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """Create from dictionary."""
        # Filter out None values and unknown keys
        valid_fields = {f.name for f in fields(cls)}
        filtered_data = {
            k: v for k, v in data.items()
            if k in valid_fields and v is not None
        }
        return cls(**filtered_data)


class ConfigManager:
    """Manages application configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Config file path (default: platform config dir)
        """
        self._config = AppConfig()
        self._config_file = config_file or get_config_dir() / "config.json"
        self._load_config()

    @property
    def config_file(self) -> Path:
        """Path of the backing JSON file."""
        return self._config_file

    def _load_config(self) -> None:
        """Load configuration from file."""
        if not self._config_file.exists():
            # Use defaults
            return

        try:
            with open(self._config_file, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Failed to load config from {self._config_file}: {e}")
            return

        if not isinstance(data, dict):
            logger.error(f"Ignoring config {self._config_file}: top level is not an object")
            return

        # Merge with defaults
        self._config = AppConfig.from_dict(data)
        logger.info(f"Loaded config from {self._config_file}")

    def save_config(self) -> None:
        """Save configuration to file."""
        try:
            self._config_file.parent.mkdir(parents=True, exist_ok=True)

            # Write atomically
            temp_file = self._config_file.with_suffix('.tmp')
            with open(temp_file, 'w') as f:
                json.dump(self._config.to_dict(), f, indent=2)

            # Replace original
            temp_file.replace(self._config_file)
            logger.debug(f"Saved config to {self._config_file}")

        except OSError as e:
            logger.error(f"Failed to save config: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return getattr(self._config, key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value.

        Args:
            key: Configuration key
            value: New value

        Raises:
            ConfigError: If the value is out of range
        """
        self.update(**{key: value})

    def update(self, **kwargs) -> None:
        """Update multiple configuration values.

        Unknown keys are ignored. The update is all-or-nothing.

        Args:
            **kwargs: Key-value pairs to update

        Raises:
            ConfigError: If a value is out of range
        """
        data = self._config.to_dict()
        data.update({k: v for k, v in kwargs.items() if k in data})
        self._config = AppConfig.from_dict(data)
        self.save_config()

    def get_config(self) -> AppConfig:
        """Get the entire configuration object.

        Returns:
            Current configuration
        """
        return self._config

    def reset_to_defaults(self) -> None:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()


# Global config instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_file: Optional[Path] = None) -> ConfigManager:
    """Get the global configuration manager.

    Args:
        config_file: Config file to use when the manager is first created

    Returns:
        ConfigManager instance
    """
    global _config_manager
    if _config_manager is None or (
        config_file is not None and config_file != _config_manager.config_file
    ):
        _config_manager = ConfigManager(config_file)
    return _config_manager


def get_config() -> AppConfig:
    """Get the current configuration.

    Returns:
        Current application configuration
    """
    return get_config_manager().get_config()
