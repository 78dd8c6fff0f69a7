"""Custom exceptions for Filter Grid."""


class FilterGridError(Exception):
    """Base exception for all Filter Grid errors."""
    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)

class StoreError(FilterGridError):
    """Error talking to the record store."""
    pass

class DuplicateRecordError(StoreError):
    """A record with the same code already exists."""
    pass

class SeedError(FilterGridError):
    """Error loading seed records."""
    pass

class ConfigError(FilterGridError):
    """Invalid configuration value."""
    pass
