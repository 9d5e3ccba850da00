"""Library exception classes."""


class ConfigError(Exception):
    """Raised when locale/currency formatting parameters cannot be resolved."""
