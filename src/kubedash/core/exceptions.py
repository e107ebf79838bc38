class KubeDashError(Exception):
    """Base exception for kubedash."""

    pass


class ConfigurationError(KubeDashError, ValueError):
    """Raised when a configuration value is invalid."""

    pass
