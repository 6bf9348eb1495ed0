"""rkmatch exceptions."""


class RKMatchError(Exception):
    """Base exception."""


class ConfigError(RKMatchError):
    """Invalid chunk size, algorithm selector, filter size or hash parameters."""


class ResourceError(RKMatchError):
    """Document could not be read."""
