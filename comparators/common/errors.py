"""Domain errors and failure typing."""


class ComparatorError(Exception):
    """Base class for comparator library failures."""

    error_code = "COMPARATOR_ERROR"


class ConfigError(ComparatorError):
    """Raised for invalid order profiles or ORDER BY expressions."""

    error_code = "CONFIG_ERROR"


class BuilderError(ComparatorError, TypeError):
    """Raised when a builder part is not callable."""

    error_code = "BUILDER_ERROR"
