"""Library constants."""

ASCENDING = "asc"
DESCENDING = "desc"
DIRECTIONS = (ASCENDING, DESCENDING)
EXTRACTOR_SOURCES = (
    "method",
    "attribute",
    "key",
)
DEFAULT_SOURCE = "key"
DEFAULT_VALUE_COMPARATOR = "natural"
LOGGER_NAMESPACE = "comparators"
JSON_LOG_FIELDS = (
    "timestamp",
    "logger",
    "level",
    "event",
    "profile",
    "terms",
    "direction",
    "source",
    "error_code",
    "message",
)
