"""Default extractor and value comparators."""

from __future__ import annotations

import re
from typing import Any, Callable

_NUMERIC_STRING_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def identity(value: Any) -> Any:
    return value


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ``==`` and ``<``.

    Returns:
        0 if a == b, -1 if a < b, 1 otherwise
    """
    if a == b:
        return 0
    return -1 if a < b else 1


def _as_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and _NUMERIC_STRING_RE.match(value):
        return float(value)
    return None


def loose_compare(a: Any, b: Any) -> int:
    """Coercive comparison for mixed data such as CSV or form input.

    Numbers, booleans and numeric strings compare numerically, so ``"10"``
    sorts after ``9``. When either side is still a string both are compared
    as strings. Everything else uses :func:`natural_compare`.
    """
    number_a = _as_number(a)
    number_b = _as_number(b)
    if number_a is not None and number_b is not None:
        return natural_compare(number_a, number_b)
    if isinstance(a, str) or isinstance(b, str):
        return natural_compare(str(a), str(b))
    return natural_compare(a, b)


def casefold_compare(a: str, b: str) -> int:
    return natural_compare(a.casefold(), b.casefold())


VALUE_COMPARATORS: dict[str, Callable[[Any, Any], int]] = {
    "natural": natural_compare,
    "loose": loose_compare,
    "casefold": casefold_compare,
}
