"""Lexicographic composition of comparison functions."""

from __future__ import annotations

from typing import Any

from comparators.core.builder import Comparison, ensure_callable


def tie_breaker(*comparisons: Comparison) -> Comparison:
    """Chain comparisons the way SQL ``ORDER BY a, b, c`` does.

    Comparisons run in order and the first non-zero result is returned as is,
    without evaluating the rest. When every comparison ties the result is 0,
    which is also what an empty chain always returns. Any two-argument
    callable works, including the result of another ``tie_breaker`` call.

    Example, equivalent to ``ORDER BY last_name ASC, age DESC``::

        people.sort(key=to_sort_key(tie_breaker(
            sort_asc_by_key("last_name"),
            sort_desc_by_key("age"),
        )))
    """
    for index, comparison in enumerate(comparisons):
        ensure_callable(comparison, f"comparison #{index}")
    comparison_sequence = tuple(comparisons)

    def compare(a: Any, b: Any) -> int:
        for comparison in comparison_sequence:
            diff = comparison(a, b)
            if diff != 0:
                return diff
        return 0

    return compare
