"""Named constructors for the common comparison shapes.

Instead of writing a callback that both extracts and compares::

    def by_birthday(a, b):
        if a.birthday == b.birthday:
            return 0
        return -1 if a.birthday < b.birthday else 1

provide only the extraction::

    users.sort(key=to_sort_key(sort_asc(lambda user: user.birthday)))

or, when the value is one attribute, method or key away::

    users.sort(key=to_sort_key(sort_asc_by_property("birthday")))

Values are compared with ``==`` and ``<``. Use
:class:`~comparators.core.builder.ComparisonBuilder` directly to plug in a
different value comparator.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Hashable

from comparators.core.builder import Comparison, ComparisonBuilder, ValueExtractor
from comparators.core.extractors import attribute_extractor, key_extractor, method_extractor


def _create(value_extractor: ValueExtractor, sort_ascending: bool) -> Comparison:
    return (
        ComparisonBuilder.create()
        .set_value_extractor(value_extractor)
        .set_sort_ascending(bool(sort_ascending))
        .build()
    )


def sort_by_value_extractor(value_extractor: ValueExtractor, sort_ascending: bool) -> Comparison:
    return _create(value_extractor, sort_ascending)


def sort_asc_by_value_extractor(value_extractor: ValueExtractor) -> Comparison:
    """Ascending comparison over ``value_extractor(element)``.

    The returned callable takes two elements and returns -1, 0 or 1 when
    the first sorts before, level with or after the second.
    """
    return sort_by_value_extractor(value_extractor, True)


def sort_desc_by_value_extractor(value_extractor: ValueExtractor) -> Comparison:
    return sort_by_value_extractor(value_extractor, False)


sort_asc = sort_asc_by_value_extractor
sort_desc = sort_desc_by_value_extractor


def sort_by_method(method_name: str, sort_ascending: bool) -> Comparison:
    return _create(method_extractor(method_name), sort_ascending)


def sort_asc_by_method(method_name: str) -> Comparison:
    return sort_by_method(method_name, True)


def sort_desc_by_method(method_name: str) -> Comparison:
    return sort_by_method(method_name, False)


def sort_by_property(property_name: str, sort_ascending: bool) -> Comparison:
    return _create(attribute_extractor(property_name), sort_ascending)


def sort_asc_by_property(property_name: str) -> Comparison:
    return sort_by_property(property_name, True)


def sort_desc_by_property(property_name: str) -> Comparison:
    return sort_by_property(property_name, False)


def sort_by_key(key: Hashable, sort_ascending: bool) -> Comparison:
    return _create(key_extractor(key), sort_ascending)


def sort_asc_by_key(key: Hashable) -> Comparison:
    return sort_by_key(key, True)


def sort_desc_by_key(key: Hashable) -> Comparison:
    return sort_by_key(key, False)


sort_by_array_key = sort_by_key
sort_asc_by_array_key = sort_asc_by_key
sort_desc_by_array_key = sort_desc_by_key


def to_sort_key(comparison: Comparison) -> Callable[[Any], Any]:
    return cmp_to_key(comparison)
