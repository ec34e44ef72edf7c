"""Name-based value extractors for dynamically shaped elements.

These resolve a method, attribute or key name when the comparison runs.
Prefer passing an explicit accessor (``lambda user: user.birthday``) where
the element type is known; use these when the field is only known by name,
for example when it comes from configuration.
"""

from __future__ import annotations

from operator import attrgetter, itemgetter, methodcaller
from typing import Any, Callable, Hashable


def method_extractor(method_name: str) -> Callable[[Any], Any]:
    # Raises AttributeError for elements without the method.
    return methodcaller(method_name)


def attribute_extractor(attribute_name: str) -> Callable[[Any], Any]:
    # Dotted names such as "owner.name" walk nested attributes.
    return attrgetter(attribute_name)


def key_extractor(key: Hashable) -> Callable[[Any], Any]:
    return itemgetter(key)


EXTRACTOR_FACTORIES: dict[str, Callable[[Any], Callable[[Any], Any]]] = {
    "method": method_extractor,
    "attribute": attribute_extractor,
    "key": key_extractor,
}
