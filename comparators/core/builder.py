"""Assembles comparison functions from an extractor, a comparator and a direction."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable

from comparators.common.constants import ASCENDING, DESCENDING
from comparators.common.errors import BuilderError
from comparators.common.logging import get_logger, log_event
from comparators.core.values import identity, natural_compare

ValueExtractor = Callable[[Any], Any]
ValueComparator = Callable[[Any, Any], int]
Comparison = Callable[[Any, Any], int]

logger = get_logger("builder")


def ensure_callable(candidate: Any, role: str) -> None:
    if not callable(candidate):
        raise BuilderError(f"{role} must be callable, got {type(candidate).__name__}")


@dataclass(frozen=True)
class ComparisonBuilder:
    """Immutable recipe for a comparison function.

    Every setter returns a new builder, so a partly configured builder can be
    shared as a template::

        by_price = ComparisonBuilder.create().set_value_extractor(lambda food: food.price)
        cheapest_first = by_price.build()
        dearest_first = by_price.set_sort_ascending(False).build()
    """

    value_extractor: ValueExtractor = identity
    value_comparator: ValueComparator = natural_compare
    inversion_factor: int = 1

    @classmethod
    def create(cls) -> ComparisonBuilder:
        return cls()

    def set_value_extractor(self, value_extractor: ValueExtractor) -> ComparisonBuilder:
        ensure_callable(value_extractor, "value extractor")
        return replace(self, value_extractor=value_extractor)

    def set_value_comparator(self, value_comparator: ValueComparator) -> ComparisonBuilder:
        ensure_callable(value_comparator, "value comparator")
        return replace(self, value_comparator=value_comparator)

    def set_sort_ascending(self, is_ascending: bool) -> ComparisonBuilder:
        return replace(self, inversion_factor=1 if is_ascending else -1)

    @property
    def is_ascending(self) -> bool:
        return self.inversion_factor == 1

    def build(self) -> Comparison:
        value_extractor = self.value_extractor
        value_comparator = self.value_comparator
        inversion_factor = self.inversion_factor

        def compare(a: Any, b: Any) -> int:
            return value_comparator(value_extractor(a), value_extractor(b)) * inversion_factor

        log_event(
            logger,
            "comparison built",
            event="COMPARISON_BUILT",
            direction=ASCENDING if self.is_ascending else DESCENDING,
            source=getattr(value_extractor, "__name__", type(value_extractor).__name__),
        )
        return compare
