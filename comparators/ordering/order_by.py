"""SQL-style ORDER BY terms built on the comparison builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from comparators.common.constants import (
    ASCENDING,
    DEFAULT_SOURCE,
    DEFAULT_VALUE_COMPARATOR,
    DESCENDING,
    EXTRACTOR_SOURCES,
)
from comparators.common.errors import ConfigError
from comparators.core.builder import Comparison, ComparisonBuilder
from comparators.core.extractors import EXTRACTOR_FACTORIES
from comparators.core.tie_breaker import tie_breaker
from comparators.core.values import VALUE_COMPARATORS


@dataclass(frozen=True)
class OrderTerm:
    field: str
    source: str = DEFAULT_SOURCE
    ascending: bool = True
    compare: str = DEFAULT_VALUE_COMPARATOR

    @classmethod
    def from_dict(cls, term: dict) -> OrderTerm:
        return cls(
            field=term["field"],
            source=term.get("source", DEFAULT_SOURCE),
            ascending=term.get("direction", ASCENDING) == ASCENDING,
            compare=term.get("compare", DEFAULT_VALUE_COMPARATOR),
        )

    def comparison(self) -> Comparison:
        return (
            ComparisonBuilder.create()
            .set_value_extractor(EXTRACTOR_FACTORIES[self.source](self.field))
            .set_value_comparator(VALUE_COMPARATORS[self.compare])
            .set_sort_ascending(self.ascending)
            .build()
        )


def _parse_term(raw: str, *, source: str, position: int) -> OrderTerm:
    tokens = raw.split()
    if not tokens:
        raise ConfigError(f"Empty ORDER BY term at position {position}")
    if len(tokens) > 2:
        raise ConfigError(f"Unexpected tokens in ORDER BY term {raw.strip()!r}")

    ascending = True
    if len(tokens) == 2:
        direction = tokens[1].lower()
        if direction not in (ASCENDING, DESCENDING):
            raise ConfigError(f"Invalid ORDER BY direction {tokens[1]!r} in term {raw.strip()!r}")
        ascending = direction == ASCENDING
    return OrderTerm(field=tokens[0], source=source, ascending=ascending)


def parse_order_by(expression: str, *, source: str = DEFAULT_SOURCE) -> list[OrderTerm]:
    """Parse ``"price asc, name desc"`` into order terms.

    Direction words are case-insensitive and default to ascending. Every
    field is read with the same ``source`` (``method``, ``attribute`` or
    ``key``).
    """
    if source not in EXTRACTOR_SOURCES:
        raise ConfigError(f"Invalid ORDER BY source: {source!r}")
    if not expression or not expression.strip():
        raise ConfigError("ORDER BY expression is empty")
    return [
        _parse_term(raw, source=source, position=position)
        for position, raw in enumerate(expression.split(","))
    ]


def build_comparison(terms: Iterable[OrderTerm]) -> Comparison:
    return tie_breaker(*(term.comparison() for term in terms))


def order_by(expression: str, *, source: str = DEFAULT_SOURCE) -> Comparison:
    return build_comparison(parse_order_by(expression, source=source))
