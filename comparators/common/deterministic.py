"""Helpers for deterministic ordering."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")


def stable_sorted(items: Iterable[T], comparison: Callable[[Any, Any], int]) -> list[T]:
    # sorted() is stable, so elements the comparison ties keep input order.
    return sorted(items, key=cmp_to_key(comparison))
