import pytest

from comparators.core.values import (
    VALUE_COMPARATORS,
    casefold_compare,
    identity,
    loose_compare,
    natural_compare,
)


def test_identity_returns_argument():
    marker = object()
    assert identity(marker) is marker


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (1, 2, -1),
        (2, 1, 1),
        (3, 3, 0),
        (1, 1.0, 0),
        ("apple", "banana", -1),
        ((1, "b"), (1, "a"), 1),
    ],
)
def test_natural_compare(a, b, expected):
    assert natural_compare(a, b) == expected


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("10", 9, 1),
        (9, "10", -1),
        ("1e1", 10, 0),
        (" 2.5 ", "2.50", 0),
        (True, 1, 0),
        ("abc", "abd", -1),
        ("abc", 5, 1),
        (None, None, 0),
    ],
)
def test_loose_compare_coerces_numeric_strings(a, b, expected):
    assert loose_compare(a, b) == expected


def test_natural_compare_does_not_coerce_strings():
    # "10" < "9" as text
    assert natural_compare("10", "9") == -1
    assert loose_compare("10", "9") == 1


def test_casefold_compare_ignores_case():
    assert casefold_compare("b", "B") == 0
    assert casefold_compare("Straße", "STRASSE") == 0
    assert casefold_compare("a", "B") == -1


def test_value_comparator_registry_names():
    assert set(VALUE_COMPARATORS) == {"natural", "loose", "casefold"}
    assert VALUE_COMPARATORS["natural"] is natural_compare
