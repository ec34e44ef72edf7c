"""Minimal strict schemas for order profile validation."""

from __future__ import annotations

from comparators.common.constants import DIRECTIONS, EXTRACTOR_SOURCES
from comparators.common.errors import ConfigError
from comparators.core.values import VALUE_COMPARATORS

TERM_REQUIRED_KEYS = {"field"}
TERM_KNOWN_KEYS = {"field", "source", "direction", "compare"}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_choice(value, choices, ctx: str) -> None:
    if value not in choices:
        choices_str = ", ".join(sorted(choices))
        raise ConfigError(f"Invalid {ctx}: {value!r} (expected one of {choices_str})")


def validate_order_term(term: dict, ctx: str, *, allow_unknown: bool = False) -> dict:
    if not isinstance(term, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    _assert_required_keys(term, TERM_REQUIRED_KEYS, ctx)
    _assert_no_unknown_keys(term, TERM_KNOWN_KEYS, ctx, allow_unknown)

    if not isinstance(term["field"], str) or not term["field"]:
        raise ConfigError(f"{ctx}.field must be a non-empty string")
    if "source" in term:
        _assert_choice(term["source"], EXTRACTOR_SOURCES, f"{ctx}.source")
    if "direction" in term:
        _assert_choice(term["direction"], DIRECTIONS, f"{ctx}.direction")
    if "compare" in term:
        _assert_choice(term["compare"], VALUE_COMPARATORS, f"{ctx}.compare")
    return term


def validate_profiles_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    if not isinstance(cfg, dict):
        raise ConfigError("order profiles document must be a mapping")
    _assert_required_keys(cfg, {"profiles"}, "order profiles")
    _assert_no_unknown_keys(cfg, {"profiles"}, "order profiles", allow_unknown)
    if not isinstance(cfg["profiles"], dict) or not cfg["profiles"]:
        raise ConfigError("profiles must be a non-empty mapping")

    for name, terms in cfg["profiles"].items():
        if not isinstance(terms, list) or not terms:
            raise ConfigError(f"profiles.{name} must be a non-empty list of terms")
        for idx, term in enumerate(terms):
            validate_order_term(term, f"profiles.{name}[{idx}]", allow_unknown=allow_unknown)

    return cfg
