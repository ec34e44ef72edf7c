from pathlib import Path

import pytest

from comparators.common.config_loader import load_yaml_with_overlay
from comparators.common.errors import ConfigError
from comparators.ordering.order_by import OrderTerm
from comparators.ordering.profiles import load_order_profiles

BASE_YAML = """profiles:
  menu:
    - field: get_price
      source: method
    - field: name
      source: attribute
      direction: desc
  by_age:
    - field: age
"""


def _write_base(tmp_path: Path) -> Path:
    base = tmp_path / "profiles.yml"
    base.write_text(BASE_YAML, encoding="utf-8")
    return base


def test_load_order_profiles_builds_terms(tmp_path: Path):
    bundle = load_order_profiles(_write_base(tmp_path))

    assert set(bundle.profiles) == {"menu", "by_age"}
    assert bundle.terms("menu") == (
        OrderTerm(field="get_price", source="method"),
        OrderTerm(field="name", source="attribute", ascending=False),
    )
    assert bundle.terms("by_age") == (OrderTerm(field="age"),)


def test_load_order_profiles_applies_overlay_values(tmp_path: Path):
    overlay = tmp_path / "overlay.yml"
    overlay.write_text(
        """profiles:
  by_age:
    - field: age
      direction: desc
  by_name:
    - field: name
      compare: casefold
""",
        encoding="utf-8",
    )

    bundle = load_order_profiles(_write_base(tmp_path), overlay_path=overlay)

    assert bundle.terms("by_age") == (OrderTerm(field="age", ascending=False),)
    assert bundle.terms("by_name") == (OrderTerm(field="name", compare="casefold"),)
    assert len(bundle.terms("menu")) == 2


def test_load_yaml_ignores_missing_and_empty_overlay(tmp_path: Path):
    base = _write_base(tmp_path)
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")

    expected = load_yaml_with_overlay(base)
    assert load_yaml_with_overlay(base, tmp_path / "absent.yml") == expected
    assert load_yaml_with_overlay(base, empty) == expected


def test_load_yaml_missing_base_raises_config_error(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_yaml_with_overlay(tmp_path / "nope.yml")


def test_unknown_profile_raises_config_error(tmp_path: Path):
    bundle = load_order_profiles(_write_base(tmp_path))
    with pytest.raises(ConfigError, match="by_height"):
        bundle.comparison("by_height")


def test_invalid_profile_file_raises_config_error(tmp_path: Path):
    bad = tmp_path / "bad.yml"
    bad.write_text("profiles:\n  menu:\n    - field: name\n      direction: sideways\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_order_profiles(bad)
