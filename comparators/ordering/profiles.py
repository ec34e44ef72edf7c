"""Named ORDER BY profiles loaded from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from comparators.common.config_loader import load_yaml_with_overlay
from comparators.common.errors import ConfigError
from comparators.common.logging import get_logger, log_event
from comparators.common.schema import validate_profiles_config
from comparators.core.builder import Comparison
from comparators.ordering.order_by import OrderTerm, build_comparison

logger = get_logger("profiles")


@dataclass(frozen=True)
class ProfileBundle:
    profiles: dict[str, tuple[OrderTerm, ...]]

    def terms(self, name: str) -> tuple[OrderTerm, ...]:
        try:
            return self.profiles[name]
        except KeyError:
            known = ", ".join(sorted(self.profiles))
            raise ConfigError(f"Unknown order profile {name!r} (known: {known})") from None

    def comparison(self, name: str) -> Comparison:
        return build_comparison(self.terms(name))


def load_order_profiles(
    path: Path,
    *,
    overlay_path: Path | None = None,
    allow_unknown: bool = False,
) -> ProfileBundle:
    cfg = validate_profiles_config(
        load_yaml_with_overlay(path, overlay_path),
        allow_unknown=allow_unknown,
    )

    profiles = {}
    for name, raw_terms in cfg["profiles"].items():
        profiles[name] = tuple(OrderTerm.from_dict(term) for term in raw_terms)
        log_event(
            logger,
            f"order profile {name} loaded",
            level=logging.INFO,
            event="PROFILE_LOADED",
            profile=name,
            terms=len(raw_terms),
        )
    return ProfileBundle(profiles=profiles)
