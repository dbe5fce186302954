#!/usr/bin/env python3
"""
Maple Search Configuration
==========================
Centralized tuning knobs for the smart search core and the launcher.
Defaults can be overridden from the environment or a .env file.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import find_dotenv, load_dotenv


class ConfigError(ValueError):
    """Raised when an environment override cannot be parsed."""


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for search ranking and the launcher input."""
    debounce_ms: int = 300
    relevance_threshold: float = 0.3
    max_knowledge_results: int = 5
    max_visible_results: int = 5
    min_fallback_query_length: int = 2

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


# ============================================================
# ENVIRONMENT OVERRIDES
# ============================================================

ENV_OVERRIDES = {
    "MAPLE_DEBOUNCE_MS": ("debounce_ms", int),
    "MAPLE_RELEVANCE_THRESHOLD": ("relevance_threshold", float),
    "MAPLE_MAX_RESULTS": ("max_knowledge_results", int),
    "MAPLE_MAX_VISIBLE": ("max_visible_results", int),
    "MAPLE_MIN_FALLBACK_LENGTH": ("min_fallback_query_length", int),
}


def load_config(env_file: Optional[str] = None) -> SearchConfig:
    """
    Build a SearchConfig from defaults plus environment overrides.

    Args:
        env_file: Optional path to a .env file (default: nearest .env above cwd)

    Raises:
        ConfigError: if an override is not a valid number or is negative
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    overrides = {}
    for env_name, (field_name, cast) in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None or raw.strip() == "":
            continue
        try:
            value = cast(raw.strip())
        except ValueError as e:
            raise ConfigError(f"{env_name}={raw!r} is not a valid {cast.__name__}") from e
        if value < 0:
            raise ConfigError(f"{env_name} must not be negative (got {value})")
        overrides[field_name] = value

    return replace(SearchConfig(), **overrides)


# Active configuration
SEARCH_CONFIG = load_config()
