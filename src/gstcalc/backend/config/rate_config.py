"""Configuration loader for the GST rate table."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import REQUIRED_CATEGORIES, ConfigurationError, RateTable

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
RATES_FILE = CONFIG_DIRECTORY / "rates.yaml"
RATES_FILE_ENV = "GSTCALC_RATES_FILE"

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def resolve_rates_file() -> Path:
    """Return the rate table location, honouring ``GSTCALC_RATES_FILE``."""

    override = os.getenv(RATES_FILE_ENV, "").strip()
    if not override:
        return RATES_FILE

    candidate = Path(override).expanduser()
    if not candidate.is_file():
        logger.warning("Ignoring %s=%s: file does not exist", RATES_FILE_ENV, override)
        return RATES_FILE
    return candidate


def build_rate_table(raw: Mapping[str, Any]) -> RateTable:
    """Validate an in-memory rate mapping or full table payload."""

    payload: Mapping[str, Any] = raw if "rates" in raw else {"rates": raw}
    try:
        return RateTable.model_validate(payload)
    except ValidationError as error:
        raise ConfigurationError(f"Rate table validation failed: {error}") from error


def load_rate_table_from(path: Path) -> RateTable:
    """Load and validate a rate table from ``path`` without caching."""

    if not path.exists():
        raise FileNotFoundError(f"Rate table not found: {path}")

    logger.debug("Loading GST rate table from %s", path)
    return build_rate_table(_load_yaml(path))


@lru_cache(maxsize=1)
def load_rate_table() -> RateTable:
    """Load and cache the configured rate table."""

    return load_rate_table_from(resolve_rates_file())


def available_categories() -> tuple[str, ...]:
    """Return the configured category names in declaration order."""

    return tuple(load_rate_table().categories)


__all__ = [
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "RATES_FILE",
    "RATES_FILE_ENV",
    "REQUIRED_CATEGORIES",
    "RateTable",
    "available_categories",
    "build_rate_table",
    "load_rate_table",
    "load_rate_table_from",
    "resolve_rates_file",
]
