"""Pydantic models describing the GST rate table configuration."""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Published GST tiers; tables may add categories but never re-rate these.
FIXED_RATES: Mapping[str, float] = MappingProxyType(
    {"exempted": 0.0, "essential": 5.0, "standard": 18.0, "luxury": 40.0}
)
REQUIRED_CATEGORIES: tuple[str, ...] = tuple(FIXED_RATES)


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class RateTable(ImmutableModel):
    """Named GST tiers expressed as percentages of the base price."""

    currency: str = "INR"
    categories: Mapping[str, float] = Field(alias="rates")

    @field_validator("categories", mode="before")
    @classmethod
    def _coerce_categories(cls, value: Any) -> Mapping[str, float]:
        if not isinstance(value, Mapping):
            raise ConfigurationError("Rate categories must be provided as a mapping")

        coerced: dict[str, float] = {}
        for name, rate in value.items():
            key = str(name).strip().lower()
            if not key:
                raise ConfigurationError("Rate category names must not be blank")
            if key in coerced:
                raise ConfigurationError(f"Duplicate rate category '{key}'")
            if isinstance(rate, bool) or not isinstance(rate, int | float):
                raise ConfigurationError(f"Rate for '{key}' must be numeric")
            coerced[key] = float(rate)
        return coerced

    @model_validator(mode="after")
    def _validate_rates(self) -> RateTable:
        if self.currency != "INR":
            raise ConfigurationError("Only INR rate tables are supported")

        missing = [name for name in REQUIRED_CATEGORIES if name not in self.categories]
        if missing:
            raise ConfigurationError(
                f"Rate table is missing required categories: {', '.join(missing)}"
            )

        changed = [
            name
            for name, rate in FIXED_RATES.items()
            if self.categories[name] != rate
        ]
        if changed:
            expected = ", ".join(f"{name}={FIXED_RATES[name]:g}" for name in changed)
            raise ConfigurationError(f"Fixed GST categories cannot be re-rated: {expected}")

        for name, rate in self.categories.items():
            if not math.isfinite(rate) or rate < 0 or rate > 100:
                raise ConfigurationError(
                    f"Rate for '{name}' must be between 0 and 100, got {rate:g}"
                )
        return self

    def get_rate(self, category: str) -> float:
        """Return the rate for ``category`` (case-insensitive)."""

        return self.categories[category.strip().lower()]

    def as_dict(self) -> dict[str, float]:
        """Return a mutable copy of the category table."""

        return dict(self.categories)


__all__ = [
    "ConfigurationError",
    "FIXED_RATES",
    "ImmutableModel",
    "RateTable",
    "REQUIRED_CATEGORIES",
]
