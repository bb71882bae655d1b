"""Pydantic models describing the public calculation surface."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictFloat,
    StrictInt,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

from gstcalc.backend.app.errors import InvalidArgument, InvalidType

__all__ = [
    "ForwardFormatted",
    "ForwardRequest",
    "ForwardResult",
    "ReverseFormatted",
    "ReverseRequest",
    "ReverseResult",
    "invalid_argument_from_validation_error",
]


class _CamelModel(BaseModel):
    """Frozen model exposing snake_case attributes and camelCase payloads."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def as_dict(self) -> dict[str, Any]:
        """Return the camelCase payload published to API consumers."""

        return self.model_dump(mode="python", by_alias=True)


class ForwardFormatted(_CamelModel):
    gst_amount: str
    total_price: str


class ReverseFormatted(_CamelModel):
    base_price: str
    gst_amount: str


class ForwardResult(_CamelModel):
    """Outcome of adding GST on top of a base price."""

    base_price: float
    gst_rate: float
    gst_amount: float
    total_price: float
    formatted: ForwardFormatted


class ReverseResult(_CamelModel):
    """Outcome of extracting GST from a tax-inclusive total."""

    total_price: float
    gst_rate: float
    base_price: float
    gst_amount: float
    formatted: ReverseFormatted


Number = StrictInt | StrictFloat


class _CalculationRequest(_CamelModel):
    """Shared request shape: a rate given directly or by category name."""

    # Incoming payloads use the published camelCase keys only.
    model_config = ConfigDict(populate_by_name=False)

    gst_rate: Number | None = None
    category: str | None = None

    @model_validator(mode="after")
    def _require_single_rate_source(self) -> _CalculationRequest:
        if self.gst_rate is None and self.category is None:
            raise ValueError("is required unless category is given")
        if self.gst_rate is not None and self.category is not None:
            raise ValueError("cannot be combined with category")
        return self


class ForwardRequest(_CalculationRequest):
    """JSON payload accepted by the forward calculation endpoint."""

    base_price: Number


class ReverseRequest(_CalculationRequest):
    """JSON payload accepted by the reverse calculation endpoint."""

    total_price: Number


_NUMBER_ERRORS = {"int_type", "float_type", "int_from_float"}


def invalid_argument_from_validation_error(error: ValidationError) -> InvalidArgument:
    """Translate the first pydantic issue into the calculator's error taxonomy."""

    issues = error.errors()
    if not issues:  # pragma: no cover - pydantic always reports an issue
        return InvalidArgument("payload", str(error))

    issue = issues[0]
    # Union members append their own tag (``int``/``float``) to the location.
    location = [
        str(part)
        for part in issue.get("loc", ())
        if str(part) not in {"int", "float"}
    ]
    parameter = location[0] if location else "gstRate"
    error_type = issue.get("type")

    if error_type in _NUMBER_ERRORS:
        return InvalidType(parameter, "must be a number")
    if error_type == "string_type":
        return InvalidType(parameter, "must be a string")
    if error_type == "missing":
        return InvalidArgument(parameter, "is required")
    if error_type == "extra_forbidden":
        return InvalidArgument(parameter, "is not a recognised field")

    message = issue.get("msg", "Invalid value")
    return InvalidArgument(parameter, message.removeprefix("Value error, "))
