"""Error taxonomy raised by the GST calculation core."""

from __future__ import annotations

from typing import Any


class InvalidArgument(ValueError):
    """Raised when a calculation argument violates its contract."""

    kind = "invalid_argument"

    def __init__(self, parameter: str, reason: str) -> None:
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"{parameter} {reason}")

    def as_dict(self) -> dict[str, Any]:
        """Return a serialisable description of the failure."""

        return {"error": self.kind, "parameter": self.parameter, "message": str(self)}


class InvalidType(InvalidArgument, TypeError):
    """An argument is not a real number."""

    kind = "invalid_type"


class OutOfRange(InvalidArgument):
    """A numeric argument falls outside its declared bounds."""

    kind = "out_of_range"


__all__ = ["InvalidArgument", "InvalidType", "OutOfRange"]
