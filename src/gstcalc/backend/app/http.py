"""JSON problem payloads returned by the error handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flask import jsonify

from .errors import InvalidArgument


@dataclass(frozen=True)
class ProblemResponse:
    """An error kind, its HTTP status and any extra JSON fields."""

    error: str
    status: int
    message: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_argument_error(cls, error: InvalidArgument) -> ProblemResponse:
        """Describe a rejected calculation argument as a 400 payload."""

        payload = error.as_dict()
        return cls(
            error=payload.pop("error"),
            status=400,
            message=payload.pop("message"),
            details=payload,
        )

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, **self.details}
        if self.message:
            payload["message"] = self.message
        return payload

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


__all__ = ["ProblemResponse"]
