"""Application factory for the GSTCalc backend."""

from __future__ import annotations

import logging
import os
from warnings import warn

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest

from gstcalc.backend.config.rate_config import ConfigurationError
from gstcalc.backend.version import get_project_version

from .errors import InvalidArgument
from .http import ProblemResponse

ALLOWED_ORIGINS_ENV = "GSTCALC_ALLOWED_ORIGINS"

logger = logging.getLogger(__name__)


def _parse_allowed_origins(raw: str | None) -> set[str]:
    """Convert an environment variable into a normalised set of origins."""

    if not raw:
        return set()

    return {origin.strip() for origin in raw.split(",") if origin.strip()}


def create_app() -> Flask:
    """Create and configure the Flask application instance."""

    # Blueprints import the service layer, which imports this package.
    from .routes import register_routes
    from .services import get_default_calculator

    app = Flask(__name__)

    allowed_origins = _parse_allowed_origins(os.getenv(ALLOWED_ORIGINS_ENV))
    if not allowed_origins:
        warn(
            "No allowed origins configured; cross-origin requests will be rejected.",
            stacklevel=1,
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": sorted(allowed_origins)}},
        supports_credentials=False,
        methods=["GET", "OPTIONS", "POST"],
        allow_headers=["Content-Type"],
    )

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        categories = list(get_default_calculator().get_gst_rates())
        return jsonify(
            {"status": "ok", "version": get_project_version(), "categories": categories}
        )

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        logger.warning("Rejected malformed request: %s", message)
        return ProblemResponse("bad_request", status=400, message=message).to_response()

    @app.errorhandler(InvalidArgument)
    def handle_invalid_argument(error: InvalidArgument):
        """Surface calculator argument errors with their kind and parameter."""

        logger.warning("Rejected calculation input: %s", error)
        return ProblemResponse.from_argument_error(error).to_response()

    @app.errorhandler(ConfigurationError)
    def handle_configuration_error(error: ConfigurationError):
        logger.error("Rate configuration is invalid: %s", error)
        return ProblemResponse(
            "configuration_error", status=500, message=str(error)
        ).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Gracefully surface domain validation errors to clients."""

        return ProblemResponse(
            "validation_error", status=400, message=str(error)
        ).to_response()

    return app


__all__ = ["create_app"]
