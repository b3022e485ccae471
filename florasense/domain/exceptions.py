"""Centralized exception hierarchy for FloraSense.

All domain and service exceptions inherit from :class:`FloraSenseError` so
that callers can catch a single base class when they need a broad safety net,
yet still match on specific subclasses where narrower handling is appropriate.

Blueprint-level error handling (see ``florasense/utils/http.safe_route``) maps
these to the correct HTTP status codes automatically.

Hierarchy
---------
::

    FloraSenseError (base, maps to 500)
    ├── ValidationError          (400, bad input from caller)
    │   └── EncodingError        (400, observation cannot be encoded)
    ├── NotFoundError            (404, entity does not exist)
    ├── ServiceError             (500, business-logic failure)
    │   └── UntrainedModelError  (503, prediction before training)
    └── ConfigurationError       (500, missing / invalid config or data)
"""

from __future__ import annotations


class FloraSenseError(Exception):
    """Base exception for all FloraSense application errors.

    Parameters
    ----------
    message:
        Human-readable description (logged server-side, **not** leaked to
        the HTTP client unless the exception class opts in).
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    http_status: int = 500

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


# ── Client errors (4xx) ──────────────────────────────────────────────


class ValidationError(FloraSenseError):
    """Caller supplied invalid or incomplete input (HTTP 400)."""

    http_status: int = 400


class EncodingError(ValidationError):
    """Observation field is missing, non-numeric, or outside its lookup (HTTP 400)."""

    http_status: int = 400


class NotFoundError(FloraSenseError):
    """Requested entity does not exist (HTTP 404)."""

    http_status: int = 404


# ── Server errors (5xx) ──────────────────────────────────────────────


class ServiceError(FloraSenseError):
    """Business-logic failure in a service method (HTTP 500)."""

    http_status: int = 500


class UntrainedModelError(ServiceError):
    """Prediction requested before the classifiers finished training (HTTP 503)."""

    http_status: int = 503


class ConfigurationError(FloraSenseError):
    """Missing or invalid configuration, training data or class set (HTTP 500)."""

    http_status: int = 500
