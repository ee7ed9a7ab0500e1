"""Kernel errors – ApplicationError."""

from __future__ import annotations

from flagengine.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Raised while assembling the engine (settings, wiring), not while serving a request."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
