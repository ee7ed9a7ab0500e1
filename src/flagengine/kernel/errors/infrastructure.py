"""Kernel errors – InfrastructureError."""

from __future__ import annotations

from flagengine.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """A backing store or other I/O dependency failed; served as 503."""

    default_code = "infrastructure_error"


__all__ = ["InfrastructureError"]
