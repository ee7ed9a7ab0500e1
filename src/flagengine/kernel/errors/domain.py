"""Kernel errors – rule violations raised by the flag domain and its use cases.

The HTTP adapter maps each branch to a status: validation → 400,
not found → 404, conflict → 409, any other :class:`DomainError` → 422.
"""

from __future__ import annotations

from typing import Any

from flagengine.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class ValidationError(DomainError):
    """Input rejected before any state changed.

    ``errors`` holds one ``{"field": ..., "message": ...}`` entry per
    offending field and is included in :meth:`to_dict`.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or [])

    def to_dict(self, *, include_cause: bool = True) -> dict[str, Any]:
        return {**super().to_dict(include_cause=include_cause), "errors": self.errors}


class InvalidArgumentError(ValidationError):
    """A single named argument is empty or malformed."""

    default_code = "invalid_argument"

    def __init__(self, argument: str, message: str, **kwargs: Any) -> None:
        super().__init__(message, errors=[{"field": argument, "message": message}], **kwargs)
        self.argument = argument


class NotFoundError(DomainError):
    """Lookup of ``resource`` (optionally by ``identifier``) came back empty."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        suffix = "" if identifier is None else f" '{identifier}'"
        super().__init__(f"{resource}{suffix} not found", **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The write would clash with state that already exists."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "InvalidArgumentError",
    "NotFoundError",
    "ValidationError",
]
