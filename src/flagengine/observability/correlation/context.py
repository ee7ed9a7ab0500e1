"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Per-request values every log line and error body should carry."""

    correlation_id: str

    @classmethod
    def new(cls) -> RequestContext:
        return cls(correlation_id=str(uuid4()))


_current: ContextVar[RequestContext | None] = ContextVar("flagengine_request_context", default=None)


class CorrelationContext:
    """Task-local holder for the active :class:`RequestContext`.

    Backed by a ``ContextVar``, so concurrent requests on one event loop
    never see each other's ids.
    """

    @staticmethod
    def set(ctx: RequestContext) -> None:
        _current.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return _current.get()

    @staticmethod
    def clear() -> None:
        _current.set(None)


__all__ = ["CorrelationContext", "RequestContext"]
