"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from flagengine.kernel.errors import (
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from flagengine.observability.correlation import CorrelationContext
from flagengine.observability.logging import get_logger

logger = get_logger(__name__)


def _correlation_id() -> str | None:
    ctx = CorrelationContext.get()
    return ctx.correlation_id if ctx is not None else None


class FastAPIExceptionMapper:
    """Turn flag engine errors into JSON responses.

    Error body::

        {"code": "flag_not_found", "message": "...", "detail": {...}, "correlation_id": "..."}

    ``ValidationError`` bodies also carry ``errors``.  Anything that is not a
    :class:`BaseError` becomes an opaque 500 and is logged with its traceback.
    """

    def __init__(self) -> None:
        # first match wins, so subclasses go before their bases
        self._statuses: list[tuple[type[BaseError], int]] = [
            (ValidationError, 400),
            (NotFoundError, 404),
            (ConflictError, 409),
            (DomainError, 422),
            (InfrastructureError, 503),
        ]

    def status_for(self, exc: BaseError) -> int:
        for exc_type, status in self._statuses:
            if isinstance(exc, exc_type):
                return status
        return 500

    def register(self, app: FastAPI) -> None:
        app.add_exception_handler(BaseError, self._handle_known)
        app.add_exception_handler(Exception, self._handle_unexpected)

    async def _handle_known(self, request: Request, exc: BaseError) -> JSONResponse:
        status = self.status_for(exc)
        log = logger.error if status >= 500 else logger.info
        log("http.error", path=request.url.path, code=exc.code, status=status)
        body: dict[str, Any] = exc.to_dict(include_cause=False)
        body["correlation_id"] = _correlation_id()
        return JSONResponse(status_code=status, content=body)

    async def _handle_unexpected(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "http.unhandled_error",
            path=request.url.path,
            error_type=type(exc).__name__,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={
                "code": "internal_error",
                "message": "Internal server error",
                "correlation_id": _correlation_id(),
            },
        )


__all__ = ["FastAPIExceptionMapper"]
