"""FastAPI adapter – FastAPICorrelationIdMiddleware."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from flagengine.observability.correlation import CorrelationContext, RequestContext

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send


def _first_header(raw_headers: Iterable[tuple[bytes, bytes]], names: tuple[bytes, ...]) -> str | None:
    found: dict[bytes, str] = {}
    for key, value in raw_headers:
        key = key.lower()
        if key in names and key not in found:
            text = value.decode("latin-1").strip()
            if text:
                found[key] = text
    return next((found[name] for name in names if name in found), None)


class FastAPICorrelationIdMiddleware:
    """Pure ASGI middleware that gives every HTTP request a correlation id.

    The id is taken from ``X-Correlation-ID``, then from any of
    ``fallback_headers``, and otherwise generated.  It is stored in
    :class:`CorrelationContext` for the request's lifetime (loggers and the
    exception mapper read it there) and echoed on the response.
    """

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = "X-Correlation-ID",
        fallback_headers: tuple[str, ...] = ("X-Request-ID",),
    ) -> None:
        self.app = app
        self._header = header_name.lower().encode("latin-1")
        self._lookup = (self._header, *(h.lower().encode("latin-1") for h in fallback_headers))

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        ctx = RequestContext.new()
        supplied = _first_header(scope.get("headers", []), self._lookup)
        if supplied is not None:
            ctx = RequestContext(correlation_id=supplied)
        CorrelationContext.set(ctx)
        echoed = (self._header, ctx.correlation_id.encode("latin-1"))

        async def send_with_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                message = {**message, "headers": [*message.get("headers", []), echoed]}
            await send(message)

        await self.app(scope, receive, send_with_id)


__all__ = ["FastAPICorrelationIdMiddleware"]
