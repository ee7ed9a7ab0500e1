"""Kernel errors – BaseError, the root every flag engine error derives from."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """An error the flag engine raises on purpose.

    Every instance carries a stable ``code`` slug (the class's
    ``default_code`` unless one is passed), a human ``message`` and a
    JSON-safe ``detail`` dict.  :meth:`to_dict` is what the HTTP adapter
    sends back to clients; ``cause`` is kept for logs only.
    """

    default_code: ClassVar[str] = "error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self, *, include_cause: bool = True) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if include_cause and self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
