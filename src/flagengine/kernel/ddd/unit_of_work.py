"""Kernel DDD – UnitOfWork port."""

from __future__ import annotations

import abc
from types import TracebackType


class UnitOfWork(abc.ABC):
    """One transaction around a block of repository writes.

    ``async with uow:`` commits when the block exits normally and rolls back
    when it raises; the exception is never suppressed.
    """

    @abc.abstractmethod
    async def commit(self) -> None: ...

    @abc.abstractmethod
    async def rollback(self) -> None: ...

    async def __aenter__(self) -> UnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is None:
            await self.commit()
        else:
            await self.rollback()


__all__ = ["UnitOfWork"]
