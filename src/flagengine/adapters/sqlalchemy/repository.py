"""SQLAlchemy adapter – SqlAlchemyFeatureFlagRepository."""
from __future__ import annotations

import contextlib
from typing import Callable, Iterator

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from flagengine.adapters.sqlalchemy.models import FlagRow
from flagengine.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork
from flagengine.application.feature_flags import (
    FeatureFlag,
    FeatureFlagRepository,
    FlagAlreadyExistsError,
    FlagNotFoundError,
    from_record,
    to_record,
)
from flagengine.kernel.errors import InfrastructureError


@contextlib.contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except OperationalError as exc:
        raise InfrastructureError(
            "Flag store unavailable",
            detail={"operation": operation},
            cause=exc,
        ) from exc


class SqlAlchemyFeatureFlagRepository(FeatureFlagRepository):
    """Flag store on an async SQLAlchemy engine.

    Each call runs in its own session; writes run inside a
    :class:`SqlAlchemyUnitOfWork` so a flag and its overrides are committed
    (or rolled back) together.  A duplicate flag name surfaces as
    :class:`FlagAlreadyExistsError`; operational driver failures (lost
    connection, locked or missing tables) as :class:`InfrastructureError`.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_by_name(self, name: str) -> FeatureFlag | None:
        with _store_errors("get_by_name"):
            async with self._session_factory() as session:
                row = await session.get(FlagRow, name)
                return from_record(row.to_record()) if row is not None else None

    async def get_all(self) -> list[FeatureFlag]:
        with _store_errors("get_all"):
            async with self._session_factory() as session:
                result = await session.execute(select(FlagRow).order_by(FlagRow.name))
                return [from_record(row.to_record()) for row in result.scalars().all()]

    async def add(self, flag: FeatureFlag) -> None:
        with _store_errors("add"):
            try:
                async with SqlAlchemyUnitOfWork(self._session_factory) as uow:
                    uow.session.add(FlagRow.from_record(to_record(flag)))
            except IntegrityError as exc:
                raise FlagAlreadyExistsError(flag.name, cause=exc) from exc

    async def update(self, flag: FeatureFlag) -> None:
        with _store_errors("update"):
            async with SqlAlchemyUnitOfWork(self._session_factory) as uow:
                row = await uow.session.get(FlagRow, flag.name)
                if row is None:
                    raise FlagNotFoundError(flag.name)
                row.apply(to_record(flag))

    async def delete(self, name: str) -> None:
        with _store_errors("delete"):
            async with SqlAlchemyUnitOfWork(self._session_factory) as uow:
                row = await uow.session.get(FlagRow, name)
                if row is not None:
                    await uow.session.delete(row)

    async def exists(self, name: str) -> bool:
        with _store_errors("exists"):
            async with self._session_factory() as session:
                result = await session.execute(select(FlagRow.name).where(FlagRow.name == name).limit(1))
                return result.scalar_one_or_none() is not None


__all__ = ["SqlAlchemyFeatureFlagRepository"]
