"""FastAPI adapter – application factory.

Wires the layers together::

    HTTP → FeatureFlagService → CachedFeatureFlagRepository → <store repository>

When no repository is passed, a :class:`SqlAlchemyFeatureFlagRepository`
is built from ``settings.database_url``; its tables are created on startup
(unless ``create_schema`` is off) and the engine is disposed on shutdown.
"""
from __future__ import annotations

import contextlib
from typing import AsyncIterator

from fastapi import FastAPI

from flagengine import __version__
from flagengine.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from flagengine.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware
from flagengine.adapters.fastapi.routers import FastAPIHealthRouter, FeatureFlagRouter
from flagengine.adapters.sqlalchemy import SqlAlchemyFeatureFlagRepository, SqlAlchemySessionFactory
from flagengine.application.cache import CachedFeatureFlagRepository, CacheStore, InMemoryCacheStore
from flagengine.application.feature_flags import FeatureFlagRepository, FeatureFlagService
from flagengine.config import EnvSettingsLoader, FlagEngineSettings
from flagengine.observability.logging import get_logger

logger = get_logger(__name__)

_READINESS_PROBE = "__readiness_probe__"


def create_app(
    settings: FlagEngineSettings | None = None,
    *,
    repository: FeatureFlagRepository | None = None,
    cache: CacheStore | None = None,
) -> FastAPI:
    """Build the flag engine API.

    Parameters
    ----------
    settings:
        Runtime settings; loaded from ``FLAGENGINE_*`` env vars when omitted.
    repository:
        Store repository to wrap with the cache.  Defaults to SQLAlchemy.
    cache:
        Cache store shared by all requests.  Defaults to an
        :class:`InMemoryCacheStore` bounded by ``settings.cache_max_entries``.
    """
    settings = settings or EnvSettingsLoader().load(FlagEngineSettings)

    session_factory: SqlAlchemySessionFactory | None = None
    if repository is None:
        session_factory = SqlAlchemySessionFactory(settings.database_url)
        repository = SqlAlchemyFeatureFlagRepository(session_factory)

    cached = CachedFeatureFlagRepository(
        repository,
        cache if cache is not None else InMemoryCacheStore(max_entries=settings.cache_max_entries),
        ttl=settings.cache_ttl_seconds,
    )

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
        if session_factory is not None and settings.create_schema:
            await session_factory.create_schema()
        logger.info("flagengine.started", version=__version__, api_prefix=settings.api_prefix)
        try:
            yield
        finally:
            if session_factory is not None:
                await session_factory.dispose()
            logger.info("flagengine.stopped")

    async def store_reachable() -> bool:
        await repository.exists(_READINESS_PROBE)
        return True

    app = FastAPI(title="Feature Flag Engine", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.flag_service = FeatureFlagService(cached)
    app.add_middleware(FastAPICorrelationIdMiddleware)
    FastAPIExceptionMapper().register(app)
    app.include_router(FeatureFlagRouter(), prefix=settings.api_prefix)
    app.include_router(FastAPIHealthRouter(readiness_checks=[store_reachable]))
    return app


__all__ = ["create_app"]
