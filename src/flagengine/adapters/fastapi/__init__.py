"""FastAPI adapter – app factory, flag/health routers, exception mapper, middleware."""
from flagengine.adapters.fastapi.app import create_app
from flagengine.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from flagengine.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware
from flagengine.adapters.fastapi.routers import (
    FastAPIHealthRouter,
    FeatureFlagRouter,
    get_flag_service,
)

__all__ = [
    "FastAPICorrelationIdMiddleware",
    "FastAPIExceptionMapper",
    "FastAPIHealthRouter",
    "FeatureFlagRouter",
    "create_app",
    "get_flag_service",
]
