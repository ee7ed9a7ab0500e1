"""FastAPI adapter – feature flag and health routers."""
from __future__ import annotations

from typing import Annotated, Any, Awaitable, Callable

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from flagengine.adapters.fastapi.schemas import (
    CreateFlagRequest,
    EvaluateRequest,
    EvaluateResponse,
    FlagView,
    OverrideRequest,
    UpdateFlagRequest,
)
from flagengine.application.feature_flags import (
    EvaluationContext,
    FeatureFlagService,
    OverrideKind,
)
from flagengine.observability.logging import get_logger

logger = get_logger(__name__)

ReadinessCheck = Callable[[], Awaitable[bool]]


def get_flag_service(request: Request) -> FeatureFlagService:
    """Dependency: the :class:`FeatureFlagService` stored on ``app.state``."""
    return request.app.state.flag_service


FlagServiceDep = Annotated[FeatureFlagService, Depends(get_flag_service)]

_OVERRIDE_SEGMENTS: dict[OverrideKind, str] = {
    OverrideKind.USER: "users",
    OverrideKind.GROUP: "groups",
    OverrideKind.REGION: "regions",
}


def _no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _add_override_routes(router: APIRouter, kind: OverrideKind) -> None:
    path = f"/{{name}}/{_OVERRIDE_SEGMENTS[kind]}/{{target_id}}"

    async def set_override(
        name: str, target_id: str, body: OverrideRequest, service: FlagServiceDep
    ) -> Response:
        await service.set_override(kind, name, target_id, body.is_enabled)
        return _no_content()

    async def remove_override(name: str, target_id: str, service: FlagServiceDep) -> Response:
        await service.remove_override(kind, name, target_id)
        return _no_content()

    router.add_api_route(
        path,
        set_override,
        methods=["PUT"],
        status_code=status.HTTP_204_NO_CONTENT,
        name=f"set_{kind.value}_override",
        response_class=Response,
    )
    router.add_api_route(
        path,
        remove_override,
        methods=["DELETE"],
        status_code=status.HTTP_204_NO_CONTENT,
        name=f"remove_{kind.value}_override",
        response_class=Response,
    )


def FeatureFlagRouter(tags: list[str] | None = None) -> APIRouter:
    """Return the ``/flags`` router.

    The service is resolved per request through :func:`get_flag_service`;
    domain errors are turned into HTTP responses by
    :class:`~flagengine.adapters.fastapi.exception_mapper.FastAPIExceptionMapper`.
    """
    router = APIRouter(prefix="/flags", tags=tags or ["flags"])

    @router.get("", response_model=list[FlagView])
    async def list_flags(service: FlagServiceDep) -> list[FlagView]:
        return [FlagView.from_flag(flag) for flag in await service.get_all()]

    @router.get("/{name}", response_model=FlagView)
    async def get_flag(name: str, service: FlagServiceDep) -> FlagView:
        return FlagView.from_flag(await service.get(name))

    @router.post("", response_model=FlagView, status_code=status.HTTP_201_CREATED)
    async def create_flag(
        body: CreateFlagRequest, request: Request, response: Response, service: FlagServiceDep
    ) -> FlagView:
        flag = await service.create(body.name, body.is_enabled, body.description)
        response.headers["Location"] = str(request.url_for("get_flag", name=flag.name))
        return FlagView.from_flag(flag)

    @router.put(
        "/{name}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
    )
    async def update_flag(name: str, body: UpdateFlagRequest, service: FlagServiceDep) -> Response:
        await service.update_global_state(name, body.is_enabled)
        return _no_content()

    @router.delete(
        "/{name}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
    )
    async def delete_flag(name: str, service: FlagServiceDep) -> Response:
        await service.delete(name)
        return _no_content()

    @router.post("/{name}/evaluate", response_model=EvaluateResponse)
    async def evaluate_flag(
        name: str, service: FlagServiceDep, body: EvaluateRequest | None = None
    ) -> EvaluateResponse:
        context = body.to_context() if body is not None else EvaluationContext()
        is_enabled = await service.evaluate(name, context)
        return EvaluateResponse(flag_name=name, is_enabled=is_enabled)

    for kind in OverrideKind:
        _add_override_routes(router, kind)

    return router


def FastAPIHealthRouter(
    path: str = "/health",
    readiness_checks: list[ReadinessCheck] | None = None,
    tags: list[str] | None = None,
) -> APIRouter:
    """Return a liveness + readiness health-check router.

    Liveness is at ``{path}/live``, readiness at ``{path}/ready``.  All
    readiness checks must return ``True`` for a 200; otherwise 503.
    """
    router = APIRouter(tags=tags or ["ops"])
    checks = readiness_checks or []

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness() -> Any:
        results: dict[str, bool] = {}
        all_ok = True
        for check in checks:
            name = getattr(check, "__name__", repr(check))
            try:
                ok = await check()
            except Exception as exc:  # noqa: BLE001
                logger.warning("health.check_failed", check=name, error=repr(exc))
                ok = False
            results[name] = ok
            if not ok:
                all_ok = False

        status_code = 200 if all_ok else 503
        return JSONResponse(
            status_code=status_code,
            content={"status": "ok" if all_ok else "degraded", "checks": results},
        )

    return router


__all__ = ["FastAPIHealthRouter", "FeatureFlagRouter", "ReadinessCheck", "get_flag_service"]
