"""FastAPI adapter – ops (health/readiness) and flag-aware demo routers."""
from typing import Any

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from flag_responder.adapters.fastapi.deps import AppContextDep
from flag_responder.application.feature_flags import ANONYMOUS_USER, build_context, evaluate_flag_set, is_ready
from flag_responder.kernel.time import isoformat_z

ROOT_MESSAGE = "🚀 Microservicio Jenkins + ArgoCD + LaunchDarkly Demo"
NEW_UI_MESSAGE = "🎉 ¡Bienvenido a la Nueva UI!"
CLASSIC_UI_MESSAGE = "👋 Bienvenido a la UI Clásica"
NOT_CONFIGURED_MESSAGE = "LaunchDarkly no está configurado"


def OpsRouter(tags: list[str] | None = None) -> APIRouter:
    """Return the liveness (``/health``) and readiness (``/ready``) router."""
    router = APIRouter(tags=tags or ["ops"])

    @router.get("/health")
    async def health(ctx: AppContextDep) -> dict[str, Any]:
        """Liveness probe – always 200 while the process is up."""
        return {
            "status": "healthy",
            "uptime": ctx.uptime(),
            "timestamp": isoformat_z(ctx.clock.now()),
        }

    @router.get("/ready")
    async def ready(ctx: AppContextDep) -> JSONResponse:
        """Readiness probe – 503 while the flag provider is not initialized."""
        if is_ready(ctx.provider):
            return JSONResponse(status_code=200, content={"status": "ready"})
        return JSONResponse(status_code=503, content={"status": "not ready"})

    return router


def FlagsRouter(tags: list[str] | None = None) -> APIRouter:
    """Return the router serving flag-derived responses."""
    router = APIRouter(tags=tags or ["flags"])

    @router.get("/")
    async def index(
        ctx: AppContextDep,
        user_id: str | None = Query(default=None, alias="userId"),
    ) -> dict[str, Any]:
        settings = ctx.settings
        # An empty ``?userId=`` counts as absent.
        context = build_context(user_id or ANONYMOUS_USER, environment=settings.environment)
        flags = await evaluate_flag_set(ctx.provider, context, timeout=ctx.timeout)
        return {
            "message": ROOT_MESSAGE,
            "version": settings.app_version,
            "environment": settings.environment,
            "timestamp": isoformat_z(ctx.clock.now()),
            "user": context.key,
            "featureFlags": flags.summary(),
        }

    @router.get("/features")
    async def features(
        ctx: AppContextDep,
        user_id: str | None = Query(default=None, alias="userId"),
    ) -> dict[str, Any]:
        context = build_context(user_id or ANONYMOUS_USER, environment=ctx.settings.environment)
        flags = await evaluate_flag_set(ctx.provider, context, timeout=ctx.timeout)
        if ctx.provider is None:
            return {
                "message": NOT_CONFIGURED_MESSAGE,
                "fallbackMode": True,
                "features": flags.by_key(),
            }
        return {
            "user": context.key,
            "features": flags.by_key(),
            "launchDarklyConnected": ctx.provider.is_ready(),
        }

    @router.get("/demo/{user_type}")
    async def demo(ctx: AppContextDep, user_type: str) -> dict[str, Any]:
        """Canary/targeting demo: the path segment is the user key."""
        context = build_context(user_type, environment=ctx.settings.environment)
        flags = await evaluate_flag_set(ctx.provider, context, timeout=ctx.timeout)
        return {
            "userType": user_type,
            "message": NEW_UI_MESSAGE if flags.new_ui else CLASSIC_UI_MESSAGE,
            "theme": "dark" if flags.dark_mode else "light",
            "betaAccess": flags.beta_features,
            "features": flags.by_key(),
        }

    return router


__all__ = ["FlagsRouter", "OpsRouter"]
