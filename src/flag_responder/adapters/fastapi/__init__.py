"""FastAPI adapter – app factory, routers, middleware, deps."""
from flag_responder.adapters.fastapi.app import create_app
from flag_responder.adapters.fastapi.context import AppContext
from flag_responder.adapters.fastapi.deps import AppContextDep, get_app_context
from flag_responder.adapters.fastapi.middleware import CorrelationIdMiddleware
from flag_responder.adapters.fastapi.routers import FlagsRouter, OpsRouter

__all__ = [
    "AppContext",
    "AppContextDep",
    "CorrelationIdMiddleware",
    "FlagsRouter",
    "OpsRouter",
    "create_app",
    "get_app_context",
]
