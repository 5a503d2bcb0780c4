"""FastAPI adapter – reusable dependency functions."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from flag_responder.adapters.fastapi.context import AppContext


def get_app_context(request: Request) -> AppContext:
    """Return the :class:`AppContext` published by the application lifespan."""
    ctx = getattr(request.app.state, "context", None)
    if ctx is None:
        raise RuntimeError("AppContext not initialized; is the lifespan running?")
    return ctx


AppContextDep = Annotated[AppContext, Depends(get_app_context)]


__all__ = ["AppContextDep", "get_app_context"]
