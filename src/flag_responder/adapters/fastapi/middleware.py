"""FastAPI adapter – correlation id middleware."""
from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.datastructures import Headers

from flag_responder.observability.correlation import CorrelationContext

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

RESPONSE_HEADER = b"x-correlation-id"


class CorrelationIdMiddleware:
    """Give every HTTP request a correlation id.

    The id is current while the request is served, so log lines pick it up,
    and it is echoed to the caller in ``X-Correlation-ID``.
    """

    def __init__(self, app: "ASGIApp") -> None:
        self.app = app

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request, token = CorrelationContext.bind(Headers(scope=scope))
        echoed = (RESPONSE_HEADER, request.correlation_id.encode("latin-1"))

        async def send_with_id(message: "Message") -> None:
            if message["type"] == "http.response.start":
                message = {**message, "headers": [*message.get("headers", []), echoed]}
            await send(message)

        try:
            await self.app(scope, receive, send_with_id)
        finally:
            CorrelationContext.reset(token)


__all__ = ["CorrelationIdMiddleware"]
