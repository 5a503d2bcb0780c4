"""Observability – per-request correlation ids."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar, Token
from typing import Mapping
from uuid import uuid4

# Checked in order; the first non-empty value becomes the correlation id.
_ID_HEADERS = ("x-correlation-id", "x-request-id")


@dataclasses.dataclass(frozen=True)
class RequestContext:
    correlation_id: str
    trace_id: str | None = None


_current: ContextVar[RequestContext | None] = ContextVar("flag_responder_request", default=None)


def _trace_id(traceparent: str) -> str | None:
    # W3C: version-traceid-parentid-flags
    parts = traceparent.split("-")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


class CorrelationContext:
    """Holds the :class:`RequestContext` of the request being served."""

    @staticmethod
    def get() -> RequestContext | None:
        return _current.get()

    @staticmethod
    def bind(headers: Mapping[str, str]) -> tuple[RequestContext, Token[RequestContext | None]]:
        """Resolve ids from *headers*, make them current and return them.

        The correlation id is ``X-Correlation-ID``, else ``X-Request-ID``,
        else the ``traceparent`` trace-id, else a new UUID4. Header names
        match case-insensitively. Pass the returned token to :meth:`reset`
        when the request is done.
        """
        lowered = {name.lower(): value.strip() for name, value in headers.items()}
        trace_id = _trace_id(lowered.get("traceparent", ""))
        supplied = next((lowered[h] for h in _ID_HEADERS if lowered.get(h)), None)
        ctx = RequestContext(correlation_id=supplied or trace_id or str(uuid4()), trace_id=trace_id)
        return ctx, _current.set(ctx)

    @staticmethod
    def reset(token: Token[RequestContext | None]) -> None:
        _current.reset(token)


__all__ = ["CorrelationContext", "RequestContext"]
