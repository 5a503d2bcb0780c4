"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from flag_responder.observability.correlation import CorrelationContext


class CorrelationProcessor:
    """Stamp events logged during a request with its ``correlation_id``.

    ``trace_id`` is added too when the caller sent a ``traceparent``.
    Values already present on the event are left alone.
    """

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        request = CorrelationContext.get()
        if request is None:
            return event_dict
        event_dict.setdefault("correlation_id", request.correlation_id)
        if request.trace_id:
            event_dict.setdefault("trace_id", request.trace_id)
        return event_dict


def get_logger(name: str) -> Any:
    """structlog logger named *name*, rendered by :class:`JsonLoggerFactory`."""
    return structlog.get_logger(name)


__all__ = ["CorrelationProcessor", "get_logger"]
