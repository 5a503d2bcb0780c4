"""Application-layer errors."""

from __future__ import annotations

from flag_responder.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    default_code = "application_error"


class TimeoutError(ApplicationError):  # noqa: A001
    """An awaited call ran past its deadline."""

    default_code = "timeout"

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(f"no answer within {timeout_seconds}s", timeout_seconds=timeout_seconds)
        self.timeout_seconds = timeout_seconds


__all__ = ["ApplicationError", "TimeoutError"]
