"""Root of the flag_responder error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """An error that knows how to describe itself in a structured log event.

    ``code`` names the failure kind. Keyword arguments beyond ``code`` are
    kept in ``detail`` and logged next to it.
    """

    default_code: str = "error"

    def __init__(self, message: str, *, code: str | None = None, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail = detail

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code}: {self.message})"

    def log_fields(self) -> dict[str, Any]:
        """Keyword arguments for a structlog call reporting this error."""
        return {"error": self.message, "error_code": self.code, **self.detail}


__all__ = ["BaseError"]
