"""Resilience – TimeoutPolicy."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, TypeVar

from flag_responder.kernel.errors import TimeoutError as AppTimeoutError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    """Deadline for one awaited call."""

    seconds: float

    @classmethod
    def optional(cls, seconds: float) -> TimeoutPolicy | None:
        """``None`` (no deadline) unless *seconds* is positive."""
        return cls(seconds) if seconds > 0 else None

    async def run(self, call: Awaitable[T]) -> T:
        """Await *call*, cancelling it and raising :class:`AppTimeoutError` at the deadline."""
        try:
            return await asyncio.wait_for(call, self.seconds)
        except asyncio.TimeoutError as exc:
            raise AppTimeoutError(self.seconds) from exc


__all__ = ["TimeoutPolicy"]
