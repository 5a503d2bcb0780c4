"""FastAPI adapter – AppContext shared read-only by every request."""
from __future__ import annotations

import dataclasses
import time

from flag_responder.application.feature_flags import FeatureFlagProvider
from flag_responder.config.settings import AppSettings
from flag_responder.kernel.time import Clock, SystemClock
from flag_responder.resilience.timeouts import TimeoutPolicy


@dataclasses.dataclass(frozen=True)
class AppContext:
    """Everything a handler needs, built once by the lifespan.

    ``provider`` is either a ready flag provider or ``None`` (fallback mode);
    it is never swapped after startup.
    """
    settings: AppSettings
    provider: FeatureFlagProvider | None
    clock: Clock = dataclasses.field(default_factory=SystemClock)
    started_at: float = dataclasses.field(default_factory=time.monotonic)
    timeout: TimeoutPolicy | None = None

    @classmethod
    def create(
        cls,
        settings: AppSettings,
        provider: FeatureFlagProvider | None,
        *,
        clock: Clock | None = None,
    ) -> "AppContext":
        return cls(
            settings=settings,
            provider=provider,
            clock=clock or SystemClock(),
            timeout=TimeoutPolicy.optional(settings.flag_evaluation_timeout_seconds),
        )

    @property
    def fallback_mode(self) -> bool:
        return self.provider is None

    def uptime(self) -> float:
        return time.monotonic() - self.started_at


__all__ = ["AppContext"]
