"""Application feature flags – InMemoryFeatureFlagProvider."""

from __future__ import annotations

from typing import Mapping

from flag_responder.application.feature_flags.context import EvaluationContext
from flag_responder.application.feature_flags.feature_flag import FeatureFlag
from flag_responder.application.feature_flags.provider import FeatureFlagProvider


class InMemoryFeatureFlagProvider(FeatureFlagProvider):
    """Serves ``values[flag.key]`` to every context; for tests and local runs.

    ``values`` and ``ready`` may be changed while the provider is in use.
    Flags missing from ``values`` get their default.
    """

    def __init__(self, values: Mapping[str, bool] | None = None, *, ready: bool = True) -> None:
        self.values = dict(values or {})
        self.ready = ready
        self.closed = False

    async def is_enabled(self, flag: FeatureFlag, context: EvaluationContext) -> bool:
        return self.values.get(flag.key, flag.default_value)

    def is_ready(self) -> bool:
        return self.ready and not self.closed

    def close(self) -> None:
        self.closed = True


__all__ = ["InMemoryFeatureFlagProvider"]
