"""Application feature flags – FeatureFlagProvider port."""
from __future__ import annotations

import abc

from flag_responder.application.feature_flags.context import EvaluationContext
from flag_responder.application.feature_flags.feature_flag import FeatureFlag


class FeatureFlagProvider(abc.ABC):
    """An initialized connection to a flag service.

    Running without a flag service is expressed by having no provider at
    all; an instance is never handed out half-built.
    """

    @abc.abstractmethod
    async def is_enabled(self, flag: FeatureFlag, context: EvaluationContext) -> bool:
        """May raise; callers substitute ``flag.default_value``."""

    @abc.abstractmethod
    def is_ready(self) -> bool:
        """Whether the connection currently holds usable flag data."""

    @abc.abstractmethod
    def close(self) -> None:
        """Release the connection and flush pending analytics events."""


__all__ = ["FeatureFlagProvider"]
