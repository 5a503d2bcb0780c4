"""Application feature flags – per-request evaluation with safe defaults.

Every lookup degrades to the flag's default value instead of failing the
request: an absent provider yields defaults without any remote call, and a
single failing or timed-out flag only affects itself.
"""
from __future__ import annotations

import asyncio
from typing import Sequence

from flag_responder.application.feature_flags.context import EvaluationContext
from flag_responder.application.feature_flags.feature_flag import DEMO_FLAGS, FeatureFlag, FeatureFlagSet
from flag_responder.application.feature_flags.provider import FeatureFlagProvider
from flag_responder.kernel.errors import BaseError
from flag_responder.observability.logging import get_logger
from flag_responder.resilience.timeouts import TimeoutPolicy

logger = get_logger(__name__)


async def _evaluate_one(
    provider: FeatureFlagProvider,
    flag: FeatureFlag,
    context: EvaluationContext,
    timeout: TimeoutPolicy | None,
) -> bool:
    try:
        call = provider.is_enabled(flag, context)
        return bool(await (call if timeout is None else timeout.run(call)))
    except Exception as exc:  # noqa: BLE001 – degrade this flag only
        fields = exc.log_fields() if isinstance(exc, BaseError) else {"error": str(exc)}
        logger.warning(
            "feature_flags.evaluation_failed",
            flag=flag.key,
            user=context.key,
            error_type=type(exc).__name__,
            **fields,
        )
        return flag.default_value


async def evaluate_flags(
    provider: FeatureFlagProvider | None,
    context: EvaluationContext,
    flags: Sequence[FeatureFlag] = DEMO_FLAGS,
    *,
    timeout: TimeoutPolicy | None = None,
) -> dict[str, bool]:
    """Evaluate *flags* for *context*, keyed by flag key in input order."""
    if provider is None:
        return {flag.key: flag.default_value for flag in flags}

    values = await asyncio.gather(
        *(_evaluate_one(provider, flag, context, timeout) for flag in flags)
    )
    return {flag.key: value for flag, value in zip(flags, values)}


async def evaluate_flag_set(
    provider: FeatureFlagProvider | None,
    context: EvaluationContext,
    *,
    timeout: TimeoutPolicy | None = None,
) -> FeatureFlagSet:
    """Evaluate :data:`DEMO_FLAGS` into a :class:`FeatureFlagSet`."""
    return FeatureFlagSet.from_mapping(
        await evaluate_flags(provider, context, DEMO_FLAGS, timeout=timeout)
    )


def is_ready(provider: FeatureFlagProvider | None) -> bool:
    """Fallback mode (no provider) counts as ready."""
    if provider is None:
        return True
    return provider.is_ready()


__all__ = ["evaluate_flag_set", "evaluate_flags", "is_ready"]
