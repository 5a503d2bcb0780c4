"""LaunchDarkly adapter – one-shot client initialization with fallback."""
from __future__ import annotations

import asyncio
from typing import Callable

from flag_responder.adapters.launchdarkly.provider import LaunchDarklyFeatureFlagProvider
from flag_responder.application.feature_flags import FeatureFlagProvider
from flag_responder.config.settings import AppSettings
from flag_responder.kernel.errors import BaseError, ProviderNotReadyError
from flag_responder.observability.logging import get_logger

logger = get_logger(__name__)

ProviderFactory = Callable[[AppSettings], FeatureFlagProvider]


async def init_client(
    settings: AppSettings,
    *,
    factory: ProviderFactory | None = None,
) -> FeatureFlagProvider | None:
    """Create a ready flag provider, or return ``None`` for fallback mode.

    Never raises: the HTTP server must come up even when the flag service
    is unreachable, misconfigured or slow to initialize.
    """
    build = factory or LaunchDarklyFeatureFlagProvider.from_settings
    provider: FeatureFlagProvider | None = None
    try:
        provider = await asyncio.to_thread(build, settings)
        if not provider.is_ready():
            raise ProviderNotReadyError("launchdarkly", settings.ld_start_wait_seconds)
    except Exception as exc:  # noqa: BLE001 – degrade to fallback mode
        fields = exc.log_fields() if isinstance(exc, BaseError) else {"error": str(exc)}
        logger.error("feature_flags.init_failed", error_type=type(exc).__name__, **fields)
        if provider is not None:
            close_client(provider)
        logger.warning("feature_flags.fallback_mode")
        return None

    logger.info("feature_flags.initialized", provider=type(provider).__name__)
    return provider


def close_client(provider: FeatureFlagProvider | None) -> None:
    """Best-effort close; failures are logged, never raised."""
    if provider is None:
        return
    try:
        provider.close()
    except Exception as exc:  # noqa: BLE001
        logger.warning("feature_flags.close_failed", error=str(exc))
    else:
        logger.info("feature_flags.closed")


__all__ = ["ProviderFactory", "close_client", "init_client"]
