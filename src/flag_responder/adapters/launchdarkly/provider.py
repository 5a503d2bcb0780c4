"""LaunchDarkly adapter – FeatureFlagProvider backed by ``ldclient``."""
from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from ldclient import Context
from ldclient.client import LDClient
from ldclient.config import Config

from flag_responder.application.feature_flags import EvaluationContext, FeatureFlag, FeatureFlagProvider

if TYPE_CHECKING:
    from flag_responder.config.settings import AppSettings

DEFAULT_WORKERS = 8


def to_ld_context(context: EvaluationContext) -> Context:
    """Convert an :class:`EvaluationContext` into an ``ldclient.Context``."""
    return (
        Context.builder(context.key)
        .kind(context.kind)
        .name(context.name)
        .set("environment", context.environment)
        .build()
    )


class LaunchDarklyFeatureFlagProvider(FeatureFlagProvider):
    """Evaluate flags through a LaunchDarkly server-side SDK client.

    ``variation`` blocks, so it runs on a private pool of *max_workers*
    threads. A timed-out evaluation keeps its thread until the SDK
    returns; a stuck SDK therefore queues further lookups behind the pool
    instead of spawning threads without limit.
    """

    def __init__(self, client: LDClient, *, max_workers: int = DEFAULT_WORKERS) -> None:
        self._client = client
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="ld-eval")

    @property
    def client(self) -> LDClient:
        return self._client

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "LaunchDarklyFeatureFlagProvider":
        """Build the SDK client; blocks up to ``ld_start_wait_seconds``."""
        config = Config(sdk_key=settings.launchdarkly_sdk_key)
        client = LDClient(config=config, start_wait=settings.ld_start_wait_seconds)
        return cls(client, max_workers=settings.flag_evaluation_workers)

    async def is_enabled(self, flag: FeatureFlag, context: EvaluationContext) -> bool:
        loop = asyncio.get_running_loop()
        value = await loop.run_in_executor(
            self._executor,
            self._client.variation,
            flag.key,
            to_ld_context(context),
            flag.default_value,
        )
        return bool(value)

    def is_ready(self) -> bool:
        return self._client.is_initialized()

    def close(self) -> None:
        try:
            self._client.close()
        finally:
            self._executor.shutdown(wait=False, cancel_futures=True)


__all__ = ["LaunchDarklyFeatureFlagProvider", "to_ld_context"]
