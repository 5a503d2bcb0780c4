"""LaunchDarkly adapter – provider and bootstrap."""
from flag_responder.adapters.launchdarkly.bootstrap import ProviderFactory, close_client, init_client
from flag_responder.adapters.launchdarkly.provider import LaunchDarklyFeatureFlagProvider, to_ld_context

__all__ = [
    "LaunchDarklyFeatureFlagProvider",
    "ProviderFactory",
    "close_client",
    "init_client",
    "to_ld_context",
]
