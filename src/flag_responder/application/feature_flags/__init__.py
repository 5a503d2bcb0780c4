"""Application feature flags – ports, value objects and evaluation."""
from flag_responder.application.feature_flags.context import (
    ANONYMOUS_USER,
    EvaluationContext,
    build_context,
)
from flag_responder.application.feature_flags.evaluation import (
    evaluate_flag_set,
    evaluate_flags,
    is_ready,
)
from flag_responder.application.feature_flags.feature_flag import (
    BETA_FEATURES,
    DARK_MODE,
    DEMO_FLAGS,
    NEW_UI,
    FeatureFlag,
    FeatureFlagSet,
)
from flag_responder.application.feature_flags.in_memory import InMemoryFeatureFlagProvider
from flag_responder.application.feature_flags.provider import FeatureFlagProvider

__all__ = [
    "ANONYMOUS_USER",
    "BETA_FEATURES",
    "DARK_MODE",
    "DEMO_FLAGS",
    "NEW_UI",
    "EvaluationContext",
    "FeatureFlag",
    "FeatureFlagProvider",
    "FeatureFlagSet",
    "InMemoryFeatureFlagProvider",
    "build_context",
    "evaluate_flag_set",
    "evaluate_flags",
    "is_ready",
]
