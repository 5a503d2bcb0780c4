"""Application feature flags – FeatureFlag value object and the demo flag set."""
from __future__ import annotations

import dataclasses
from typing import Mapping


@dataclasses.dataclass(frozen=True)
class FeatureFlag:
    key: str
    # Served whenever the flag cannot be evaluated.
    default_value: bool = False


NEW_UI = FeatureFlag("new-ui-feature")
DARK_MODE = FeatureFlag("dark-mode")
BETA_FEATURES = FeatureFlag("beta-features")

DEMO_FLAGS: tuple[FeatureFlag, ...] = (NEW_UI, DARK_MODE, BETA_FEATURES)


@dataclasses.dataclass(frozen=True)
class FeatureFlagSet:
    """Per-request evaluation result of :data:`DEMO_FLAGS`."""
    new_ui: bool = False
    dark_mode: bool = False
    beta_features: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, bool]) -> "FeatureFlagSet":
        return cls(
            new_ui=bool(values.get(NEW_UI.key, NEW_UI.default_value)),
            dark_mode=bool(values.get(DARK_MODE.key, DARK_MODE.default_value)),
            beta_features=bool(values.get(BETA_FEATURES.key, BETA_FEATURES.default_value)),
        )

    @classmethod
    def defaults(cls) -> "FeatureFlagSet":
        return cls.from_mapping({})

    def by_key(self) -> dict[str, bool]:
        """Flag values keyed by flag key, as served on ``/features`` and ``/demo``."""
        return {
            NEW_UI.key: self.new_ui,
            DARK_MODE.key: self.dark_mode,
            BETA_FEATURES.key: self.beta_features,
        }

    def summary(self) -> dict[str, bool]:
        """Flag values keyed the way the root endpoint reports them."""
        return {
            "newUIEnabled": self.new_ui,
            "darkModeEnabled": self.dark_mode,
            "betaFeaturesEnabled": self.beta_features,
        }


__all__ = ["BETA_FEATURES", "DARK_MODE", "DEMO_FLAGS", "NEW_UI", "FeatureFlag", "FeatureFlagSet"]
