"""Config settings – AppSettings for the flag responder service."""
from __future__ import annotations

import dataclasses
import logging

from flag_responder.config.settings.base import Settings
from flag_responder.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader
from flag_responder.config.validation import InvalidSettingValueError

PLACEHOLDER_SDK_KEY = "sdk-your-key-here"


@dataclasses.dataclass(frozen=True)
class AppSettings(Settings):
    """Process configuration, read once at startup.

    Every field maps to the upper-cased env var of the same name
    (``port`` -> ``PORT``, ``launchdarkly_sdk_key`` -> ``LAUNCHDARKLY_SDK_KEY``).
    """

    host: str = "0.0.0.0"
    port: int = 3000
    launchdarkly_sdk_key: str = PLACEHOLDER_SDK_KEY
    environment: str = "development"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    ld_start_wait_seconds: float = 5.0
    # 0 disables the per-flag timeout and trusts the SDK's own.
    flag_evaluation_timeout_seconds: float = 5.0
    # Upper bound on threads blocked in SDK calls at any moment.
    flag_evaluation_workers: int = 8

    def _validate(self) -> None:
        if not 0 < self.port < 65536:
            self._reject("port", "must be within 1..65535")
        for name in ("ld_start_wait_seconds", "flag_evaluation_timeout_seconds"):
            if getattr(self, name) < 0:
                self._reject(name, "must not be negative")
        if self.flag_evaluation_workers < 1:
            self._reject("flag_evaluation_workers", "must be at least 1")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            self._reject("log_level", "unknown logging level")

    def _reject(self, field_name: str, reason: str) -> None:
        raise InvalidSettingValueError(self.env_name(field_name), getattr(self, field_name), reason)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "AppSettings":
        """Load from the process environment, reading *env_file* first if given."""
        loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
        return loader.load(cls)


__all__ = ["PLACEHOLDER_SDK_KEY", "AppSettings"]
