"""Config settings – 12-factor env-based configuration."""
from flag_responder.config.settings.app import PLACEHOLDER_SDK_KEY, AppSettings
from flag_responder.config.settings.base import Settings
from flag_responder.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "PLACEHOLDER_SDK_KEY",
    "AppSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
]
