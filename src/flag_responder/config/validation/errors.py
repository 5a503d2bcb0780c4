"""Config validation errors – the service refuses to start on any of these."""
from flag_responder.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """``setting`` is named by its environment variable, e.g. ``PORT``."""

    default_code = "invalid_setting"

    def __init__(self, setting: str, value: object, reason: str) -> None:
        super().__init__(f"{setting}={value!r}: {reason}", setting=setting, value=value)
        self.setting = setting
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
