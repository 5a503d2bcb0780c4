"""Unit tests for config settings & validation."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from flag_responder.config.settings import (
    PLACEHOLDER_SDK_KEY,
    AppSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
)
from flag_responder.config.validation import ConfigError, InvalidSettingValueError

_APP_ENV_KEYS = (
    "HOST",
    "PORT",
    "LAUNCHDARKLY_SDK_KEY",
    "ENVIRONMENT",
    "APP_VERSION",
    "LOG_LEVEL",
    "LD_START_WAIT_SECONDS",
    "FLAG_EVALUATION_TIMEOUT_SECONDS",
    "FLAG_EVALUATION_WORKERS",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in _APP_ENV_KEYS:
        # setenv first so values written later by load_dotenv are undone too
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _TokenSettings(Settings):
    flag_responder_test_token: str


class TestEnvSettingsLoader:
    def test_field_maps_to_upper_case_env_var(self) -> None:
        assert AppSettings.env_name("launchdarkly_sdk_key") == "LAUNCHDARKLY_SDK_KEY"

    def test_parses_int_and_float(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("LD_START_WAIT_SECONDS", "2.5")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 8080
        assert settings.ld_start_wait_seconds == 2.5

    def test_str_kept_verbatim(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LAUNCHDARKLY_SDK_KEY", " sdk-with-space ")
        assert EnvSettingsLoader().load(AppSettings).launchdarkly_sdk_key == " sdk-with-space "

    def test_unparseable_int_names_env_var(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("PORT", "http")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting == "PORT"
        assert exc_info.value.value == "http"

    def test_unparseable_float(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("FLAG_EVALUATION_TIMEOUT_SECONDS", "soon")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting == "FLAG_EVALUATION_TIMEOUT_SECONDS"

    def test_missing_field_without_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FLAG_RESPONDER_TEST_TOKEN", raising=False)
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(_TokenSettings)

    def test_field_without_default_read_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAG_RESPONDER_TEST_TOKEN", "t0k3n")
        assert EnvSettingsLoader().load(_TokenSettings).flag_responder_test_token == "t0k3n"


# ---------------------------------------------------------------------------
# AppSettings
# ---------------------------------------------------------------------------


class TestAppSettings:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.launchdarkly_sdk_key == PLACEHOLDER_SDK_KEY
        assert settings.environment == "development"
        assert settings.app_version == "1.0.0"
        assert settings.flag_evaluation_timeout_seconds == 5.0
        assert settings.flag_evaluation_workers == 8

    def test_env_names(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("LAUNCHDARKLY_SDK_KEY", "sdk-123")
        clean_env.setenv("ENVIRONMENT", "production")
        clean_env.setenv("APP_VERSION", "2.3.4")
        clean_env.setenv("FLAG_EVALUATION_TIMEOUT_SECONDS", "0.5")
        clean_env.setenv("FLAG_EVALUATION_WORKERS", "2")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 8080
        assert settings.launchdarkly_sdk_key == "sdk-123"
        assert settings.environment == "production"
        assert settings.app_version == "2.3.4"
        assert settings.flag_evaluation_timeout_seconds == 0.5
        assert settings.flag_evaluation_workers == 2

    def test_out_of_range_port_names_env_var(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            AppSettings(port=70000)
        assert exc_info.value.setting == "PORT"

    def test_negative_timeout(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            AppSettings(flag_evaluation_timeout_seconds=-1.0)
        assert exc_info.value.setting == "FLAG_EVALUATION_TIMEOUT_SECONDS"

    def test_negative_start_wait(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            AppSettings(ld_start_wait_seconds=-0.1)

    def test_at_least_one_worker(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            AppSettings(flag_evaluation_workers=0)

    def test_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            AppSettings(log_level="CHATTY")

    def test_log_level_number(self) -> None:
        assert AppSettings(log_level="debug").log_level_number == 10

    def test_frozen(self) -> None:
        settings = AppSettings()
        with pytest.raises((AttributeError, TypeError)):
            settings.port = 1  # type: ignore[misc]

    def test_from_env_reads_dotenv(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("APP_VERSION=9.9.9\nENVIRONMENT=staging\n")
        settings = AppSettings.from_env(str(env_file))
        assert settings.app_version == "9.9.9"
        assert settings.environment == "staging"

    def test_dotenv_does_not_override_process_env(
        self, clean_env: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("ENVIRONMENT=staging\n")
        clean_env.setenv("ENVIRONMENT", "production")
        settings = DotenvSettingsLoader(str(env_file)).load(AppSettings)
        assert settings.environment == "production"

    def test_from_env_without_file(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("PORT", "4000")
        assert AppSettings.from_env(None).port == 4000
