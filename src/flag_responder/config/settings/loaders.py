"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Callable, TypeVar

from dotenv import load_dotenv

from flag_responder.config.settings.base import Settings
from flag_responder.config.validation import ConfigError, InvalidSettingValueError

S = TypeVar("S", bound=Settings)

# Annotations are strings under postponed evaluation.
_PARSERS: dict[str, Callable[[str], Any]] = {"int": int, "float": float, "str": str}


class SettingsLoader(abc.ABC):
    @abc.abstractmethod
    def load(self, settings_class: type[S]) -> S: ...


class EnvSettingsLoader(SettingsLoader):
    """Build settings from ``os.environ``.

    An unset variable leaves the field at its default. A set one is parsed
    by the field's annotation; a value that does not parse is reported
    under its variable name.
    """

    def load(self, settings_class: type[S]) -> S:
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            env_var = settings_class.env_name(field.name)
            raw = os.environ.get(env_var)
            if raw is not None:
                values[field.name] = _parse(env_var, raw, field.type)
        try:
            return settings_class(**values)
        except TypeError as exc:
            raise ConfigError(f"cannot build {settings_class.__name__}: {exc}") from exc


def _parse(env_var: str, raw: str, annotation: Any) -> Any:
    type_name = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "str")
    parser = _PARSERS.get(type_name, str)
    try:
        return parser(raw)
    except ValueError as exc:
        raise InvalidSettingValueError(env_var, raw, f"not a valid {type_name}") from exc


class DotenvSettingsLoader(SettingsLoader):
    """Export *env_file* into the environment, then load as :class:`EnvSettingsLoader`.

    Variables already set in the process win over the file.
    """

    def __init__(self, env_file: str = ".env") -> None:
        self._env_file = env_file

    def load(self, settings_class: type[S]) -> S:
        load_dotenv(self._env_file, override=False)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
