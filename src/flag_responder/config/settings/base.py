"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Settings:
    """Frozen, env-backed settings; field ``foo_bar`` is read from ``FOO_BAR``.

    Subclasses reject bad combinations in :meth:`_validate`, which runs as
    soon as an instance is built, so an invalid instance never exists.
    """

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @staticmethod
    def env_name(field_name: str) -> str:
        return field_name.upper()


__all__ = ["Settings"]
