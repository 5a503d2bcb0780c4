"""Application feature flags – EvaluationContext and its builder."""
from __future__ import annotations

import dataclasses
from typing import Literal

ANONYMOUS_USER = "anonymous"


@dataclasses.dataclass(frozen=True)
class EvaluationContext:
    """Identity and attributes a flag is evaluated against."""
    key: str
    name: str
    environment: str
    kind: Literal["user"] = "user"


def build_context(user_id: str | None = None, *, environment: str = "development") -> EvaluationContext:
    """Map a user identifier to a fresh :class:`EvaluationContext`.

    Only a missing identifier means anonymous; any string, the empty one
    included, is used as the key unchanged.
    """
    key = ANONYMOUS_USER if user_id is None else user_id
    return EvaluationContext(key=key, name=f"User {key}", environment=environment)


__all__ = ["ANONYMOUS_USER", "EvaluationContext", "build_context"]
