"""Kernel errors.

::

    BaseError
    ├── ApplicationError
    │   ├── TimeoutError              per-flag deadline exceeded
    │   └── config.ConfigError        settings rejected at startup
    └── InfrastructureError
        └── ExternalServiceError
            └── ProviderNotReadyError flag client never initialized
"""

from flag_responder.kernel.errors.application import ApplicationError, TimeoutError
from flag_responder.kernel.errors.base import BaseError
from flag_responder.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    ProviderNotReadyError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ExternalServiceError",
    "InfrastructureError",
    "ProviderNotReadyError",
    "TimeoutError",
]
