"""Infrastructure errors – failures of the services this process talks to."""

from __future__ import annotations

from typing import Any

from flag_responder.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    default_code = "infrastructure_error"


class ExternalServiceError(InfrastructureError):
    """A remote dependency, named by ``service``, misbehaved."""

    default_code = "external_service_error"

    def __init__(self, service: str, message: str, **detail: Any) -> None:
        super().__init__(message, service=service, **detail)
        self.service = service


class ProviderNotReadyError(ExternalServiceError):
    """The flag service client was still uninitialized after its start wait."""

    default_code = "provider_not_ready"

    def __init__(self, service: str, waited_seconds: float) -> None:
        super().__init__(
            service,
            f"{service} client not initialized after {waited_seconds}s",
            waited_seconds=waited_seconds,
        )
        self.waited_seconds = waited_seconds


__all__ = ["ExternalServiceError", "InfrastructureError", "ProviderNotReadyError"]
