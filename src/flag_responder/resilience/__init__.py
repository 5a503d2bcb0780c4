"""Resilience – timeout policies."""
from flag_responder.resilience.timeouts import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
