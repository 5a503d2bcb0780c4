"""Resilience – timeout policies."""
from flag_responder.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
