"""Observability – structured logging helpers."""
from flag_responder.observability.logging.factory import JsonLoggerFactory
from flag_responder.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "JsonLoggerFactory", "get_logger"]
