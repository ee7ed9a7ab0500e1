"""Observability – structured logging helpers."""
from flagengine.observability.logging.factory import JsonLoggerFactory
from flagengine.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "JsonLoggerFactory", "get_logger"]
