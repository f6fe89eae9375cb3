"""Observability – structured logging helpers."""
from retrykit.observability.logging.factory import JsonLoggerFactory
from retrykit.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
