"""Observability – structured logging helpers."""
from listquery.observability.logging.factory import JsonLoggerFactory
from listquery.observability.logging.logger import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
