"""Observability – structlog-based logging for the query engine."""

from listquery.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
