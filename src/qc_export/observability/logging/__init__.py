"""Observability – structured logging helpers."""
from qc_export.observability.logging.factory import JsonLoggerFactory
from qc_export.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
