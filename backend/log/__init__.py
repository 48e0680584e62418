"""Structured logging setup shared by the API and the calculation core."""

from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
