"""Utility helpers shared across the pipeline modules."""

from .logging_utils import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
