"""
Core utilities for BuzzHub.

This package provides logging configuration, monitoring hooks, error types,
database entities, I/O models and the storage backends.
"""

from buzzhub.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
