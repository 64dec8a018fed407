"""Utility functions for sajka.

This module provides utility functions including:

- Logging setup and configuration
- Generation statistics tracking
"""

from sajka.utils.logging import (
    GenerationLogger,
    GenerationStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "GenerationLogger",
    "GenerationStats",
    "configure_logging",
    "get_logger",
]
