"""Configuration management for sajka.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GenerationConfig: Syllable and word generation settings
- LoggingConfig: Logging settings
- SajkaSettings: Main application settings
"""

from sajka.config.settings import (
    GenerationConfig,
    LoggingConfig,
    SajkaSettings,
)

__all__ = [
    "GenerationConfig",
    "LoggingConfig",
    "SajkaSettings",
]
