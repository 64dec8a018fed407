"""Configuration settings for Sajka."""

from pathlib import Path

from pydantic import BaseModel, Field


class GenerationConfig(BaseModel):
    """Configuration for syllable and word generation."""

    syllables: int = Field(
        default=2,
        ge=1,
        description="Number of syllables in a generated word",
    )
    max_syllable_attempts: int | None = Field(
        default=None,
        ge=1,
        description="Attempts per syllable before giving up (None = unbounded)",
    )
    max_adjoin_attempts: int | None = Field(
        default=None,
        ge=1,
        description="Failed placements per word before giving up (None = unbounded)",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the random source (None = nondeterministic)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SajkaSettings(BaseModel):
    """Main application settings."""

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
