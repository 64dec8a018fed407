"""Logging utilities for Sajka."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import structlog

# Marks handlers installed by configure_logging so reconfiguring replaces them
_HANDLER_FLAG = "_sajka_handler"


@dataclass
class GenerationStats:
    """Statistics from a word generation run."""

    syllables: int = 0
    syllable_attempts: int = 0
    rejected_syllables: int = 0
    adjoins: int = 0
    adjoin_failures: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so generated words on stdout stay clean.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_FLAG, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_FLAG, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("sajka")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger(name: str = "sajka") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger that writes through the stdlib ``logging`` tree.

    Used when no configured logger is passed in. Until ``configure_logging``
    installs handlers, stdlib defaults apply and debug or info events are
    dropped instead of being printed.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
    )


class GenerationLogger:
    """Logger for tracking word generation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._stats = GenerationStats()

    def log_syllable(self, size: int, attempts: int) -> None:
        """Log a generated syllable."""
        self._logger.debug("Syllable generated", cells=size, attempts=attempts)
        self._stats.syllables += 1
        self._stats.syllable_attempts += attempts
        self._stats.rejected_syllables += attempts - 1

    def log_adjoin(self, merged: int, size: int) -> None:
        """Log a successful adjoin."""
        self._logger.debug("Syllable adjoined", merged=merged, cells=size)
        self._stats.adjoins += 1

    def log_adjoin_failed(self, merged: int) -> None:
        """Log a syllable that could not be placed."""
        self._logger.debug("No placement for syllable", merged=merged)
        self._stats.adjoin_failures += 1

    def log_word_complete(self, syllables: int, size: int, duration_ms: float) -> None:
        """Log a finished word."""
        self._logger.info(
            "Word generated",
            syllables=syllables,
            cells=size,
            syllable_attempts=self._stats.syllable_attempts,
            adjoin_failures=self._stats.adjoin_failures,
            duration_ms=round(duration_ms, 2),
        )

    def log_generation_error(self, error: Exception) -> None:
        """Log a generation run that gave up."""
        self._logger.error(
            "Word generation failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
