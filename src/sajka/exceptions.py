"""Exception hierarchy for Sajka."""


class SajkaError(Exception):
    """Base exception for all Sajka errors."""

    pass


class FormatError(SajkaError):
    """Errors related to malformed phoneme or word text."""

    pass


class PhonemeFormatError(FormatError):
    """Phoneme notation could not be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Phoneme '{text}' {reason}")


class WordFormatError(FormatError):
    """Word grid text could not be parsed."""

    def __init__(self, reason: str, line: int | None = None, column: int | None = None) -> None:
        self.reason = reason
        self.line = line
        self.column = column
        if line is not None and column is not None:
            super().__init__(f"Invalid word at line {line + 1}, column {column + 1}: {reason}")
        else:
            super().__init__(f"Invalid word: {reason}")


class GeometryError(SajkaError):
    """Errors in grid geometry calculations."""

    pass


class EmptyRangeError(GeometryError):
    """Bounding range requested for an empty set of points."""

    def __init__(self) -> None:
        super().__init__("Cannot compute the range of an empty set of points")


class GenerationError(SajkaError):
    """Errors related to syllable or word generation."""

    pass


class SyllableGenerationError(GenerationError):
    """Syllable generation gave up after the configured number of attempts."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"No valid syllable generated after {attempts} attempts")


class WordGenerationError(GenerationError):
    """Word generation gave up after too many failed adjoins."""

    def __init__(self, syllables: int, merged: int, failures: int) -> None:
        self.syllables = syllables
        self.merged = merged
        self.failures = failures
        super().__init__(
            f"Word generation stopped at {merged}/{syllables} syllables "
            f"after {failures} failed placements"
        )
