"""Multi-syllable word generation.

Syllables are generated one at a time and adjoined to the growing word.
A syllable that cannot be placed is discarded and another one is drawn.
"""

import random
import time

import structlog

from sajka.config import GenerationConfig
from sajka.core.adjoin import adjoined
from sajka.core.syllable import SyllableGenerator
from sajka.domain import Word
from sajka.exceptions import GenerationError, WordGenerationError
from sajka.utils import GenerationLogger, GenerationStats


class WordGenerator:
    """Generates words made of several adjoined syllables.

    Example:
        generator = WordGenerator(GenerationConfig(syllables=3, seed=42))
        word = generator.generate()
        print(word.to_text())
    """

    def __init__(
        self,
        config: GenerationConfig | None = None,
        rng: random.Random | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the word generator.

        Args:
            config: Generation settings (defaults if None)
            rng: Random source; a new one seeded from ``config.seed`` if None
            logger: Logger for progress messages
        """
        self.config = config if config is not None else GenerationConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.syllable_generator = SyllableGenerator(
            rng=self.rng,
            max_attempts=self.config.max_syllable_attempts,
        )
        self.generation_logger = GenerationLogger(logger)

    @property
    def stats(self) -> GenerationStats:
        """Statistics accumulated over all ``generate`` calls."""
        return self.generation_logger.stats

    def syllable(self) -> Word:
        """Generate one syllable and record it."""
        syllable = self.syllable_generator.generate()
        self.generation_logger.log_syllable(len(syllable), self.syllable_generator.attempts)
        return syllable

    def generate(self, syllables: int | None = None) -> Word:
        """Generate a word.

        Args:
            syllables: Number of syllables (``config.syllables`` if None)

        Returns:
            Generated word

        Raises:
            ValueError: If ``syllables`` is less than 1
            SyllableGenerationError: If a syllable exceeds its attempt limit
            WordGenerationError: If placements fail more than ``max_adjoin_attempts`` times
        """
        if syllables is None:
            syllables = self.config.syllables
        if syllables < 1:
            raise ValueError(f"A word needs at least one syllable, got {syllables}")

        stats = self.stats
        stats.start_time = time.time()
        try:
            word = self.syllable()
            merged = 1
            failures = 0
            while merged < syllables:
                result = adjoined(word, self.syllable(), rng=self.rng)
                if result is None:
                    failures += 1
                    self.generation_logger.log_adjoin_failed(merged)
                    limit = self.config.max_adjoin_attempts
                    if limit is not None and failures >= limit:
                        raise WordGenerationError(syllables, merged, failures)
                    continue

                word = result
                merged += 1
                self.generation_logger.log_adjoin(merged, len(word))
        except GenerationError as e:
            self.generation_logger.log_generation_error(e)
            raise

        stats.end_time = time.time()
        self.generation_logger.log_word_complete(
            syllables=merged,
            size=len(word),
            duration_ms=stats.duration_seconds * 1000,
        )
        return word


def generate_word(
    syllables: int = 2,
    rng: random.Random | None = None,
    config: GenerationConfig | None = None,
) -> Word:
    """Generate a word with a throwaway ``WordGenerator``.

    Args:
        syllables: Number of syllables
        rng: Random source
        config: Generation settings

    Returns:
        Generated word
    """
    return WordGenerator(config=config, rng=rng).generate(syllables)
