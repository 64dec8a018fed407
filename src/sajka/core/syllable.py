"""Syllable generation from the Sajk'a phonotactic template.

A syllable is built in four steps:
1. Fill the template: the vowel slot always, each consonant slot with
   probability 1/2
2. Drop every phoneme not 4-connected to the vowel at the origin
3. Reject and start over if no consonant survived
4. Add placeholders next to consonants that are not pronounceable on their own
"""

import logging
import random
from collections import deque

from sajka.domain import PLACEHOLDER, Phoneme, PhonemeType, Point, Word
from sajka.exceptions import SyllableGenerationError

logger = logging.getLogger(__name__)

ORIGIN = Point(0, 0)

# Slot offsets of a syllable and the type of phoneme each slot takes
PHONOTACTICS: dict[Point, PhonemeType] = {
    Point(1, -2): PhonemeType.CONSONANT,
    Point(0, -1): PhonemeType.CONSONANT,
    Point(1, -1): PhonemeType.CONSONANT,
    Point(2, -1): PhonemeType.CONSONANT,
    Point(-1, 0): PhonemeType.CONSONANT,
    Point(0, 0): PhonemeType.VOWEL,
    Point(1, 0): PhonemeType.CONSONANT,
    Point(-2, 1): PhonemeType.CONSONANT,
    Point(-1, 1): PhonemeType.CONSONANT,
    Point(0, 1): PhonemeType.CONSONANT,
    Point(-2, 2): PhonemeType.CONSONANT,
    Point(-1, 2): PhonemeType.CONSONANT,
}

# Neighbours of a consonant, relative to its position
BEFORE = Point(0, 1)
AFTER = Point(0, -1)
KATOPIN = Point(-1, 0)
PRIN = Point(1, 0)


def connected_component(phonemes: dict[Point, Phoneme], start: Point) -> dict[Point, Phoneme]:
    """Keep only the phonemes 4-connected to ``start``.

    Args:
        phonemes: Sparse grid
        start: Seed point of the flood fill

    Returns:
        New grid with the reachable phonemes, in the original order
    """
    if start not in phonemes:
        return {}

    visited = {start}
    queue = deque([start])
    while queue:
        point = queue.popleft()
        for neighbor in point.neighbors():
            if neighbor in phonemes and neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return {p: phoneme for p, phoneme in phonemes.items() if p in visited}


def fill_placeholders(phonemes: dict[Point, Phoneme]) -> None:
    """Reserve placeholder slots around unsupported consonants.

    A consonant needs a vowel below it (``before``) or a free slot above it
    (``after``), and a vowel to its left (``katopin``) or a free slot to its
    right (``prin``). Free slots are filled with ``PLACEHOLDER``. The grid is
    updated in place; placeholders count as vowels for consonants checked
    after them.

    Args:
        phonemes: Sparse grid to update
    """

    def vowel_at(point: Point) -> bool:
        phoneme = phonemes.get(point)
        return phoneme is not None and phoneme.is_vowel

    for point, phoneme in list(phonemes.items()):
        if not phoneme.is_consonant:
            continue

        after = point + AFTER
        if not vowel_at(point + BEFORE) and after not in phonemes:
            phonemes[after] = PLACEHOLDER

        prin = point + PRIN
        if not vowel_at(point + KATOPIN) and prin not in phonemes:
            phonemes[prin] = PLACEHOLDER


class SyllableGenerator:
    """Generates random syllables.

    Attempts that leave no consonant connected to the vowel are discarded and
    retried. By default there is no limit on the number of attempts.

    Example:
        generator = SyllableGenerator(rng=random.Random(7))
        syllable = generator.generate()
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        max_attempts: int | None = None,
    ) -> None:
        """Initialize the syllable generator.

        Args:
            rng: Random source (a fresh one if None)
            max_attempts: Attempts per syllable before raising (None = unbounded)
        """
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self.attempts = 0

    def fill_template(self) -> dict[Point, Phoneme]:
        """Draw phonemes for the template slots.

        Returns:
            Unpruned grid; always contains the vowel at the origin
        """
        phonemes: dict[Point, Phoneme] = {}
        for point, kind in PHONOTACTICS.items():
            if kind is PhonemeType.VOWEL:
                phonemes[point] = Phoneme.random_vowel(self.rng)
            elif self.rng.random() < 0.5:
                phonemes[point] = Phoneme.random_consonant(self.rng)
        return phonemes

    def generate(self) -> Word:
        """Generate one syllable.

        Returns:
            Syllable with a vowel at (0, 0) and at least one consonant

        Raises:
            SyllableGenerationError: If ``max_attempts`` attempts were all rejected
        """
        self.attempts = 0
        while True:
            if self.max_attempts is not None and self.attempts >= self.max_attempts:
                raise SyllableGenerationError(self.attempts)
            self.attempts += 1

            phonemes = connected_component(self.fill_template(), ORIGIN)
            if len(phonemes) == 1:
                # syllables need at least one consonant
                continue

            fill_placeholders(phonemes)
            logger.debug("Syllable built after %d attempts (%d cells)", self.attempts, len(phonemes))
            return Word(phonemes)
