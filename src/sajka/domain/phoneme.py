"""Phoneme representation and the Sajk'a sound tables.

A phoneme is a pair of components written ``lateral/vertical``. Both components
are either vowels or consonants; consonant pairs are further restricted by the
compatibility table below.
"""

import random
from dataclasses import dataclass
from enum import Enum, auto

from sajka.exceptions import PhonemeFormatError


class PhonemeType(Enum):
    """Type of a phoneme, decided by its lateral component."""

    CONSONANT = auto()
    VOWEL = auto()


CONSONANTS: tuple[str, ...] = ("p", "p'", "t", "t'", "k", "k'", "m", "f", "s", "ʂ", "h", "j", "l")
VOWELS: tuple[str, ...] = ("i", "a", "u", "ə")

# Lateral consonant -> vertical consonants it may combine with
COMPATIBLE: dict[str, tuple[str, ...]] = {
    "p": ("p", "t", "k", "m", "f", "l"),
    "p'": ("p'", "t'", "k'", "m", "l"),
    "t": ("p", "t", "k", "m", "f", "l"),
    "t'": ("p'", "t'", "k'", "m", "l"),
    "k": ("p", "t", "k", "m", "f", "l"),
    "k'": ("p'", "t'", "k'", "m", "l"),
    "m": ("p", "p'", "t", "t'", "k", "k'", "m", "f", "l"),
    "f": ("p", "t", "k", "m", "f", "l"),
    "s": ("p", "p'", "t", "t'", "k", "k'", "m", "f", "s", "l"),
    "ʂ": ("p", "p'", "t", "t'", "k", "k'", "m", "ʂ", "l"),
    "h": ("h",),
    "j": ("j",),
    "l": ("l",),
}

SEPARATOR = "/"

# Typographic apostrophes are accepted in parsed text
_APOSTROPHE_VARIANTS = ("’",)


@dataclass(frozen=True, slots=True)
class Phoneme:
    """A single sound on the word grid.

    Immutable and hashable. Construction does not validate the pair; use
    ``Phoneme.parse`` or ``Phoneme.is_valid`` for untrusted input.

    Attributes:
        lateral: Lateral component symbol
        vertical: Vertical component symbol
    """

    lateral: str
    vertical: str

    def __str__(self) -> str:
        return f"{self.lateral}{SEPARATOR}{self.vertical}"

    @property
    def type(self) -> PhonemeType:
        # Pairs are never mixed, so the lateral component decides
        return PhonemeType.VOWEL if self.lateral in VOWELS else PhonemeType.CONSONANT

    @property
    def is_vowel(self) -> bool:
        return self.type is PhonemeType.VOWEL

    @property
    def is_consonant(self) -> bool:
        return self.type is PhonemeType.CONSONANT

    @property
    def image_name(self) -> str:
        """File name of the sample image for this phoneme (``lateral_vertical.png``)."""
        return f"{self.lateral}_{self.vertical}.png"

    def rotate(self) -> "Phoneme":
        """Apply the rotation mutation to this phoneme.

        Components are swapped first; if the swapped pair has an entry in
        ``ROTATION_MUTATION`` that entry replaces it.

        Returns:
            Rotated phoneme
        """
        swapped = Phoneme(self.vertical, self.lateral)
        return ROTATION_MUTATION.get(swapped, swapped)

    @staticmethod
    def is_valid(lateral: str, vertical: str) -> bool:
        """Check whether a lateral/vertical pair is a legal phoneme.

        Args:
            lateral: Lateral component
            vertical: Vertical component

        Returns:
            True for vowel pairs and for compatible consonant pairs
        """
        if lateral in VOWELS and vertical in VOWELS:
            return True
        if lateral not in CONSONANTS or vertical not in CONSONANTS:
            return False
        return vertical in COMPATIBLE[lateral]

    @classmethod
    def parse(cls, text: str) -> "Phoneme":
        """Parse a phoneme from its standard ``lateral/vertical`` notation.

        Args:
            text: Phoneme notation, e.g. ``"p'/t'"``

        Returns:
            Phoneme instance

        Raises:
            PhonemeFormatError: If the text has no single slash or the pair is invalid
        """
        normalized = text
        for variant in _APOSTROPHE_VARIANTS:
            normalized = normalized.replace(variant, "'")

        parts = normalized.split(SEPARATOR)
        if len(parts) != 2:
            raise PhonemeFormatError(text, "must have a single slash.")

        lateral, vertical = parts
        if not cls.is_valid(lateral, vertical):
            raise PhonemeFormatError(text, "is invalid.")

        return cls(lateral, vertical)

    @classmethod
    def random_vowel(cls, rng: random.Random) -> "Phoneme":
        """Draw a vowel with both components uniform over the vowel alphabet."""
        return cls(rng.choice(VOWELS), rng.choice(VOWELS))

    @classmethod
    def random_consonant(cls, rng: random.Random) -> "Phoneme":
        """Draw a consonant.

        The lateral component is uniform over all consonants; the vertical
        component is then uniform over that lateral's compatible consonants.
        """
        lateral = rng.choice(CONSONANTS)
        return cls(lateral, rng.choice(COMPATIBLE[lateral]))


PLACEHOLDER = Phoneme("ə", "ə")

ROTATION_MUTATION: dict[Phoneme, Phoneme] = {
    Phoneme("p", "s"): Phoneme("p", "f"),
    Phoneme("p'", "s"): Phoneme("p'", "p'"),
    Phoneme("t", "s"): Phoneme("t", "f"),
    Phoneme("t'", "s"): Phoneme("t'", "t'"),
    Phoneme("k", "s"): Phoneme("k", "f"),
    Phoneme("k'", "s"): Phoneme("k'", "k'"),
    Phoneme("m", "s"): Phoneme("m", "f"),
    Phoneme("f", "s"): Phoneme("f", "f"),
    Phoneme("p", "ʂ"): Phoneme("p", "l"),
    Phoneme("p'", "ʂ"): Phoneme("p'", "l"),
    Phoneme("t", "ʂ"): Phoneme("t", "l"),
    Phoneme("t'", "ʂ"): Phoneme("t'", "l"),
    Phoneme("k", "ʂ"): Phoneme("k", "l"),
    Phoneme("k'", "ʂ"): Phoneme("k'", "l"),
    Phoneme("m", "ʂ"): Phoneme("m", "l"),
    Phoneme("f", "ʂ"): Phoneme("f", "l"),
    Phoneme("l", "p"): Phoneme("f", "p"),
    Phoneme("l", "p'"): Phoneme("p'", "p'"),
    Phoneme("l", "t"): Phoneme("f", "t"),
    Phoneme("l", "t'"): Phoneme("t'", "t'"),
    Phoneme("l", "k"): Phoneme("f", "k"),
    Phoneme("l", "k'"): Phoneme("k'", "k'"),
    Phoneme("l", "m"): Phoneme("f", "m"),
    Phoneme("l", "f"): Phoneme("f", "f"),
    Phoneme("l", "s"): Phoneme("f", "s"),
}
