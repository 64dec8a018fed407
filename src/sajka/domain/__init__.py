"""Domain models for sajka.

This module contains the grid, phoneme and word models. All models are:

- Immutable where possible (using frozen dataclasses)
- Hashable where they are used as grid keys or table keys
- Independent of generation strategy and randomness

Key classes:
- Point: An integer grid position
- BoundingRange: Rectangle enclosing a set of points
- Phoneme: A lateral/vertical sound pair
- Word: A sparse grid of phonemes
"""

from sajka.domain.geometry import BoundingRange, Point
from sajka.domain.phoneme import (
    COMPATIBLE,
    CONSONANTS,
    PLACEHOLDER,
    ROTATION_MUTATION,
    VOWELS,
    Phoneme,
    PhonemeType,
)
from sajka.domain.word import Word

__all__: list[str] = [
    # Tables
    "COMPATIBLE",
    "CONSONANTS",
    "PLACEHOLDER",
    "ROTATION_MUTATION",
    "VOWELS",
    # Enums
    "PhonemeType",
    # Core types
    "Point",
    "BoundingRange",
    "Phoneme",
    "Word",
]
