"""Core generation algorithms for sajka.

This module contains the core algorithms for:

- Syllable generation (template fill, connectivity repair, placeholders)
- Adjoin placement search (candidate offsets, collision checks)
- Word generation (syllables adjoined until the requested count)

Key functions:
- connected_component: Flood fill restricted to occupied cells
- fill_placeholders: Reserve silent slots around unsupported consonants
- find_placements: All valid offsets for placing one word on another
- adjoined: Pure adjoin returning a new word
- generate_word: One-shot word generation

Key classes:
- SyllableGenerator: Generates single syllables with retry
- WordGenerator: Generates multi-syllable words
"""

from sajka.core.adjoin import adjoined, can_place, find_placements, place
from sajka.core.generator import WordGenerator, generate_word
from sajka.core.syllable import (
    PHONOTACTICS,
    SyllableGenerator,
    connected_component,
    fill_placeholders,
)

__all__ = [
    "PHONOTACTICS",
    # Syllable classes
    "SyllableGenerator",
    # Word classes
    "WordGenerator",
    # Adjoin functions
    "adjoined",
    "can_place",
    "connected_component",
    "fill_placeholders",
    "find_placements",
    "generate_word",
    "place",
]
