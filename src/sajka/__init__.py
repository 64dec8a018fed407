"""Sajka - Procedural word generator for the Sajk'a phonology.

Sajka builds syllables as spatial arrangements of phonemes on a 2D grid,
adjoins syllables into multi-syllable words and applies the rotation
mutation to existing words.

Example:
    $ sajka word 3

This prints a three-syllable word as a tab-separated grid of
``lateral/vertical`` phonemes.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
