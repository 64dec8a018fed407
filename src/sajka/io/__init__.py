"""Word text I/O layer for sajka.

Key responsibilities:
- Resolve word arguments (literal text, file path, or ``-`` for stdin)
- Parse them into Word models
- Write generated words to files

Key functions:
- read_word_text: Resolve a source to grid text
- load_word: Resolve and parse a word
- write_word: Save a word's grid text
"""

from sajka.io.reader import STDIN_MARKER, load_word, read_word_text
from sajka.io.writer import write_word

__all__ = [
    "STDIN_MARKER",
    "load_word",
    "read_word_text",
    "write_word",
]
