"""Word text reading.

Words are passed on the command line as literal grid text, as a path to a
file holding the grid, or as ``-`` to read the grid from stdin.
"""

import sys
from pathlib import Path
from typing import TextIO

from sajka.domain import Word
from sajka.exceptions import WordFormatError

STDIN_MARKER = "-"


def read_word_text(source: str, stdin: TextIO | None = None) -> str:
    """Resolve a word source to its grid text.

    Args:
        source: ``-`` for stdin, a path to an existing file, or literal word text
        stdin: Stream used for ``-`` (``sys.stdin`` if None)

    Returns:
        Word grid text

    Raises:
        WordFormatError: If the file cannot be read or is not UTF-8 text
    """
    if source == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        return stream.read()

    # Word text holds tabs/newlines, never a plausible file name
    if "\t" not in source and "\n" not in source:
        path = Path(source)
        try:
            is_file = path.is_file()
        except OSError:
            is_file = False
        if is_file:
            try:
                return path.read_text(encoding="utf-8")
            except (UnicodeDecodeError, OSError) as e:
                raise WordFormatError(f"cannot read {path}: {e}") from e

    return source


def load_word(source: str, stdin: TextIO | None = None) -> Word:
    """Read and parse a word.

    Raises:
        WordFormatError: If the text is not a valid word
    """
    return Word.parse(read_word_text(source, stdin))
