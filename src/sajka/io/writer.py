"""Word text writing."""

from pathlib import Path

from sajka.domain import Word


def write_word(word: Word, path: Path) -> Path:
    """Write a word's grid text to a file.

    Args:
        word: Word to write
        path: Output file (parent directories are created)

    Returns:
        Path written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(word.to_text(), encoding="utf-8")
    return path
