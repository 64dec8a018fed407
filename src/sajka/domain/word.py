"""Word representation on the phoneme grid.

A word (or a single syllable) is a sparse mapping from grid points to
phonemes. A missing point has no sound; a point holding ``PLACEHOLDER`` is a
reserved silent slot that adjoining syllables may fill.
"""

import random
from collections.abc import Iterator
from dataclasses import dataclass

from sajka.domain.geometry import BoundingRange, Point
from sajka.domain.phoneme import PLACEHOLDER, Phoneme
from sajka.exceptions import PhonemeFormatError, WordFormatError

CELL_SEPARATOR = "\t"
ROW_SEPARATOR = "\n"


@dataclass
class Word:
    """A word or syllable in Sajk'a.

    Words compare equal when their grids hold the same phonemes at the same
    points. Only ``adjoin`` mutates a word; every other operation returns a
    new one.

    Attributes:
        phonemes: Mapping of grid point to phoneme
    """

    phonemes: dict[Point, Phoneme]

    def __len__(self) -> int:
        return len(self.phonemes)

    def __contains__(self, point: object) -> bool:
        return point in self.phonemes

    def __getitem__(self, point: Point) -> Phoneme:
        return self.phonemes[point]

    def __iter__(self) -> Iterator[Point]:
        return iter(self.phonemes)

    def __str__(self) -> str:
        return self.to_text()

    def get(self, point: Point) -> Phoneme | None:
        return self.phonemes.get(point)

    def range(self) -> BoundingRange:
        """Get the bounding range of the occupied points.

        Raises:
            EmptyRangeError: If the word has no phonemes
        """
        return BoundingRange.of(self.phonemes)

    def copy(self) -> "Word":
        return Word(dict(self.phonemes))

    def placeholders(self) -> list[Point]:
        """Get the points holding a placeholder, in grid order."""
        return [p for p, phoneme in self.phonemes.items() if phoneme == PLACEHOLDER]

    def consonant_count(self) -> int:
        return sum(1 for phoneme in self.phonemes.values() if phoneme.is_consonant)

    def translated(self, offset: Point) -> "Word":
        """Return a copy with every point moved by ``offset``."""
        return Word({p + offset: phoneme for p, phoneme in self.phonemes.items()})

    def normalized(self) -> "Word":
        """Return a copy whose bounding range starts at (0, 0).

        This is the word ``Word.parse`` reconstructs from ``to_text``.
        """
        return self.translated(-self.range().origin)

    def to_text(self) -> str:
        """Render the word as a tab-separated grid of phonemes.

        Rows and columns cover the bounding range. Empty cells are empty
        fields and every row ends with a newline.

        Returns:
            Word text

        Raises:
            EmptyRangeError: If the word has no phonemes
        """
        bounds = self.range()
        rows = []
        for y in range(bounds.min_y, bounds.max_y + 1):
            cells = []
            for x in range(bounds.min_x, bounds.max_x + 1):
                phoneme = self.phonemes.get(Point(x, y))
                cells.append(str(phoneme) if phoneme is not None else "")
            rows.append(CELL_SEPARATOR.join(cells) + ROW_SEPARATOR)
        return "".join(rows)

    def rotate(self) -> "Word":
        """Apply the rotation mutation to the whole word.

        The grid is reflected across the anti-diagonal through the bottom-left
        corner of the bounding range and every phoneme is rotated.

        Returns:
            New rotated word
        """
        bounds = self.range()
        pivot = Point(bounds.min_x, bounds.max_y)
        return Word(
            {
                Point(pivot.y - p.y, pivot.x - p.x): phoneme.rotate()
                for p, phoneme in self.phonemes.items()
            }
        )

    def adjoin(self, other: "Word", rng: random.Random | None = None) -> bool:
        """Merge another word into this one at a random valid placement.

        The other word must cover at least one of this word's placeholders and
        may only overlap placeholders or empty cells. This word is mutated in
        place.

        Args:
            other: Word to merge in
            rng: Random source for choosing among valid placements

        Returns:
            True if the words were merged, False if no placement exists
        """
        from sajka.core.adjoin import adjoined

        merged = adjoined(self, other, rng=rng)
        if merged is None:
            return False
        self.phonemes.update(merged.phonemes)
        return True

    @classmethod
    def syllable(
        cls,
        rng: random.Random | None = None,
        max_attempts: int | None = None,
    ) -> "Word":
        """Generate a single random syllable.

        Args:
            rng: Random source (a fresh one if None)
            max_attempts: Give up after this many rejected attempts (None = never)

        Returns:
            Syllable word
        """
        from sajka.core.syllable import SyllableGenerator

        return SyllableGenerator(rng=rng, max_attempts=max_attempts).generate()

    @classmethod
    def parse(cls, text: str) -> "Word":
        """Parse a word from its tab-separated grid text.

        Column ``j`` of line ``i`` becomes point ``(j, i)``. Fields are stripped
        of surrounding spaces and empty fields are skipped.

        Args:
            text: Word text

        Returns:
            Word instance

        Raises:
            WordFormatError: If a field is not a valid phoneme or the text is empty
        """
        phonemes: dict[Point, Phoneme] = {}
        for i, line in enumerate(text.splitlines()):
            for j, cell in enumerate(line.split(CELL_SEPARATOR)):
                token = cell.strip(" ")
                if token == "":
                    continue
                try:
                    phonemes[Point(j, i)] = Phoneme.parse(token)
                except PhonemeFormatError as e:
                    raise WordFormatError(str(e), line=i, column=j) from e

        if not phonemes:
            raise WordFormatError("no phonemes found")

        return cls(phonemes)
