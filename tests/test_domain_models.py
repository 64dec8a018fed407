"""Tests for domain models to verify they work correctly."""

import random

import pytest

from sajka.domain import (
    COMPATIBLE,
    CONSONANTS,
    PLACEHOLDER,
    ROTATION_MUTATION,
    VOWELS,
    BoundingRange,
    Phoneme,
    PhonemeType,
    Point,
    Word,
)
from sajka.exceptions import EmptyRangeError, PhonemeFormatError, WordFormatError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(3, -2)
        assert p.x == 3
        assert p.y == -2

    def test_point_arithmetic(self) -> None:
        """Test negation, addition and subtraction."""
        a = Point(1, 2)
        b = Point(-3, 5)
        assert -a == Point(-1, -2)
        assert a + b == Point(-2, 7)
        assert a - b == Point(4, -3)

    def test_point_neighbors(self) -> None:
        """Test the four edge-adjacent neighbours."""
        assert set(Point(0, 0).neighbors()) == {
            Point(-1, 0),
            Point(1, 0),
            Point(0, -1),
            Point(0, 1),
        }

    def test_point_hashable(self) -> None:
        """Test points work as dictionary keys."""
        grid = {Point(1, 1): "a"}
        assert grid[Point(1, 1)] == "a"

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 3  # type: ignore


class TestBoundingRange:
    """Tests for BoundingRange class."""

    def test_of_points(self) -> None:
        """Test the minimal enclosing rectangle."""
        bounds = BoundingRange.of([Point(1, -2), Point(-1, 0), Point(2, 1)])
        assert bounds == BoundingRange(min_x=-1, max_x=2, min_y=-2, max_y=1)
        assert bounds.width == 4
        assert bounds.height == 4
        assert bounds.origin == Point(-1, -2)

    def test_of_empty_raises(self) -> None:
        """Test that an empty point set has no range."""
        with pytest.raises(EmptyRangeError):
            BoundingRange.of([])

    def test_iteration_row_major(self) -> None:
        """Test points come left-to-right, top-to-bottom."""
        bounds = BoundingRange(0, 1, 0, 1)
        assert list(bounds) == [Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)]

    def test_iteration_nonzero_origin(self) -> None:
        """Test every row restarts at min_x."""
        bounds = BoundingRange(min_x=1, max_x=2, min_y=-1, max_y=0)
        assert list(bounds) == [Point(1, -1), Point(2, -1), Point(1, 0), Point(2, 0)]

    def test_iteration_restartable(self) -> None:
        """Test a range can be iterated more than once."""
        bounds = BoundingRange(-2, 0, 3, 4)
        first = list(bounds)
        assert list(bounds) == first
        assert len(first) == bounds.width * bounds.height

    def test_contains(self) -> None:
        """Test point membership."""
        bounds = BoundingRange(-1, 1, -1, 1)
        assert Point(0, 0) in bounds
        assert Point(2, 0) not in bounds


class TestPhoneme:
    """Tests for Phoneme class."""

    def test_standard_notation(self) -> None:
        """Test str() renders lateral/vertical."""
        assert str(Phoneme("p'", "t'")) == "p'/t'"

    def test_image_name(self) -> None:
        """Test the sample image file name."""
        assert Phoneme("k", "m").image_name == "k_m.png"

    def test_type(self) -> None:
        """Test vowel/consonant classification."""
        assert Phoneme("a", "i").type == PhonemeType.VOWEL
        assert Phoneme("s", "p").type == PhonemeType.CONSONANT
        assert PLACEHOLDER.type == PhonemeType.VOWEL

    def test_placeholder(self) -> None:
        """Test the placeholder sentinel."""
        assert PLACEHOLDER == Phoneme("ə", "ə")

    def test_is_valid_consonant_table(self) -> None:
        """Consonant pairs are valid exactly when listed as compatible."""
        for lateral in CONSONANTS:
            for vertical in CONSONANTS:
                expected = vertical in COMPATIBLE[lateral]
                assert Phoneme.is_valid(lateral, vertical) is expected, (lateral, vertical)

    def test_is_valid_vowels(self) -> None:
        """All vowel pairs are valid."""
        for lateral in VOWELS:
            for vertical in VOWELS:
                assert Phoneme.is_valid(lateral, vertical)

    def test_is_valid_mixed(self) -> None:
        """Mixed vowel/consonant pairs are invalid."""
        for vowel in VOWELS:
            for consonant in CONSONANTS:
                assert not Phoneme.is_valid(vowel, consonant)
                assert not Phoneme.is_valid(consonant, vowel)

    def test_is_valid_unknown_symbols(self) -> None:
        """Unknown symbols are invalid."""
        assert not Phoneme.is_valid("x", "p")
        assert not Phoneme.is_valid("p", "")

    def test_parse_roundtrip(self) -> None:
        """Every valid phoneme parses back from its notation."""
        for lateral in CONSONANTS + VOWELS:
            for vertical in CONSONANTS + VOWELS:
                if Phoneme.is_valid(lateral, vertical):
                    p = Phoneme(lateral, vertical)
                    assert Phoneme.parse(str(p)) == p

    def test_parse_typographic_apostrophe(self) -> None:
        """Right single quotation marks are read as apostrophes."""
        assert Phoneme.parse("p’/t’") == Phoneme("p'", "t'")

    @pytest.mark.parametrize("text", ["a", "a/a/a", "", "p'"])
    def test_parse_wrong_separator_count(self, text: str) -> None:
        """Text without exactly one slash is rejected."""
        with pytest.raises(PhonemeFormatError, match="single slash"):
            Phoneme.parse(text)

    @pytest.mark.parametrize("text", ["a/p", "p/s", "x/y", "h/j"])
    def test_parse_invalid_pair(self, text: str) -> None:
        """Incompatible pairs are rejected and the error names the text."""
        with pytest.raises(PhonemeFormatError, match="is invalid") as exc_info:
            Phoneme.parse(text)
        assert exc_info.value.text == text

    def test_rotate_override(self) -> None:
        """Swapped pairs found in the mutation table are replaced."""
        assert Phoneme("s", "p").rotate() == Phoneme("p", "f")
        assert Phoneme("ʂ", "k").rotate() == Phoneme("k", "l")
        assert Phoneme("s", "l").rotate() == Phoneme("f", "s")
        assert Phoneme("p'", "l").rotate() == Phoneme("p'", "p'")

    def test_rotate_plain_swap(self) -> None:
        """Pairs without a table entry are just swapped."""
        assert Phoneme("p", "f").rotate() == Phoneme("f", "p")
        assert Phoneme("a", "u").rotate() == Phoneme("u", "a")
        assert PLACEHOLDER.rotate() == PLACEHOLDER

    def test_rotate_not_self_inverse(self) -> None:
        """Rotating twice does not restore phonemes hit by the table."""
        p = Phoneme("s", "p")
        assert p.rotate().rotate() == Phoneme("f", "p")
        assert p.rotate().rotate() != p

    def test_rotation_table_only_consonants(self) -> None:
        """The mutation table never touches vowels."""
        for key, value in ROTATION_MUTATION.items():
            assert key.type == PhonemeType.CONSONANT
            assert value.type == PhonemeType.CONSONANT

    def test_random_vowel(self) -> None:
        """Random vowels use vowel symbols on both sides."""
        rng = random.Random(1)
        for _ in range(100):
            p = Phoneme.random_vowel(rng)
            assert p.lateral in VOWELS
            assert p.vertical in VOWELS

    def test_random_consonant(self) -> None:
        """Random consonants are always compatible pairs."""
        rng = random.Random(2)
        for _ in range(200):
            p = Phoneme.random_consonant(rng)
            assert p.type == PhonemeType.CONSONANT
            assert Phoneme.is_valid(p.lateral, p.vertical)


class TestWord:
    """Tests for Word class."""

    @pytest.fixture
    def pair(self) -> Word:
        return Word({Point(0, 0): Phoneme("a", "a"), Point(1, 0): Phoneme("p", "p")})

    def test_to_text(self, pair: Word) -> None:
        """Test tab-separated rendering."""
        assert pair.to_text() == "a/a\tp/p\n"
        assert str(pair) == "a/a\tp/p\n"

    def test_parse(self, pair: Word) -> None:
        """Test parsing back the rendered text."""
        assert Word.parse("a/a\tp/p\n") == pair

    def test_to_text_empty_cells(self) -> None:
        """Missing cells render as empty fields."""
        word = Word({Point(0, 0): Phoneme("a", "a"), Point(1, 1): Phoneme("p", "p")})
        text = word.to_text()
        assert text == "a/a\t\n\tp/p\n"
        assert Word.parse(text) == word

    def test_to_text_range_relative(self) -> None:
        """Rendering starts at the top-left of the bounding range."""
        word = Word({Point(-1, -1): Phoneme("a", "a"), Point(0, -1): Phoneme("p", "p")})
        assert word.to_text() == "a/a\tp/p\n"

    def test_parse_normalizes_origin(self) -> None:
        """Parsing rendered text yields the word moved to (0, 0)."""
        word = Word(
            {
                Point(-2, 1): Phoneme("k", "f"),
                Point(-1, 1): Phoneme("i", "u"),
                Point(-1, 2): PLACEHOLDER,
            }
        )
        parsed = Word.parse(word.to_text())
        assert parsed == word.normalized()
        assert parsed.range().origin == Point(0, 0)

    def test_parse_strips_spaces(self) -> None:
        """Fields are trimmed of surrounding spaces."""
        word = Word.parse("  a/a \t p/p\n")
        assert word.phonemes == {Point(0, 0): Phoneme("a", "a"), Point(1, 0): Phoneme("p", "p")}

    def test_parse_bad_token(self) -> None:
        """Bad tokens report their line and column."""
        with pytest.raises(WordFormatError) as exc_info:
            Word.parse("a/a\t\n\tx/y\n")
        error = exc_info.value
        assert error.line == 1
        assert error.column == 1
        assert "x/y" in str(error)
        assert isinstance(error.__cause__, PhonemeFormatError)

    @pytest.mark.parametrize("text", ["", "\n", "\t \t\n"])
    def test_parse_no_phonemes(self, text: str) -> None:
        """Text without phonemes is not a word."""
        with pytest.raises(WordFormatError, match="no phonemes"):
            Word.parse(text)

    def test_range(self, pair: Word) -> None:
        """Test bounding range of the grid."""
        assert pair.range() == BoundingRange(0, 1, 0, 0)

    def test_range_empty(self) -> None:
        """An empty grid has no range."""
        with pytest.raises(EmptyRangeError):
            Word({}).range()

    def test_rotate_pair(self, pair: Word) -> None:
        """Test rotation of a horizontal pair."""
        rotated = pair.rotate()
        assert rotated.phonemes == {
            Point(0, 0): Phoneme("a", "a"),
            Point(0, -1): Phoneme("p", "p"),
        }
        assert rotated.to_text() == "p/p\na/a\n"

    def test_rotate_reflects_about_bottom_left(self) -> None:
        """Cells move across the anti-diagonal through (min_x, max_y)."""
        word = Word({Point(0, 0): Phoneme("k", "f"), Point(0, 1): Phoneme("a", "i")})
        rotated = word.rotate()
        assert rotated.phonemes == {
            Point(1, 0): Phoneme("f", "k"),
            Point(0, 0): Phoneme("i", "a"),
        }

    def test_rotate_applies_mutation(self) -> None:
        """Phonemes are rotated individually."""
        word = Word({Point(0, 0): Phoneme("s", "p")})
        assert word.rotate() == Word({Point(0, 0): Phoneme("p", "f")})

    def test_rotate_returns_new_word(self, pair: Word) -> None:
        """Rotation leaves the original untouched."""
        before = pair.copy()
        pair.rotate()
        assert pair == before

    def test_placeholders(self) -> None:
        """Test placeholder lookup and consonant count."""
        word = Word(
            {
                Point(0, 0): Phoneme("a", "a"),
                Point(1, 0): Phoneme("p", "p"),
                Point(1, -1): PLACEHOLDER,
            }
        )
        assert word.placeholders() == [Point(1, -1)]
        assert word.consonant_count() == 1
        assert len(word) == 3
        assert Point(1, -1) in word

    def test_translated(self, pair: Word) -> None:
        """Test moving a word."""
        moved = pair.translated(Point(2, -3))
        assert moved.range() == BoundingRange(2, 3, -3, -3)
        assert moved[Point(3, -3)] == Phoneme("p", "p")
