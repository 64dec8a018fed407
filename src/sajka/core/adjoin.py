"""Placement search for merging one word into another.

A word is adjoined by translating it so that one of its cells lands on a
placeholder of the target. The translation is valid when every cell of the
added word lands on an empty cell or a placeholder.
"""

import logging
import random

from sajka.domain import PLACEHOLDER, Point, Word

logger = logging.getLogger(__name__)


def can_place(target: Word, addition: Word, offset: Point) -> bool:
    """Check that ``addition`` moved by ``offset`` only covers free cells of ``target``.

    Args:
        target: Word being extended
        addition: Word to place
        offset: Translation applied to ``addition``

    Returns:
        True if no real phoneme of ``target`` would be overwritten
    """
    for point in addition:
        existing = target.get(point + offset)
        if existing is not None and existing != PLACEHOLDER:
            return False
    return True


def find_placements(target: Word, addition: Word) -> list[Point]:
    """Find every valid offset for placing ``addition`` on ``target``.

    Candidates pair each placeholder of ``target`` with each cell of
    ``addition``. An offset found through several pairs is listed once per
    pair.

    Args:
        target: Word being extended
        addition: Word to place

    Returns:
        Valid offsets in discovery order
    """
    placements = []
    for anchor in target.placeholders():
        for point in addition:
            offset = anchor - point
            if can_place(target, addition, offset):
                placements.append(offset)
    return placements


def place(target: Word, addition: Word, offset: Point) -> Word:
    """Merge ``addition`` into a copy of ``target`` at ``offset``.

    Cells of ``addition`` replace whatever the copy holds at their position.

    Returns:
        New merged word
    """
    merged = target.copy()
    for point, phoneme in addition.phonemes.items():
        merged.phonemes[point + offset] = phoneme
    return merged


def adjoined(
    target: Word,
    addition: Word,
    rng: random.Random | None = None,
) -> Word | None:
    """Merge two words at a uniformly chosen valid placement.

    Neither input is modified.

    Args:
        target: Word being extended
        addition: Word to place
        rng: Random source (a fresh one if None)

    Returns:
        Merged word, or None if no valid placement exists
    """
    placements = find_placements(target, addition)
    if not placements:
        return None

    rng = rng if rng is not None else random.Random()
    offset = rng.choice(placements)
    logger.debug(
        "Placement chosen at offset %s from %d candidates",
        offset.to_tuple(), len(placements)
    )
    return place(target, addition, offset)
