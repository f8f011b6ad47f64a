"""Module for tile-related classes and the standard tile distribution."""

from collections.abc import Iterable
from dataclasses import dataclass

BLANK = " "
"""Letter used to render blank tiles."""


@dataclass(frozen=True)
class Tile:
    """A tile from the Scrabble board game."""

    letter: str
    """The letter on the tile (or a space for blank tiles)."""

    value: int
    """The point value of the tile in the English edition of Scrabble."""


@dataclass(frozen=True)
class CountedTile:
    """A tile along with the number of copies of that tile in the bag."""

    tile: Tile
    """The attributes of a tile."""

    occurrences: int
    """The number of occurrences of that tile."""


def _tiles(*rows: tuple[str, int, int]) -> tuple[CountedTile, ...]:
    return tuple(
        CountedTile(Tile(letter, value), occurrences) for letter, occurrences, value in rows
    )


STANDARD_ENGLISH_TILES: tuple[CountedTile, ...] = _tiles(
    # (letter, occurrences, value)
    (BLANK, 2, 0),
    ("A", 9, 1),
    ("B", 2, 3),
    ("C", 2, 3),
    ("D", 4, 2),
    ("E", 12, 1),
    ("F", 2, 4),
    ("G", 3, 2),
    ("H", 2, 4),
    ("I", 9, 1),
    ("J", 1, 8),
    ("K", 1, 5),
    ("L", 4, 1),
    ("M", 2, 3),
    ("N", 6, 1),
    ("O", 8, 1),
    ("P", 2, 3),
    ("Q", 1, 10),
    ("R", 6, 1),
    ("S", 4, 1),
    ("T", 6, 1),
    ("U", 4, 1),
    ("V", 2, 4),
    ("W", 2, 4),
    ("X", 1, 8),
    ("Y", 2, 4),
    ("Z", 1, 10),
)
"""The distribution of tiles in a standard English edition of Scrabble®."""


def total_tiles(catalog: Iterable[CountedTile] = STANDARD_ENGLISH_TILES) -> int:
    """Return the number of physical tiles in the catalog."""
    return sum(counted_tile.occurrences for counted_tile in catalog)


def hand_score(hand: str, catalog: Iterable[CountedTile] = STANDARD_ENGLISH_TILES) -> int:
    """Compute the total point value of a hand.

    Args:
        hand: The letters of the hand, blanks rendered as spaces.
        catalog: The tile distribution giving the value of each letter.

    Returns:
        The sum of the values of the letters in the hand.

    Raises:
        ValueError: If the hand contains a letter that is not in the catalog.
    """
    values = {counted_tile.tile.letter: counted_tile.tile.value for counted_tile in catalog}
    score = 0
    for ch in hand.upper():
        if ch not in values:
            raise ValueError(f"Invalid tile character: {ch!r}")
        score += values[ch]
    return score
