"""Weight-class index over a tile catalog.

Tiles are grouped by point value.  Each group tracks how many tiles (of any
letter) have been drawn from it on the current search path, and each letter in
the group tracks how many copies of that letter have been drawn.  The counters
are mutated in place by the search, always through `drawn`, so that every
increment is undone when the recursive call returns.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Protocol, TypeAlias

from sortedcontainers import SortedDict

from mathpuzzles.scrabble.tiles import STANDARD_ENGLISH_TILES, CountedTile


class DrawCounter(Protocol):
    """Anything with a bounded, mutable draw counter."""

    drawn: int

    @property
    def capacity(self) -> int: ...


@dataclass(eq=False)
class LiveCountedTile:
    """A `CountedTile` paired with how many of them have currently been drawn."""

    counted_tile: CountedTile
    """The catalog entry for this letter."""

    drawn: int = 0
    """Number of copies of this letter drawn at the current point in the search."""

    @property
    def capacity(self) -> int:
        """Number of copies of this letter in the bag."""
        return self.counted_tile.occurrences

    @property
    def letter(self) -> str:
        return self.counted_tile.tile.letter


@dataclass(eq=False)
class TilesForValue:
    """Aggregates all the tiles for a particular tile value."""

    value: int
    """The point value shared by every tile in this class."""

    live_counted_tiles: list[LiveCountedTile] = field(default_factory=list)
    """One entry per distinct letter with this value, in catalog order."""

    number_of_tiles: int = 0
    """Total number of tiles with this value, over all letters."""

    drawn: int = 0
    """Number of tiles (no matter the letter) drawn at the current point in the search."""

    @property
    def capacity(self) -> int:
        return self.number_of_tiles

    def concrete_hand(self) -> str:
        """Render the letters currently drawn from this class, in class order."""
        return "".join(live.letter * live.drawn for live in self.live_counted_tiles)


TilesByValue: TypeAlias = SortedDict[int, TilesForValue]
"""Weight classes keyed and iterated by ascending tile value."""


def build_weight_classes(
    catalog: Iterable[CountedTile] = STANDARD_ENGLISH_TILES,
) -> TilesByValue:
    """Group the tiles of a catalog by their point value.

    Args:
        catalog: The tile distribution to index.

    Returns:
        A `SortedDict` mapping each tile value to a fresh `TilesForValue` with all
        counters at zero.  Iteration order is ascending by value, so that repeated
        searches visit the classes in the same order.
    """
    tiles_by_value: TilesByValue = SortedDict()
    for counted_tile in catalog:
        value = counted_tile.tile.value
        tiles_for_value = tiles_by_value.get(value)
        if tiles_for_value is None:
            tiles_for_value = tiles_by_value[value] = TilesForValue(value)
        tiles_for_value.live_counted_tiles.append(LiveCountedTile(counted_tile))
        tiles_for_value.number_of_tiles += counted_tile.occurrences
    return tiles_by_value


def abstract_hand_score(tiles_by_value: TilesByValue) -> int:
    """Total value of the tiles drawn so far, over all classes."""
    return sum(value * tiles.drawn for value, tiles in tiles_by_value.items())


@contextmanager
def drawn(counter: DrawCounter) -> Iterator[None]:
    """Draw one tile from `counter` for the duration of the `with` block.

    The tile is always put back when the block exits, however it exits.
    """
    assert counter.drawn < counter.capacity, (
        f"Cannot draw more than {counter.capacity} tiles from {counter!r}."
    )
    counter.drawn += 1
    try:
        yield
    finally:
        counter.drawn -= 1
