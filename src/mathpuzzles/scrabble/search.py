"""Two-level backtracking search for Scrabble® hands of a given score.

The search first draws *abstract* tiles, i.e. decides how many tiles of each
point value go into the hand without choosing letters.  Only when a full hand of
abstract tiles matches the target score does it expand each value into the
distinct groups of letters that realise it, and combine those groups with the
accumulator's cartesian product.

Both levels share the same shape: an integer cursor into a fixed ordering (tile
values ascending, then letters in catalog order), one tile drawn at the cursor
per recursive call, and the cursor only ever moving forward.  A recursive call
starts at the same cursor as its caller rather than at the beginning, so that
each multiset of tiles is generated exactly once.
"""

from dataclasses import dataclass, field

from mathpuzzles.scrabble.accumulators import Accumulator
from mathpuzzles.scrabble.index import TilesByValue, TilesForValue, abstract_hand_score, drawn


@dataclass(kw_only=True)
class SearchTarget:
    """The hand being searched for."""

    hand_size: int
    """The number of tiles in a hand."""

    target_score: int
    """The total value the hand must have."""


@dataclass(kw_only=True)
class SearchStats:
    """Statistics collected during a search."""

    abstract_hands_checked: int = 0
    """Number of full abstract hands whose score was compared to the target."""

    abstract_hands_matched: int = 0
    """Number of abstract hands matching the target score."""

    draw_counts: list[dict[int, int]] = field(default_factory=list)
    """For each matching abstract hand, the number of tiles drawn per tile value."""


def draw_abstract(
    target: SearchTarget,
    tiles_by_value: TilesByValue,
    accumulator: Accumulator,
    start: int = 0,
    tiles_drawn_so_far: int = 0,
    *,
    stats: SearchStats | None = None,
) -> None:
    """Draw tiles by value until the hand is full, then expand matching hands.

    For each tile value from `start` onwards, draw one tile with that value
    (without choosing a letter) and recurse from the same value, so that the value
    can be drawn again.  Once the hand is full and its score matches the target,
    the concrete hands are added to `accumulator`.

    Args:
        target: The hand size and score being searched for.
        tiles_by_value: The weight-class index.  Its counters are restored before
            this function returns.
        accumulator: Receives the concrete hands (or their count).
        start: Index of the first tile value still eligible for drawing.
        tiles_drawn_so_far: Number of tiles drawn on the current path.
        stats: Optional statistics to update.
    """
    if tiles_drawn_so_far == target.hand_size:
        if stats is not None:
            stats.abstract_hands_checked += 1
        if abstract_hand_score(tiles_by_value) != target.target_score:
            return

        # Only values that were drawn at least once contribute letters.
        drawn_classes = [tiles for tiles in tiles_by_value.values() if tiles.drawn > 0]
        if stats is not None:
            stats.abstract_hands_matched += 1
            stats.draw_counts.append({tiles.value: tiles.drawn for tiles in drawn_classes})

        concrete_tile_combinations_by_value = []
        for tiles_for_value in drawn_classes:
            concrete_tile_combinations = type(accumulator)()
            draw_concrete(tiles_for_value, concrete_tile_combinations)
            concrete_tile_combinations_by_value.append(concrete_tile_combinations)

        accumulator.add_solutions(
            type(accumulator).cartesian_product(concrete_tile_combinations_by_value)
        )
        return

    classes = tiles_by_value.values()
    for cursor in range(start, len(classes)):
        tiles_for_value = classes[cursor]
        if tiles_for_value.drawn < tiles_for_value.number_of_tiles:
            with drawn(tiles_for_value):
                draw_abstract(
                    target,
                    tiles_by_value,
                    accumulator,
                    cursor,
                    tiles_drawn_so_far + 1,
                    stats=stats,
                )


def draw_concrete(
    tiles_for_value: TilesForValue,
    accumulator: Accumulator,
    start: int = 0,
    tiles_drawn_so_far: int = 0,
) -> None:
    """Choose letters for the abstract tiles drawn from one tile value.

    For each letter from `start` onwards, draw one copy of it and recurse from the
    same letter, until as many letters have been drawn as `tiles_for_value.drawn`.
    Each distinct group of letters is added to `accumulator` once.

    Args:
        tiles_for_value: The weight class to expand.
        accumulator: Receives the groups of letters (or their count).
        start: Index of the first letter still eligible for drawing.
        tiles_drawn_so_far: Number of letters drawn on the current path.
    """
    if tiles_drawn_so_far == tiles_for_value.drawn:
        accumulator.add_solution(tiles_for_value.concrete_hand)
        return

    live_counted_tiles = tiles_for_value.live_counted_tiles
    for cursor in range(start, len(live_counted_tiles)):
        live_counted_tile = live_counted_tiles[cursor]
        if live_counted_tile.drawn < live_counted_tile.capacity:
            with drawn(live_counted_tile):
                draw_concrete(tiles_for_value, accumulator, cursor, tiles_drawn_so_far + 1)
