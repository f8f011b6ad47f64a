"""Produces the solution to the Scrabble® puzzle.

Problem statement: how many ways, from the 100 standard Scrabble® tiles, can you
choose seven which total 46 points?  Order does not matter and identical letters
are indistinguishable, so we are counting distinct groups of seven letters.
"""

import logging
from dataclasses import dataclass
from time import time

from mathpuzzles.scrabble.accumulators import OutputFormat, SolutionCount, SolutionList
from mathpuzzles.scrabble.index import build_weight_classes
from mathpuzzles.scrabble.search import SearchStats, SearchTarget, draw_abstract
from mathpuzzles.scrabble.tiles import STANDARD_ENGLISH_TILES, CountedTile

logger = logging.getLogger(__name__)

MAX_PARAMETER = 2**32 - 1
"""Largest hand size or target score accepted."""


@dataclass(frozen=True)
class ScrabbleParameters:
    """Parameters for solving variants of the Scrabble® puzzle."""

    hand_size: int = 7
    """The number of tiles in a hand."""

    target_score: int = 46
    """The target score for a hand."""

    output: OutputFormat = OutputFormat.COUNT
    """How the solution will be presented."""

    def __post_init__(self) -> None:
        """Validate the parameters."""
        for name in ("hand_size", "target_score"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}.")
            if not 0 <= value <= MAX_PARAMETER:
                raise ValueError(f"{name} must be between 0 and {MAX_PARAMETER}, got {value}.")
        if not isinstance(self.output, OutputFormat):
            object.__setattr__(self, "output", OutputFormat.parse(str(self.output)))


Output = SolutionCount | SolutionList
"""The number of valid hands, or the sorted list of valid hands.

`str(output)` is the text printed by the command line.
"""


def scrabble(
    parameters: ScrabbleParameters,
    catalog: tuple[CountedTile, ...] = STANDARD_ENGLISH_TILES,
) -> Output:
    """Solve the puzzle in the output format given by `parameters`.

    Every call builds its own weight-class index, so calls are independent and
    repeated calls give identical results.
    """
    start_time = time()
    tiles_by_value = build_weight_classes(catalog)
    logger.debug(
        "Indexed %d tiles into %d tile values: %s",
        sum(tiles.number_of_tiles for tiles in tiles_by_value.values()),
        len(tiles_by_value),
        ", ".join(f"{value}x{tiles.number_of_tiles}" for value, tiles in tiles_by_value.items()),
    )

    accumulator = parameters.output.accumulator()
    stats = SearchStats()
    draw_abstract(
        SearchTarget(hand_size=parameters.hand_size, target_score=parameters.target_score),
        tiles_by_value,
        accumulator,
        stats=stats,
    )
    accumulator.finish()

    logger.debug(
        "Checked %s abstract hands, %s matched the target score",
        f"{stats.abstract_hands_checked:,}",
        f"{stats.abstract_hands_matched:,}",
    )
    logger.info(
        "Found %s hands of %d tiles scoring %d in %.3fs",
        f"{accumulator.total:,}",
        parameters.hand_size,
        parameters.target_score,
        time() - start_time,
    )
    return accumulator


def count_hands(hand_size: int = 7, target_score: int = 46) -> int:
    """Return the number of distinct hands of `hand_size` tiles scoring `target_score`."""
    result = scrabble(ScrabbleParameters(hand_size, target_score, OutputFormat.COUNT))
    return result.total


def list_hands(hand_size: int = 7, target_score: int = 46) -> list[str]:
    """Return the sorted distinct hands of `hand_size` tiles scoring `target_score`."""
    result = scrabble(ScrabbleParameters(hand_size, target_score, OutputFormat.LIST))
    assert isinstance(result, SolutionList)
    return result.hands
