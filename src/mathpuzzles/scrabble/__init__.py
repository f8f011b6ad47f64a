"""Counts or lists the distinct Scrabble® hands with a given total score."""

from mathpuzzles.scrabble.accumulators import OutputFormat, SolutionCount, SolutionList
from mathpuzzles.scrabble.solver import (
    Output,
    ScrabbleParameters,
    count_hands,
    list_hands,
    scrabble,
)
from mathpuzzles.scrabble.tiles import STANDARD_ENGLISH_TILES, CountedTile, Tile, hand_score

__all__ = [
    "STANDARD_ENGLISH_TILES",
    "CountedTile",
    "Output",
    "OutputFormat",
    "ScrabbleParameters",
    "SolutionCount",
    "SolutionList",
    "Tile",
    "count_hands",
    "hand_score",
    "list_hands",
    "scrabble",
]
