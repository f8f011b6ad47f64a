"""Command-line interface: one subcommand per puzzle."""

import argparse
import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from mathpuzzles.card import CardParameters, NumberOfCards, card
from mathpuzzles.logging_utils import configure_logging
from mathpuzzles.scrabble import OutputFormat, ScrabbleParameters, scrabble
from mathpuzzles.scrabble.solver import MAX_PARAMETER
from mathpuzzles.spinning_table import SpinningTableParameters, spinning_table

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _checked(parse: Callable[[str], T]) -> Callable[[str], T]:
    """Wrap a parser so that its `ValueError`s become argparse usage errors."""

    def wrapper(text: str) -> T:
        try:
            return parse(text)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from None

    return wrapper


def _int_in_range(low: int, high: int) -> Callable[[str], int]:
    def parse(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise ValueError(f"invalid integer: '{text}'") from None
        if not low <= value <= high:
            raise ValueError(f"{value} is not between {low} and {high}")
        return value

    return parse


def run_spinning_table(args: argparse.Namespace) -> None:
    parameters = SpinningTableParameters(args.number_of_seats, args.include_redundant_solutions)
    for solution in spinning_table(parameters):
        print(solution)


def run_scrabble(args: argparse.Namespace) -> None:
    parameters = ScrabbleParameters(args.hand_size, args.target_score, args.output)
    result = scrabble(parameters)
    text = str(result)
    # An empty list prints nothing at all.
    if parameters.output is OutputFormat.COUNT or result.total:
        print(text)


def run_card(args: argparse.Namespace) -> None:
    print(card(CardParameters(args.number_of_cards)))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all the puzzles."""
    parser = argparse.ArgumentParser(
        prog="mathpuzzles",
        description="Solutions to the Think Maths puzzles.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Write debugging diagnostics to stderr."
    )
    subparsers = parser.add_subparsers(dest="puzzle", required=True, metavar="PUZZLE")

    table = subparsers.add_parser(
        "spinning-table",
        help="Puzzle 1 - Spinning table.",
        description="Seatings where no rotation puts two investors in their own seat.",
    )
    table.add_argument(
        "-n",
        "--number-of-seats",
        type=_checked(_int_in_range(1, 2**63 - 1)),
        default=7,
        help="The number of seats at the table (default: %(default)s).",
    )
    table.add_argument(
        "--include-redundant-solutions",
        action="store_true",
        help="Include the rotations of each solution.",
    )
    table.set_defaults(run=run_spinning_table)

    # `-h` is the hand size here, so help is only available as `--help`.
    hands = subparsers.add_parser(
        "scrabble",
        help="Puzzle 2 - Scrabble hands with a given score.",
        description="Count or list the distinct hands of Scrabble tiles with a given score.",
        add_help=False,
    )
    hands.add_argument("--help", action="help", help="Show this help message and exit.")
    hands.add_argument(
        "-h",
        "--hand-size",
        type=_checked(_int_in_range(0, MAX_PARAMETER)),
        default=7,
        help="The number of tiles in a hand (default: %(default)s).",
    )
    hands.add_argument(
        "-s",
        "--target-score",
        type=_checked(_int_in_range(0, MAX_PARAMETER)),
        default=46,
        help="The target score for a hand (default: %(default)s).",
    )
    hands.add_argument(
        "--output",
        type=_checked(OutputFormat.parse),
        choices=list(OutputFormat),
        default=OutputFormat.COUNT,
        help="How the solution will be presented (default: %(default)s).",
    )
    hands.set_defaults(run=run_scrabble)

    cards = subparsers.add_parser(
        "card",
        help="Puzzle 3 - Card flips.",
        description="An optimal sequence of flips turning all cards face down.",
    )
    cards.add_argument(
        "-n",
        "--number-of-cards",
        type=_checked(NumberOfCards.parse),
        default=NumberOfCards(4),
        help="The number of cards to play with (default: 4).",
    )
    cards.set_defaults(run=run_card)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Parse the command line and print the solution of the chosen puzzle."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)
    logger.debug("Solving %s with %s", args.puzzle, vars(args))
    args.run(args)
