"""Produces a solution to the card puzzle.

Problem statement: submit an optimal set of flips (one that uses the minimum
number of flips) that guarantees all four cards will eventually be face down,
given any starting position.

Expressed numerically, a sequence of flips must visit every number from 0 to
2**n - 1 exactly once, flipping a single bit at a time.  The solution for n cards
is the solution for n - 1 cards, then a flip of card n, then the solution for
n - 1 cards again: every state of the first n - 1 cards is explored once with
card n in each position, so no state is visited twice.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bitarray import bitarray
from bitarray.util import zeros

logger = logging.getLogger(__name__)

MAX_CARDS = 255
"""Largest number of cards accepted."""

STATE_COUNTER_BITS = 64
"""Width of the counter holding the number of card states."""


class NumberOfStatesOverflowError(ValueError):
    """The number of states (and thus of flips) for the number of cards is too large."""

    def __init__(self, number_of_cards: int):
        self.number_of_cards = number_of_cards
        super().__init__(f"the number of flips required for {number_of_cards} cards is too large!")


@dataclass(frozen=True)
class NumberOfCards:
    """A validated number of cards."""

    number_of_cards: int
    """The number of cards to play with."""

    def __post_init__(self) -> None:
        n = self.number_of_cards
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError(f"number of cards must be an integer, got {n!r}.")
        if not 0 <= n <= MAX_CARDS:
            raise ValueError(f"number of cards must be between 0 and {MAX_CARDS}, got {n}.")
        if n >= STATE_COUNTER_BITS:
            raise NumberOfStatesOverflowError(n)

    @classmethod
    def parse(cls, text: str) -> "NumberOfCards":
        """Parse a number of cards from a command-line argument.

        Raises:
            ValueError: If `text` is not an integer in range.
            NumberOfStatesOverflowError: If there are too many states to count.
        """
        try:
            n = int(text)
        except ValueError:
            raise ValueError(f"invalid number of cards: '{text}'") from None
        return cls(n)

    @property
    def number_of_card_states(self) -> int:
        """The number of possible face up/face down states for the cards."""
        return 1 << self.number_of_cards


@dataclass(frozen=True)
class CardParameters:
    """Parameters for solving variants of the card puzzle."""

    number_of_cards: NumberOfCards = NumberOfCards(4)
    """The number of cards to play with."""


def card(parameters: CardParameters) -> list[int]:
    """Return an optimal flip sequence, as 1-indexed card numbers.

    The sequence has 2**n - 1 flips for n cards.
    """
    number_of_cards = parameters.number_of_cards.number_of_cards
    solution: list[int] = []
    # Incrementally solve for one more card at a time.
    for m in range(1, number_of_cards + 1):
        solution += [m] + solution

    assert len(solution) == parameters.number_of_cards.number_of_card_states - 1
    logger.debug("Generated %s flips for %d cards", f"{len(solution):,}", number_of_cards)
    return solution


def visited_states(flips: Sequence[int], number_of_cards: int, start: int = 0) -> bitarray:
    """Apply a flip sequence and record every state visited.

    Args:
        flips: 1-indexed card numbers to flip, in order.
        number_of_cards: The number of cards.
        start: Initial state, bit i set when card i + 1 is face up.

    Returns:
        A bitarray of length 2**number_of_cards with bit s set when state s was visited.

    Raises:
        ValueError: If a flip names a card that does not exist.
    """
    visited = zeros(1 << number_of_cards)
    state = start
    visited[state] = 1
    for card_number in flips:
        if not 1 <= card_number <= number_of_cards:
            raise ValueError(f"Invalid card number {card_number} for {number_of_cards} cards.")
        state ^= 1 << (card_number - 1)
        visited[state] = 1
    return visited


def flips_cover_all_states(flips: Sequence[int], number_of_cards: int) -> bool:
    """Return whether the flips turn every card face down, whatever the starting state.

    Flipping from state s passes through state 0 exactly when the same flips
    starting from 0 pass through s, so it is enough to check that every state is
    visited starting from 0.
    """
    return visited_states(flips, number_of_cards).all()
