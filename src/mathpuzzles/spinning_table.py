"""Produces the solutions to the spinning table puzzle.

Problem statement: exactly one of your seven investors sits in the correct place,
and the other six arrange themselves randomly.  Find an arrangement the other six
investors could make such that there is no rotation of the table that puts at
least two of the investors in the correct seat.
"""

import logging
from dataclasses import dataclass
from collections.abc import Iterator
from itertools import islice

import numpy as np

logger = logging.getLogger(__name__)

BATCH_SIZE = 50_000
"""Number of arrangements checked per numpy batch."""


@dataclass(frozen=True)
class SpinningTableParameters:
    """Parameters for solving variants of the spinning table puzzle."""

    number_of_seats: int = 7
    """The number of seats at the table."""

    include_redundant_solutions: bool = False
    """If set, the rotations of each solution are included in the result."""

    def __post_init__(self) -> None:
        if isinstance(self.number_of_seats, bool) or not isinstance(self.number_of_seats, int):
            raise ValueError(f"number_of_seats must be an integer, got {self.number_of_seats!r}.")
        if self.number_of_seats < 1:
            raise ValueError(f"number_of_seats must be positive, got {self.number_of_seats}.")


def correctly_seated_counts(arrangements: np.ndarray) -> np.ndarray:
    """Count the correctly seated investors for every rotation of every arrangement.

    Args:
        arrangements: Integer array of shape (n_arrangements, n_seats), where
            element [i, s] is the investor sitting in seat s + 1.

    Returns:
        Integer array of shape (n_arrangements, n_seats), where element [i, r] is
        the number of investors in their own seat after rotating arrangement i
        right by r seats.
    """
    n_seats = arrangements.shape[1]
    seat_numbers = np.arange(1, n_seats + 1)
    return np.stack(
        [(np.roll(arrangements, r, axis=1) == seat_numbers).sum(axis=1) for r in range(n_seats)],
        axis=1,
    )


def is_valid_solution(seats: list[int]) -> bool:
    """Return whether no rotation of `seats` puts two or more investors in their own seat."""
    counts = correctly_seated_counts(np.array([seats]))
    return bool((counts < 2).all())


def heap_permutations(xs: list[int]) -> Iterator[list[int]]:
    """Yield every permutation of `xs`, rearranging it in place (Heap's algorithm).

    The same list object is yielded each time, one swap after the previous
    permutation, so copy it to keep it.  Lists of three are unrolled.
    """
    n = len(xs)
    if n <= 1:
        yield xs
    elif n == 2:
        yield xs
        xs[0], xs[1] = xs[1], xs[0]
        yield xs
    else:
        yield from _heap_permutations(n, xs)


def _heap_permutations(n: int, xs: list[int]) -> Iterator[list[int]]:
    if n == 3:
        yield xs
        for j in (1, 2, 1, 2, 1):
            xs[0], xs[j] = xs[j], xs[0]
            yield xs
        return

    for i in range(n - 1):
        yield from _heap_permutations(n - 1, xs)
        # One swap between each block of permutations of the first n - 1.
        j = i if n % 2 == 0 else 0
        xs[j], xs[n - 1] = xs[n - 1], xs[j]
    yield from _heap_permutations(n - 1, xs)


def spinning_table(parameters: SpinningTableParameters) -> list[list[int]]:
    """Find the valid seatings of the investors.

    Investor 1 always sits in seat 1, and every permutation of the other
    investors is tried, in the order of `heap_permutations`.

    Returns:
        The valid arrangements, each a list of investor numbers by seat.  With
        `include_redundant_solutions`, each arrangement is followed by its right
        rotations by 1 to n - 1 seats.
    """
    n_seats = parameters.number_of_seats
    solutions: list[list[int]] = []
    n_checked = 0

    others_iter = (tuple(others) for others in heap_permutations(list(range(2, n_seats + 1))))
    while batch := list(islice(others_iter, BATCH_SIZE)):
        others = np.array(batch, dtype=np.int64).reshape(len(batch), n_seats - 1)
        arrangements = np.hstack([np.ones((len(batch), 1), dtype=np.int64), others])
        n_checked += len(batch)

        valid = (correctly_seated_counts(arrangements) < 2).all(axis=1)
        for seats in arrangements[valid]:
            solutions.append(seats.tolist())
            if parameters.include_redundant_solutions:
                # The redundant solutions are simply the distinct rotations.
                for r in range(1, n_seats):
                    solutions.append(np.roll(seats, r).tolist())

    logger.debug("Checked %s arrangements of %d seats", f"{n_checked:,}", n_seats)
    return solutions
