"""Solution accumulators for the Scrabble® hand search.

The same search can either count the matching hands or list them.  Both
strategies share one interface, and the search is written against the
constrained type variable `Accumulator` so that only these two are accepted.
"""

from collections.abc import Callable, Iterator
from enum import Enum
from itertools import product
from math import prod
from typing import TypeVar


class SolutionCount:
    """Accumulator that simply counts the number of solutions.

    This is cheaper than listing the solutions, because the cartesian product of
    partial solutions reduces to the product of their counts.
    """

    __slots__ = ("count",)

    def __init__(self, count: int = 0):
        self.count = count

    def add_solution(self, solution_fn: Callable[[], str]) -> None:
        """Count one solution.  `solution_fn` is never called."""
        self.count += 1

    def add_solutions(self, other: "SolutionCount") -> None:
        self.count += other.count

    @classmethod
    def cartesian_product(cls, solutions_by_value: list["SolutionCount"]) -> "SolutionCount":
        return cls(prod(solutions.count for solutions in solutions_by_value))

    def finish(self) -> None:
        """Nothing to do for a count."""

    @property
    def total(self) -> int:
        """Number of solutions accumulated so far."""
        return self.count

    def __str__(self) -> str:
        return str(self.count)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SolutionCount):
            return self.count == other.count
        return NotImplemented

    def __repr__(self) -> str:
        return f"SolutionCount({self.count})"


class SolutionList:
    """Accumulator that lists every hand matching the target score."""

    __slots__ = ("hands",)

    def __init__(self, hands: list[str] | None = None):
        self.hands: list[str] = hands if hands is not None else []

    def add_solution(self, solution_fn: Callable[[], str]) -> None:
        self.hands.append(solution_fn())

    def add_solutions(self, other: "SolutionList") -> None:
        self.hands.extend(other.hands)

    @classmethod
    def cartesian_product(cls, solutions_by_value: list["SolutionList"]) -> "SolutionList":
        """Join one partial hand from each tile value, for every combination.

        Characters keep the order of `solutions_by_value`, i.e. ascending tile value.
        """
        return cls(["".join(parts) for parts in product(*(s.hands for s in solutions_by_value))])

    def finish(self) -> None:
        # Sort the results for easier eyeballing.
        self.hands.sort()

    @property
    def total(self) -> int:
        return len(self.hands)

    def __iter__(self) -> Iterator[str]:
        return iter(self.hands)

    def __str__(self) -> str:
        return "\n".join(self.hands)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SolutionList):
            return self.hands == other.hands
        return NotImplemented

    def __repr__(self) -> str:
        return f"SolutionList({self.hands!r})"


Accumulator = TypeVar("Accumulator", SolutionCount, SolutionList)
"""Either accumulator; the search never mixes the two."""


class OutputFormat(str, Enum):
    """Choices for how the solution should be presented."""

    COUNT = "count"
    LIST = "list"

    @classmethod
    def parse(cls, text: str) -> "OutputFormat":
        """Parse an output format name, ignoring case."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Invalid output format '{text}' (choose from {choices}).") from None

    @property
    def accumulator(self) -> type[SolutionCount] | type[SolutionList]:
        """The accumulator class producing this output format."""
        return SolutionCount if self is OutputFormat.COUNT else SolutionList

    def __str__(self) -> str:
        return self.value
