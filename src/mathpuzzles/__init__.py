"""Think Maths puzzle solvers.

Three independent puzzles, each exposed as a subcommand of the `mathpuzzles`
command line: the spinning table, the Scrabble® hands of a given score, and the
card flips.  The Scrabble® solver is a two-level backtracking search over the
standard tile distribution; the other two are direct enumerations.
"""

from mathpuzzles.cli import main

__all__ = ["main"]
