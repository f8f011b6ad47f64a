"""Main entry point for the puzzle solvers."""

from mathpuzzles.cli import main

if __name__ == "__main__":
    main()
