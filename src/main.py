"""Entry point for the nonogram board.

Opens the arcade window with the demonstration puzzle.
"""
from nonogram.app import main

if __name__ == "__main__":
    raise SystemExit(main())
