"""Random integer matrices, increasing runs and word search in a letter grid."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from typing import TextIO

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def random_matrix(
    rows: int,
    cols: int,
    start: int,
    end: int,
    rng: random.Random | None = None,
) -> list[list[int]]:
    """Build a ``rows`` x ``cols`` matrix of integers drawn from ``start..end``."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    if start > end:
        raise ValueError(f"empty range {start}..{end}")
    rng = rng or random.Random()
    return [[rng.randint(start, end) for _ in range(cols)] for _ in range(rows)]


def longest_increasing_run(values: Sequence[int]) -> list[int]:
    """Return the first longest strictly increasing contiguous run."""
    longest: list[int] = []
    current: list[int] = []
    for value in values:
        if current and value > current[-1]:
            current.append(value)
            continue
        if len(current) > len(longest):
            longest = current
        current = [value]
    if len(current) > len(longest):
        longest = current
    return longest


def contains_word(grid: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells without reuse.

    Cells are adjacent vertically or horizontally.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if len(word) > rows * cols:
        return False

    visited: set[tuple[int, int]] = set()

    def search(row: int, col: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= row < rows and 0 <= col < cols):
            return False
        if grid[row][col] != word[index] or (row, col) in visited:
            return False
        visited.add((row, col))
        if any(search(row + dr, col + dc, index + 1) for dr, dc in _DIRECTIONS):
            return True
        visited.discard((row, col))
        return False

    for row in range(rows):
        for col in range(cols):
            visited.clear()
            if search(row, col, 0):
                return True
    return False


class _Reader:
    """Reads whitespace-separated characters and tokens from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _next(self) -> str:
        if self._pending:
            ch, self._pending = self._pending, ""
            return ch
        return self._stream.read(1)

    def char(self) -> str:
        ch = self._next()
        while ch and ch.isspace():
            ch = self._next()
        if not ch:
            raise EOFError("unexpected end of input")
        return ch

    def token(self) -> str:
        chars = [self.char()]
        ch = self._next()
        while ch and not ch.isspace():
            chars.append(ch)
            ch = self._next()
        return "".join(chars)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a letter grid and a word from standard input and report if the word is there."""
    parser = argparse.ArgumentParser(
        prog="labworks-matrix",
        description="Search for a word traced through adjacent cells of a letter grid.",
    )
    parser.parse_args(argv)
    reader = _Reader(sys.stdin)
    try:
        print("Enter number of rows: ", end="")
        rows = int(reader.token())
        print("Enter number of columns: ", end="")
        cols = int(reader.token())
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        print("Enter matrix elements:")
        grid = [[reader.char() for _ in range(cols)] for _ in range(rows)]
        print("Entered matrix:")
        for row in grid:
            print(" ".join(row) + " ")
        print("Enter word: ", end="")
        word = reader.token()
    except (EOFError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print("true" if contains_word(grid, word) else "false")
    return 0


if __name__ == "__main__":
    sys.exit(main())