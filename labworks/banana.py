"""Split a number into two addends with the most one bits between them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

MIN_N = 0
MAX_N = 264 - 1


def count_ones(number: int) -> int:
    """Count the one bits in the binary form of a non-negative ``number``."""
    ones = 0
    while number:
        ones += number % 2
        number //= 2
    return ones


def pair_ones(first: int, second: int) -> int:
    """Total one bits in both numbers of a pair."""
    return count_ones(first) + count_ones(second)


def best_split(n: int) -> tuple[int, int]:
    """Return ``(i, n - i)`` with ``i <= n - i`` maximising the total one bits.

    Among equally good splits the one with the larger difference wins, and
    ``(0, n)`` is the starting candidate.
    """
    if not MIN_N <= n <= MAX_N:
        raise ValueError(f"n must be in {MIN_N}..{MAX_N}, got {n}")
    best = (0, n)
    best_ones = pair_ones(*best)
    for i in range(1, n // 2 + 1):
        candidate = (i, n - i)
        ones = pair_ones(*candidate)
        if ones > best_ones:
            best, best_ones = candidate, ones
        elif ones == best_ones and abs(candidate[1] - candidate[0]) > abs(best[1] - best[0]):
            best = candidate
    return best


def main(argv: Sequence[str] | None = None) -> int:
    """Read N and print the best split."""
    parser = argparse.ArgumentParser(
        prog="labworks-banana",
        description="Split N into two numbers with the most one bits in total.",
    )
    parser.add_argument("n", nargs="?", type=int, help="the number to split (prompted for if omitted)")
    args = parser.parse_args(argv)
    n = args.n if args.n is not None else int(input("Enter N: "))
    try:
        first, second = best_split(n)
    except ValueError:
        print("ERROR")
        return 1
    print(first, second)
    return 0


if __name__ == "__main__":
    sys.exit(main())