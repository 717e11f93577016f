"""Find two positions in a list whose values add up to a target."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from itertools import combinations

_MIN_SIZE = 2
_MAX_SIZE = 10_000
_LIMIT = 1_000_000_000


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return [i, j], the first pair with i < j in lexicographic order whose
    values sum to target, or an empty list when there is none."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    return []


class _InvalidInput(Exception):
    pass


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], low: int, high: int, message: str) -> int:
    try:
        value = int(next(tokens))
    except (StopIteration, ValueError):
        raise _InvalidInput(message) from None
    if not low <= value <= high:
        raise _InvalidInput(message)
    return value


def main(argv: list[str] | None = None) -> int:
    """Read a list and a target from stdin and print a matching pair."""
    out = sys.stdout
    tokens = _tokens(sys.stdin)
    try:
        out.write("Enter the number of elements in the array (2 to 10000): ")
        out.flush()
        n = _read_int(
            tokens, _MIN_SIZE, _MAX_SIZE,
            "Invalid input. Array size must be an integer between 2 and 10^4.",
        )
        out.write(f"Enter {n} integers (each between -10^9 and 10^9): ")
        out.flush()
        nums = [
            _read_int(
                tokens, -_LIMIT, _LIMIT,
                "Invalid input. Array elements must be integers between -10^9 and 10^9.",
            )
            for _ in range(n)
        ]
        out.write("Enter the target sum (between -10^9 and 10^9): ")
        out.flush()
        target = _read_int(
            tokens, -_LIMIT, _LIMIT,
            "Invalid input. Target must be an integer between -10^9 and 10^9.",
        )
    except _InvalidInput as error:
        out.write(f"{error}\n")
        return 1

    result = two_sum(nums, target)
    if result:
        out.write(f"Result: [{result[0]}, {result[1]}]\n")
    else:
        out.write("No solution found.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())