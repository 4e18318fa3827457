"""0/1 knapsack: the best total value within a weight capacity."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the largest value of a subset of items whose weight fits ``capacity``.

    Each item may be taken at most once.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")

    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        if weight < 0:
            raise ValueError("weights must not be negative")
        for room in range(capacity, weight - 1, -1):
            candidate = best[room - weight] + value
            if candidate > best[room]:
                best[room] = candidate
    return best[capacity]


def _numbers(line: str) -> list[int]:
    return [int(token) for token in line.split()]


def main(argv: Sequence[str] | None = None) -> int:
    """Solve knapsack cases read from standard input.

    The first line holds the number of cases. Each case has three lines:
    the capacity, the item values, and the item weights.
    """
    parser = argparse.ArgumentParser(
        prog="dsakit-knapsack",
        description="Read knapsack cases from standard input and print each best value.",
    )
    parser.parse_args(argv)

    lines = iter(sys.stdin.read().splitlines())
    header = next(lines, "")
    if not header.split():
        return 0
    cases = int(header.split()[0])
    for _ in range(cases):
        capacity = _numbers(next(lines, ""))
        values = _numbers(next(lines, ""))
        weights = _numbers(next(lines, ""))
        if not capacity:
            raise ValueError("missing capacity line")
        print(knapsack(capacity[0], weights, values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())