"""Fewest coins needed to make up an amount."""

from __future__ import annotations

from collections.abc import Sequence


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if impossible.

    Each denomination may be used any number of times.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin denominations must be positive")
    if amount == 0:
        return 0
    if not coins:
        return -1

    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            candidate = best[total - coin] + 1
            if candidate < best[total]:
                best[total] = candidate
    return -1 if best[amount] == unreachable else best[amount]