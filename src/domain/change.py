from __future__ import annotations

from typing import Mapping

from .money import Denomination


def make_change(amount: int, bank: Mapping[Denomination, int]) -> list[Denomination] | None:
    """Decompose ``amount`` into coins available in ``bank``, largest first.

    Returns the first solution of a depth-first search that always prefers the
    largest denomination still available, or ``None`` when no exact
    decomposition exists. An amount of zero yields an empty list. ``bank`` is
    never modified.

    Taking as many of the largest coin as possible and backing off one coin at
    a time visits candidates in the same order as trying one coin per step,
    largest first, so the first solution found is the same. The search keeps
    its own stack and remembers (denomination index, remaining amount) pairs
    that are already known to fail.
    """
    if amount < 0:
        raise ValueError("amount must be >= 0")

    available = [
        (denomination, bank[denomination]) for denomination in sorted(bank, reverse=True) if bank[denomination] > 0
    ]
    dead_ends: set[tuple[int, int]] = set()

    # Each frame: (denomination index, remaining amount before it, coins taken of it).
    stack: list[tuple[int, int, int]] = []
    index, remaining = 0, amount

    while True:
        if remaining == 0:
            return [available[i][0] for i, _, taken in stack for _ in range(taken)]

        if index < len(available) and (index, remaining) not in dead_ends:
            value, quantity = available[index]
            taken = min(quantity, remaining // value)
            stack.append((index, remaining, taken))
            remaining -= taken * value
            index += 1
            continue

        dead_ends.add((index, remaining))
        while stack:
            i, before, taken = stack.pop()
            if taken > 0:
                taken -= 1
                stack.append((i, before, taken))
                index, remaining = i + 1, before - taken * available[i][0]
                break
            dead_ends.add((i, before))
        else:
            return None
