from __future__ import annotations

from enum import IntEnum


class Denomination(IntEnum):
    """Face values accepted by the machine, in cents."""

    NICKEL = 5
    DIME = 10
    QUARTER = 25
    DOLLAR = 100

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def code(self) -> str:
        return _CODES[self]

    @classmethod
    def from_code(cls, code: str) -> Denomination | None:
        return _BY_CODE.get(code)


_LABELS = {
    Denomination.NICKEL: "nickel",
    Denomination.DIME: "dime",
    Denomination.QUARTER: "quarter",
    Denomination.DOLLAR: "dollar",
}

_CODES = {
    Denomination.NICKEL: "n",
    Denomination.DIME: "d",
    Denomination.QUARTER: "q",
    Denomination.DOLLAR: "1",
}

_BY_CODE = {code: denomination for denomination, code in _CODES.items()}


class CoinBankError(Exception):
    def __init__(self, *, denomination: Denomination, available: int) -> None:
        self.denomination = denomination
        self.available = available
        super().__init__(f"Cannot remove coin {denomination.label} ({int(denomination)}c): available={available}")


def remove_coin(coins: dict[Denomination, int], denomination: Denomination) -> None:
    """Take one unit of ``denomination`` out of ``coins`` in place."""
    available = coins.get(denomination, 0)
    if available <= 0:
        raise CoinBankError(denomination=denomination, available=available)
    coins[denomination] = available - 1


class MoneyLedger:
    """Coins held for change plus the amount inserted for the current transaction."""

    def __init__(self) -> None:
        self._coins: dict[Denomination, int] = {}
        self._inserted = 0

    @property
    def coins(self) -> dict[Denomination, int]:
        """Ascending copy of the bank; callers may mutate it freely."""
        return {denomination: self._coins[denomination] for denomination in sorted(self._coins)}

    def count(self, denomination: Denomination) -> int:
        return self._coins.get(denomination, 0)

    def total_value(self) -> int:
        return sum(int(denomination) * quantity for denomination, quantity in self._coins.items())

    def insert_coin(self, denomination: Denomination) -> None:
        if not isinstance(denomination, Denomination):
            raise ValueError(f"Unrecognized denomination: {denomination!r}")
        self._coins[denomination] = self.count(denomination) + 1
        self._inserted += int(denomination)

    def add_stock(self, denomination: Denomination, quantity: int) -> None:
        # Absolute set, not additive.
        if quantity < 0:
            raise ValueError("quantity must be >= 0")
        self._coins[Denomination(denomination)] = quantity

    def remove_coin(self, denomination: Denomination) -> None:
        remove_coin(self._coins, denomination)

    def replace_coins(self, coins: dict[Denomination, int]) -> None:
        if any(quantity < 0 for quantity in coins.values()):
            raise ValueError("coin counts must be >= 0")
        self._coins = dict(coins)

    def total_inserted(self) -> int:
        return self._inserted

    def clear(self) -> None:
        self._inserted = 0

    def reset(self) -> None:
        self._coins = {}
        self._inserted = 0
