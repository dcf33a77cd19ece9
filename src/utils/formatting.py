from __future__ import annotations

from domain.money import Denomination


def format_currency(cents: int) -> str:
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(cents), 100)
    return f"{sign}${dollars}.{remainder:02d}"


def format_coins(denomination: Denomination, quantity: int) -> str:
    suffix = "s" if quantity > 1 else ""
    return f"{quantity} {denomination.label}{suffix}"
