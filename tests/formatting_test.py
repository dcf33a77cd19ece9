import pytest

from domain.money import Denomination
from utils.formatting import format_coins, format_currency


@pytest.mark.parametrize(
    ("cents", "expected"),
    [(0, "$0.00"), (5, "$0.05"), (65, "$0.65"), (165, "$1.65"), (1000, "$10.00"), (-15, "-$0.15")],
)
def test_format_currency(cents: int, expected: str) -> None:
    assert format_currency(cents) == expected


def test_format_coins_pluralizes() -> None:
    assert format_coins(Denomination.NICKEL, 1) == "1 nickel"
    assert format_coins(Denomination.NICKEL, 3) == "3 nickels"
    assert format_coins(Denomination.DOLLAR, 2) == "2 dollars"
