from __future__ import annotations

from domain.inventory import is_selector
from domain.machine import CoinReturn, Rejection, RejectionReason, Sale, VendingMachine
from domain.money import Denomination
from utils.formatting import format_coins, format_currency

EXIT_COMMANDS = frozenset({"exit", "quit"})

HELP_LINES = [
    "Commands are:",
    "  help - show this help",
    "  exit or quit - exit the application",
    "  change - list change available",
    "  items - list items available",
    "  inserted - show amount inserted",
    "  return - coin return",
    "  n - enter a nickel",
    "  d - enter a dime",
    "  q - enter a quarter",
    "  1 - enter a dollar bill",
    "  uppercase letter - buy item with that selector",
]


class CommandProcessor:
    """Turns single text tokens into machine operations and output lines."""

    def __init__(self, machine: VendingMachine) -> None:
        self._machine = machine

    def process(self, token: str) -> list[str]:
        if token in EXIT_COMMANDS:
            return []
        if token == "help":
            return list(HELP_LINES)
        if token == "change":
            return self._show_change()
        if token == "items":
            return self._show_items()
        if token == "inserted":
            return [f"amount inserted is {format_currency(self._machine.total_inserted())}"]
        if token == "return":
            return self._render(self._machine.return_coins())

        denomination = Denomination.from_code(token)
        if denomination is not None:
            self._machine.insert_coin(denomination)
            return []

        if is_selector(token):
            return self._render(self._machine.select_item(token))

        return [_invalid(token)]

    def _show_change(self) -> list[str]:
        lines = ["machine holds:"]
        for denomination, quantity in self._machine.coins().items():
            if quantity > 0:
                lines.append(format_coins(denomination, quantity))
        return lines

    def _show_items(self) -> list[str]:
        return [
            f"{item.selector} - {item.quantity} {item.description} {format_currency(item.price)}"
            for item in self._machine.items()
        ]

    def _render(self, outcome: Sale | CoinReturn | Rejection) -> list[str]:
        if isinstance(outcome, Sale):
            return [outcome.selector] + [coin.code for coin in outcome.change]
        if isinstance(outcome, CoinReturn):
            return [coin.code for coin in outcome.coins]
        return [_rejection_message(outcome)]


def _rejection_message(rejection: Rejection) -> str:
    if rejection.reason == RejectionReason.UNKNOWN_SELECTOR:
        return _invalid(rejection.selector or "")
    if rejection.reason == RejectionReason.SOLD_OUT:
        return "sold out"
    if rejection.reason == RejectionReason.INSUFFICIENT_FUNDS:
        return f"insert {format_currency(rejection.shortfall or 0)} more"
    if rejection.reason == RejectionReason.CHANGE_UNAVAILABLE:
        return "cannot make change"
    raise ValueError(f"Unhandled rejection reason: {rejection.reason}")


def _invalid(token: str) -> str:
    return f'invalid command or selector "{token}"'
