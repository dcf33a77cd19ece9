from __future__ import annotations

import logging
from enum import StrEnum

from pydantic import BaseModel, Field

from .change import make_change
from .inventory import Inventory, Item, decremented
from .journal import EntryKind, InMemoryJournal, JournalEntry, JournalError, TransactionJournal
from .money import Denomination, MoneyLedger, remove_coin

logger = logging.getLogger(__name__)


class TransactionState(StrEnum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    SOLVING = "SOLVING"
    COMMITTING = "COMMITTING"
    REJECTED = "REJECTED"


class RejectionReason(StrEnum):
    UNKNOWN_SELECTOR = "UNKNOWN_SELECTOR"
    SOLD_OUT = "SOLD_OUT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    CHANGE_UNAVAILABLE = "CHANGE_UNAVAILABLE"


class Rejection(BaseModel):
    reason: RejectionReason
    selector: str | None = None
    shortfall: int | None = None


class Sale(BaseModel):
    selector: str
    price: int
    change: list[Denomination] = Field(default_factory=list)


class CoinReturn(BaseModel):
    coins: list[Denomination] = Field(default_factory=list)


class StockPlan(BaseModel):
    """Items and coin counts loaded by a fill."""

    items: list[Item] = Field(default_factory=list)
    coins: dict[Denomination, int] = Field(default_factory=dict)


class VendingMachine:
    """Owns the machine state and applies every mutating command as one unit.

    Purchases and coin returns compute the new bank and item records on copies
    first and only write them back once change has been found, so a rejected
    command leaves inventory, bank and inserted amount exactly as they were.
    """

    def __init__(
        self,
        *,
        ledger: MoneyLedger | None = None,
        inventory: Inventory | None = None,
        journal: TransactionJournal | None = None,
    ) -> None:
        self._ledger = ledger if ledger is not None else MoneyLedger()
        self._inventory = inventory if inventory is not None else Inventory()
        self._journal = journal if journal is not None else InMemoryJournal()
        self.state = TransactionState.IDLE

    @property
    def journal(self) -> TransactionJournal:
        return self._journal

    # Read-only views

    def items(self) -> list[Item]:
        return self._inventory.items()

    def coins(self) -> dict[Denomination, int]:
        return self._ledger.coins

    def total_inserted(self) -> int:
        return self._ledger.total_inserted()

    def quantity(self, selector: str) -> int:
        return self._inventory.quantity(selector)

    # Administration

    def reset(self) -> None:
        self._inventory.reset()
        self._ledger.reset()
        self.state = TransactionState.IDLE

    def restock(self, selector: str, description: str, price: int, quantity: int) -> Item:
        return self._inventory.restock(selector, description, price, quantity)

    def add_stock(self, denomination: Denomination, quantity: int) -> None:
        self._ledger.add_stock(denomination, quantity)

    def fill(self, plan: StockPlan) -> None:
        self.reset()
        for item in plan.items:
            self._inventory.put(item)
        for denomination, quantity in plan.coins.items():
            self._ledger.add_stock(denomination, quantity)
        logger.info("Filled machine with %d items and %d coins", len(plan.items), sum(plan.coins.values()))

    # Customer commands

    def insert_coin(self, denomination: Denomination) -> None:
        self._ledger.insert_coin(denomination)
        logger.debug("Inserted %s, total=%d", denomination.label, self._ledger.total_inserted())

    def select_item(self, selector: str) -> Sale | Rejection:
        self._transition(TransactionState.VALIDATING)
        item = self._inventory.lookup(selector)
        if item is None:
            return self._reject(RejectionReason.UNKNOWN_SELECTOR, selector=selector)
        if item.quantity == 0:
            return self._reject(RejectionReason.SOLD_OUT, selector=selector)
        inserted = self._ledger.total_inserted()
        if inserted < item.price:
            return self._reject(RejectionReason.INSUFFICIENT_FUNDS, selector=selector, shortfall=item.price - inserted)

        self._transition(TransactionState.SOLVING)
        change = make_change(inserted - item.price, self._ledger.coins)
        if change is None:
            return self._reject(RejectionReason.CHANGE_UNAVAILABLE, selector=selector)

        self._transition(TransactionState.COMMITTING)
        staged_coins = self._staged_coins(change)
        staged_item = decremented(item)
        self._ledger.replace_coins(staged_coins)
        self._inventory.put(staged_item)
        self._ledger.clear()
        self._transition(TransactionState.IDLE)

        self._record(
            JournalEntry(
                kind=EntryKind.SALE,
                selector=selector,
                price=item.price,
                inserted=inserted,
                ejected=change,
            )
        )
        logger.info("Sold %s for %d, change=%s", selector, item.price, [int(coin) for coin in change])
        return Sale(selector=selector, price=item.price, change=change)

    def return_coins(self) -> CoinReturn | Rejection:
        self._transition(TransactionState.SOLVING)
        inserted = self._ledger.total_inserted()
        coins = make_change(inserted, self._ledger.coins)
        if coins is None:
            return self._reject(RejectionReason.CHANGE_UNAVAILABLE)

        self._transition(TransactionState.COMMITTING)
        staged_coins = self._staged_coins(coins)
        self._ledger.replace_coins(staged_coins)
        self._ledger.clear()
        self._transition(TransactionState.IDLE)

        if coins:
            self._record(JournalEntry(kind=EntryKind.COIN_RETURN, inserted=inserted, ejected=coins))
            logger.info("Returned %d in %d coins", inserted, len(coins))
        return CoinReturn(coins=coins)

    def _record(self, entry: JournalEntry) -> None:
        # State is already applied at this point.
        try:
            self._journal.create(entry)
        except JournalError:
            logger.exception("Failed to journal %s entry %s", entry.kind, entry.id)

    def _staged_coins(self, outgoing: list[Denomination]) -> dict[Denomination, int]:
        staged = self._ledger.coins
        for denomination in outgoing:
            remove_coin(staged, denomination)
        return staged

    def _reject(
        self,
        reason: RejectionReason,
        *,
        selector: str | None = None,
        shortfall: int | None = None,
    ) -> Rejection:
        self._transition(TransactionState.REJECTED)
        if reason == RejectionReason.CHANGE_UNAVAILABLE:
            logger.warning(
                "Cannot make change for selector=%s inserted=%d bank=%s",
                selector,
                self._ledger.total_inserted(),
                {int(denomination): quantity for denomination, quantity in self._ledger.coins.items()},
            )
        self._transition(TransactionState.IDLE)
        return Rejection(reason=reason, selector=selector, shortfall=shortfall)

    def _transition(self, state: TransactionState) -> None:
        logger.debug("Transaction state %s -> %s", self.state, state)
        self.state = state
