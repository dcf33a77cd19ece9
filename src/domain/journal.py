from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum
from typing import NewType, Protocol
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator

from .money import Denomination

JournalEntryId = NewType("JournalEntryId", UUID)


class JournalError(Exception):
    def __init__(self, message: str, *, entry: JournalEntry | None = None) -> None:
        super().__init__(message)
        self.entry = entry


class EntryKind(StrEnum):
    SALE = "SALE"
    COIN_RETURN = "COIN_RETURN"


class JournalEntry(BaseModel):
    """A committed transaction.

    Value convention: ``inserted == price + sum(ejected)``. Coin returns carry
    no selector and a zero price.
    """

    id: JournalEntryId = JournalEntryId(Field(default_factory=uuid4))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    kind: EntryKind
    selector: str | None = None
    price: int = 0
    inserted: int
    ejected: list[Denomination] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_fields(self) -> JournalEntry:
        if self.kind == EntryKind.SALE and not self.selector:
            raise ValueError("SALE entries must carry a selector")
        if self.kind == EntryKind.COIN_RETURN and (self.selector is not None or self.price != 0):
            raise ValueError("COIN_RETURN entries carry neither selector nor price")
        if self.price < 0 or self.inserted < 0:
            raise ValueError("price and inserted must be >= 0")
        if self.price + sum(self.ejected) != self.inserted:
            raise ValueError("inserted must equal price plus ejected coins")
        return self


class TransactionJournal(Protocol):
    """Sink for committed transactions."""

    def create(self, entry: JournalEntry) -> JournalEntry: ...

    def list(self) -> list[JournalEntry]: ...


class InMemoryJournal(TransactionJournal):
    def __init__(self) -> None:
        self._entries: list[JournalEntry] = []

    def create(self, entry: JournalEntry) -> JournalEntry:
        self._entries.append(entry)
        return entry

    def list(self) -> list[JournalEntry]:
        return list(self._entries)
