from __future__ import annotations

from datetime import timezone
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db import models
from domain.journal import EntryKind, JournalEntry, JournalError, TransactionJournal


class JournalEntryRepository(TransactionJournal):
    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, entry: JournalEntry) -> JournalEntry:
        orm_entry = models.JournalEntryOrm(
            id=entry.id,
            timestamp=entry.timestamp,
            kind=entry.kind.value,
            selector=entry.selector,
            price=entry.price,
            inserted=entry.inserted,
            ejected=list(entry.ejected),
        )

        try:
            self._session.add(orm_entry)
            self._session.commit()
        except SQLAlchemyError as err:
            self._session.rollback()
            raise JournalError(f"Could not store journal entry {entry.id}", entry=entry) from err
        self._session.refresh(orm_entry)
        return self._to_domain(orm_entry)

    def get(self, entry_id: UUID) -> JournalEntry | None:
        orm_entry = self._session.get(models.JournalEntryOrm, entry_id)
        if orm_entry is None:
            return None
        return self._to_domain(orm_entry)

    def list(self) -> list[JournalEntry]:
        orm_entries = (
            self._session.query(models.JournalEntryOrm).order_by(models.JournalEntryOrm.timestamp.asc()).all()
        )
        return [self._to_domain(entry) for entry in orm_entries]

    @staticmethod
    def _to_domain(orm_entry: models.JournalEntryOrm) -> JournalEntry:
        timestamp = orm_entry.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        return JournalEntry(
            id=orm_entry.id,
            timestamp=timestamp,
            kind=EntryKind(orm_entry.kind),
            selector=orm_entry.selector,
            price=orm_entry.price,
            inserted=orm_entry.inserted,
            ejected=orm_entry.ejected,
        )
