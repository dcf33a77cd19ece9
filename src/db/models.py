from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Integer, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from domain.money import Denomination


class DenominationList(TypeDecorator):
    """Stores a list of denominations as comma-separated cent values."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: list[Denomination] | None, dialect: object) -> str | None:
        if value is None:
            return None
        return ",".join(str(int(denomination)) for denomination in value)

    def process_result_value(self, value: str | None, dialect: object) -> list[Denomination] | None:
        if value is None:
            return None
        return [Denomination(int(part)) for part in value.split(",") if part]


class Base(DeclarativeBase):
    pass


class JournalEntryOrm(Base):
    __tablename__ = "journal_entries"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    kind: Mapped[str] = mapped_column(String, nullable=False)
    selector: Mapped[str | None] = mapped_column(String, nullable=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    inserted: Mapped[int] = mapped_column(Integer, nullable=False)
    ejected: Mapped[list[Denomination]] = mapped_column(DenominationList, nullable=False, default=list)
