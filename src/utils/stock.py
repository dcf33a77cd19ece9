from __future__ import annotations

import csv
from pathlib import Path

from pydantic import ValidationError

from domain.inventory import Item
from domain.machine import StockPlan
from domain.money import Denomination

ITEM_KIND = "item"
COIN_KIND = "coin"


def default_stock_plan() -> StockPlan:
    return StockPlan(
        items=[
            Item(selector="A", description="Juicy Fruit", price=65, quantity=3),
            Item(selector="B", description="Baked Lays", price=100, quantity=2),
            Item(selector="C", description="Pepsi", price=150, quantity=4),
        ],
        coins={
            Denomination.NICKEL: 5,
            Denomination.DIME: 3,
            Denomination.QUARTER: 4,
            Denomination.DOLLAR: 2,
        },
    )


def load_stock_plan(csv_path: Path) -> StockPlan:
    """Load items and coin counts from CSV.

    Each row should contain: kind,key,quantity[,description][,price]
    ``kind`` is ``item`` (key is the selector, description and price required)
    or ``coin`` (key is the input code: n, d, q or 1).
    """

    with csv_path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None:
            raise ValueError(f"Stock CSV {csv_path} is empty or missing headers")

        required = {"kind", "key", "quantity"}
        missing = required - set(reader.fieldnames)
        if missing:
            raise ValueError(f"Stock CSV {csv_path} missing required columns: {', '.join(sorted(missing))}")

        items: list[Item] = []
        coins: dict[Denomination, int] = {}
        seen_selectors: set[str] = set()
        for line_no, row in enumerate(reader, start=2):
            kind = (row.get("kind") or "").strip().lower()
            key = (row.get("key") or "").strip()
            quantity = _parse_int(row.get("quantity"), "quantity", csv_path, line_no)

            if kind == ITEM_KIND:
                if key in seen_selectors:
                    raise ValueError(f"Stock CSV {csv_path} line {line_no}: duplicate selector {key!r}")
                seen_selectors.add(key)
                price = _parse_int(row.get("price"), "price", csv_path, line_no)
                try:
                    item = Item(
                        selector=key,
                        description=(row.get("description") or "").strip(),
                        price=price,
                        quantity=quantity,
                    )
                except ValidationError as err:
                    raise ValueError(f"Stock CSV {csv_path} line {line_no}: invalid item {key!r}: {err}") from err
                items.append(item)
            elif kind == COIN_KIND:
                denomination = Denomination.from_code(key)
                if denomination is None:
                    raise ValueError(f"Stock CSV {csv_path} line {line_no}: unknown coin code {key!r}")
                if quantity < 0:
                    raise ValueError(f"Stock CSV {csv_path} line {line_no}: quantity must be >= 0")
                coins[denomination] = quantity
            else:
                raise ValueError(f"Stock CSV {csv_path} line {line_no}: unknown kind {kind!r}")

    return StockPlan(items=items, coins=coins)


def _parse_int(raw: str | None, field_name: str, csv_path: Path, line_no: int) -> int:
    if raw is None or raw.strip() == "":
        raise ValueError(f"Stock CSV {csv_path} line {line_no}: missing {field_name}")
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"Stock CSV {csv_path} line {line_no}: {field_name} must be an integer, got {raw!r}") from err
