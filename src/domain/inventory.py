from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, model_validator

_SELECTOR_RE = re.compile(r"[A-Z]")


def is_selector(token: str) -> bool:
    return _SELECTOR_RE.fullmatch(token) is not None


class InventoryError(Exception):
    def __init__(self, message: str, *, selector: str) -> None:
        super().__init__(message)
        self.selector = selector


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    selector: str
    description: str
    price: int
    quantity: int

    @model_validator(mode="after")
    def _validate_fields(self) -> Item:
        if not is_selector(self.selector):
            raise ValueError("Item.selector must be a single uppercase letter")
        if not self.description:
            raise ValueError("Item.description must be non-empty")
        if self.price < 0:
            raise ValueError("Item.price must be >= 0")
        if self.quantity < 0:
            raise ValueError("Item.quantity must be >= 0")
        return self


class Inventory:
    def __init__(self) -> None:
        self._items: dict[str, Item] = {}

    def lookup(self, selector: str) -> Item | None:
        return self._items.get(selector)

    def quantity(self, selector: str) -> int:
        item = self.lookup(selector)
        if item is None:
            raise InventoryError(f"Unknown selector {selector!r}", selector=selector)
        return item.quantity

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> list[Item]:
        return [self._items[selector] for selector in sorted(self._items)]

    def put(self, item: Item) -> None:
        self._items[item.selector] = item

    def restock(self, selector: str, description: str, price: int, quantity: int) -> Item:
        item = Item(selector=selector, description=description, price=price, quantity=quantity)
        self.put(item)
        return item

    def decrement(self, selector: str) -> Item:
        item = self.lookup(selector)
        if item is None:
            raise InventoryError(f"Unknown selector {selector!r}", selector=selector)
        updated = decremented(item)
        self.put(updated)
        return updated

    def reset(self) -> None:
        self._items = {}


def decremented(item: Item) -> Item:
    """Copy of ``item`` with one unit fewer."""
    if item.quantity <= 0:
        raise InventoryError(f"Item {item.selector!r} is sold out", selector=item.selector)
    return item.model_copy(update={"quantity": item.quantity - 1})
