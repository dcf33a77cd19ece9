from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable

from domain.journal import EntryKind, JournalEntry

from .formatting import format_currency


@dataclass
class ItemSalesSummary:
    selector: str
    sold: int
    revenue: int


@dataclass
class SalesSummary:
    items: list[ItemSalesSummary] = field(default_factory=list)
    coin_returns: int = 0
    returned_total: int = 0

    @property
    def revenue(self) -> int:
        return sum(item.revenue for item in self.items)


def compute_sales_summary(entries: Iterable[JournalEntry]) -> SalesSummary:
    sold: dict[str, int] = defaultdict(int)
    revenue: dict[str, int] = defaultdict(int)
    summary = SalesSummary()

    for entry in entries:
        if entry.kind == EntryKind.SALE and entry.selector is not None:
            sold[entry.selector] += 1
            revenue[entry.selector] += entry.price
        elif entry.kind == EntryKind.COIN_RETURN:
            summary.coin_returns += 1
            summary.returned_total += entry.inserted

    summary.items = [
        ItemSalesSummary(selector=selector, sold=sold[selector], revenue=revenue[selector]) for selector in sorted(sold)
    ]
    return summary


def render_sales_summary(summary: SalesSummary) -> list[str]:
    lines = ["Sales:"]
    if not summary.items:
        lines.append("  (none)")
    else:
        sold_label = "Sold"
        revenue_label = "Revenue"

        rows = [(item.selector, str(item.sold), format_currency(item.revenue)) for item in summary.items]
        rows.append(("Total", str(sum(item.sold for item in summary.items)), format_currency(summary.revenue)))

        selector_width = max(len("Item"), max(len(selector) for selector, _, _ in rows))
        sold_width = max(len(sold_label), max(len(sold) for _, sold, _ in rows))
        revenue_width = max(len(revenue_label), max(len(rev) for _, _, rev in rows))

        header = f"{'Item':<{selector_width}} {sold_label:>{sold_width}} {revenue_label:>{revenue_width}}"
        lines.extend([header, "-" * len(header)])
        for selector, sold_text, revenue_text in rows[:-1]:
            lines.append(f"{selector:<{selector_width}} {sold_text:>{sold_width}} {revenue_text:>{revenue_width}}")
        lines.append("-" * len(header))
        selector, sold_text, revenue_text = rows[-1]
        lines.append(f"{selector:<{selector_width}} {sold_text:>{sold_width}} {revenue_text:>{revenue_width}}")

    lines.append(f"Coin returns: {summary.coin_returns} ({format_currency(summary.returned_total)})")
    return lines
