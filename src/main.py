from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Iterable, Sequence

from commands import EXIT_COMMANDS, CommandProcessor
from config import config
from db.db import init_db
from db.repositories import JournalEntryRepository
from domain.machine import StockPlan, VendingMachine
from utils.sales_summary import compute_sales_summary, render_sales_summary
from utils.stock import default_stock_plan, load_stock_plan


def build_machine(*, journal_db: str | Path, stock_csv: Path | None) -> VendingMachine:
    session = init_db(db_file=journal_db)
    machine = VendingMachine(journal=JournalEntryRepository(session))
    plan: StockPlan = load_stock_plan(stock_csv) if stock_csv is not None else default_stock_plan()
    machine.fill(plan)
    return machine


def run(
    machine: VendingMachine,
    lines: Iterable[str],
    *,
    write: Callable[[str], None] = print,
    prompt: Callable[[], None] | None = None,
) -> None:
    processor = CommandProcessor(machine)
    if prompt is not None:
        prompt()
    for raw in lines:
        token = raw.strip()
        for line in processor.process(token):
            write(line)
        if token in EXIT_COMMANDS:
            break
        if prompt is not None:
            prompt()


def _read_lines() -> Iterable[str]:
    while True:
        try:
            yield input()
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> None:
    settings = config()
    parser = argparse.ArgumentParser(description="Interactive vending machine simulator.")
    parser.add_argument("--stock-csv", type=Path, default=settings.stock_csv)
    parser.add_argument("--journal-db", default=settings.journal_db)
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument("--report", action="store_true", help="print a sales summary on exit")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")

    machine = build_machine(journal_db=args.journal_db, stock_csv=args.stock_csv)

    print('Enter commands such as "help".')
    run(machine, _read_lines(), prompt=lambda: print("> ", end="", flush=True))

    if args.report:
        for line in render_sales_summary(compute_sales_summary(machine.journal.list())):
            print(line)


if __name__ == "__main__":
    main()
