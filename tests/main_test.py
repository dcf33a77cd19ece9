from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from domain.machine import VendingMachine
from main import build_machine, main, run


def test_run_stops_at_exit(machine: VendingMachine) -> None:
    output: list[str] = []

    run(machine, ["q", "q", "d", "n", "A", " items ", "exit", "items"], write=output.append)

    assert output == [
        "A",
        "A - 2 Juicy Fruit $0.65",
        "B - 2 Baked Lays $1.00",
        "C - 4 Pepsi $1.50",
    ]


def test_build_machine_from_csv(tmp_path: Path) -> None:
    csv_path = tmp_path / "stock.csv"
    csv_path.write_text("kind,key,quantity,description,price\nitem,K,2,Kit Kat,90\ncoin,d,1,,\n", encoding="utf-8")

    machine = build_machine(journal_db=tmp_path / "journal.db", stock_csv=csv_path)

    assert machine.quantity("K") == 2
    assert [item.selector for item in machine.items()] == ["K"]
    assert sum(machine.coins().values()) == 1


def test_main_runs_session_and_reports(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    lines: Iterator[str] = iter(["1", "1", "A", "q", "return", "quit"])

    def fake_input() -> str:
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)

    main(["--report", "--journal-db", ":memory:"])

    out = capsys.readouterr().out
    assert out.startswith('Enter commands such as "help".\n')
    assert "A\n1\nq\nd\n" in out
    assert "A        1   $0.65" in out
    assert "Coin returns: 1 ($0.25)" in out


def test_main_stops_at_end_of_input(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def fake_input() -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)

    main(["--journal-db", ":memory:"])

    assert capsys.readouterr().out == 'Enter commands such as "help".\n> '
