from commands import CommandProcessor
from domain.machine import VendingMachine
from tests.helpers.command_utils import run_commands


def test_buy_with_exact_change(processor: CommandProcessor) -> None:
    assert run_commands(processor, "q,q,d,n,A") == ["A"]


def test_buy_with_excess_change(processor: CommandProcessor) -> None:
    assert run_commands(processor, "1,1,A") == ["A", "1", "q", "d"]


def test_buy_with_insufficient_money(processor: CommandProcessor) -> None:
    assert run_commands(processor, "q,q,n,A") == ["insert $0.10 more"]


def test_buy_when_change_cannot_be_made(machine: VendingMachine, processor: CommandProcessor) -> None:
    machine.reset()
    machine.restock("A", "Juicy Fruit", 65, 1)

    assert run_commands(processor, "1,A") == ["cannot make change"]
    assert run_commands(processor, "inserted,items") == ["amount inserted is $1.00", "A - 1 Juicy Fruit $0.65"]


def test_sold_out(processor: CommandProcessor) -> None:
    assert run_commands(processor, "1,B,1,B") == ["B", "B"]
    assert run_commands(processor, "1,B") == ["sold out"]


def test_change(processor: CommandProcessor) -> None:
    assert run_commands(processor, "change") == [
        "machine holds:",
        "5 nickels",
        "3 dimes",
        "4 quarters",
        "2 dollars",
    ]


def test_change_skips_empty_denominations(machine: VendingMachine, processor: CommandProcessor) -> None:
    machine.reset()

    assert run_commands(processor, "change") == ["machine holds:"]
    assert run_commands(processor, "n,change") == ["machine holds:", "1 nickel"]


def test_help(processor: CommandProcessor) -> None:
    output = run_commands(processor, "help")

    assert output[0] == "Commands are:"
    assert "  return - coin return" in output


def test_inserted(processor: CommandProcessor) -> None:
    assert run_commands(processor, "inserted") == ["amount inserted is $0.00"]
    assert run_commands(processor, "1,q,inserted") == ["amount inserted is $1.25"]


def test_items(processor: CommandProcessor) -> None:
    assert run_commands(processor, "items") == [
        "A - 3 Juicy Fruit $0.65",
        "B - 2 Baked Lays $1.00",
        "C - 4 Pepsi $1.50",
    ]


def test_return(processor: CommandProcessor) -> None:
    assert run_commands(processor, "n,d,d,q,1,return") == ["1", "q", "q"]
    assert run_commands(processor, "inserted") == ["amount inserted is $0.00"]


def test_invalid_commands(processor: CommandProcessor) -> None:
    assert run_commands(processor, "foo") == ['invalid command or selector "foo"']
    assert run_commands(processor, "Z") == ['invalid command or selector "Z"']
    assert run_commands(processor, "a") == ['invalid command or selector "a"']


def test_exit_produces_no_output(processor: CommandProcessor) -> None:
    assert run_commands(processor, "exit,quit") == []
