from typing import Generator

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from commands import CommandProcessor
from db.models import Base
from domain.machine import VendingMachine
from utils.stock import default_stock_plan

engine: Engine = create_engine("sqlite:///:memory:", connect_args={"check_same_thread": False})
session_factory = sessionmaker(engine)


@pytest.fixture(scope="function")
def test_session() -> Generator[Session, None, None]:
    with session_factory() as session:
        yield session


@pytest.fixture(scope="function", autouse=True)
def reset_db() -> Generator[None, None, None]:
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture(scope="function")
def machine() -> VendingMachine:
    vending_machine = VendingMachine()
    vending_machine.fill(default_stock_plan())
    return vending_machine


@pytest.fixture(scope="function")
def processor(machine: VendingMachine) -> CommandProcessor:
    return CommandProcessor(machine)
