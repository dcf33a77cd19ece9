from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from db.models import Base

MEMORY_DB = ":memory:"


def init_db(echo: bool = False, *, db_file: str | Path = MEMORY_DB, reset: bool = False) -> Session:
    if str(db_file) == MEMORY_DB:
        url = "sqlite://"
    else:
        path = Path(db_file)
        if reset and path.exists():
            path.unlink()
        url = f"sqlite:///{path}"

    engine: Engine = create_engine(url, echo=echo)

    Base.metadata.create_all(engine)
    return sessionmaker(engine)()
