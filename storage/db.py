# taskboard/storage/db.py
from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from core.settings import DB_PATH

# Ensure SQLModel metadata is populated
import models.task  # noqa: F401

logger = logging.getLogger("taskboard.storage")


def create_db_engine(db_path: str | Path = DB_PATH, *, echo: bool = False) -> Engine:
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # the API serves requests from a threadpool
    return create_engine(
        f"sqlite:///{path.as_posix()}",
        echo=echo,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)
    logger.info("Task store ready at %s", engine.url)


def get_session(engine: Engine) -> Session:
    return Session(engine)
