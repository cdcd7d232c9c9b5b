# taskboard/server.py
"""Serve the task API with uvicorn."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI

from api.app import create_app
from core.logging_setup import setup_logging
from core.settings import API, DB_PATH
from storage.db import create_db_engine, init_db
from storage.task_store import TaskStore

logger = logging.getLogger("taskboard.server")


def build_app(db_path: str | Path = DB_PATH) -> FastAPI:
    engine = create_db_engine(db_path)
    init_db(engine)
    return create_app(TaskStore(engine))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="taskboard-api", description="Taskboard REST API server.")
    p.add_argument("--host", default=API.host, help=f"Bind address (default: {API.host}).")
    p.add_argument("--port", type=int, default=API.port, help=f"Port (default: {API.port}).")
    p.add_argument("--db", default=str(DB_PATH), help="Path to the SQLite database (or TASKBOARD_DB).")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    setup_logging()
    app = build_app(Path(ns.db).expanduser())
    logger.info("Serving task API on http://%s:%s%s", ns.host, ns.port, API.prefix)
    uvicorn.run(app, host=ns.host, port=ns.port, log_config=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
