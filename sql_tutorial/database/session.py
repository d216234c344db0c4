# session.py
import logging
from typing import Annotated

import duckdb
from fastapi import Depends, Request

from ..config import TutorialSettings

logger = logging.getLogger(__name__)


def open_connection(settings: TutorialSettings) -> duckdb.DuckDBPyConnection:
    config = {}
    if settings.DUCKDB_THREADS:
        config["threads"] = settings.DUCKDB_THREADS

    con = duckdb.connect(database=settings.DUCKDB_DATABASE, config=config)
    logger.info(f"DuckDB {duckdb.__version__} session opened on {settings.DUCKDB_DATABASE}")
    return con


def enable_remote_fetch(con: duckdb.DuckDBPyConnection) -> None:
    """Install and load httpfs so read_csv_auto can read http(s) URLs"""
    con.execute("INSTALL httpfs;")
    con.execute("LOAD httpfs;")
    logger.info("httpfs extension loaded")


def get_duckdb_connection(request: Request) -> duckdb.DuckDBPyConnection:
    return request.app.state.workflow.connection


DuckDBDep = Annotated[duckdb.DuckDBPyConnection, Depends(get_duckdb_connection)]


def get_workflow(request: Request):
    return request.app.state.workflow
