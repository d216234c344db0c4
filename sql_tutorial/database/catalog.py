import logging
import re
from typing import List, Tuple

import duckdb

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class TableNotFoundError(LookupError):
    def __init__(self, table_name: str):
        super().__init__(f"Table '{table_name}' does not exist")
        self.table_name = table_name


class InvalidIdentifierError(ValueError):
    pass


def quote_identifier(name: str) -> str:
    if not _IDENTIFIER.match(name or ""):
        raise InvalidIdentifierError(f"Invalid table name: {name!r}")
    return f'"{name}"'


def csv_literal(source: str) -> str:
    return "'" + source.replace("'", "''") + "'"


def load_csv_table(con: duckdb.DuckDBPyConnection, table_name: str, source: str) -> None:
    """Create a table from a whole CSV file, letting DuckDB infer the schema"""
    sql = f"CREATE OR REPLACE TABLE {quote_identifier(table_name)} AS SELECT * FROM read_csv_auto({csv_literal(source)})"
    logger.info(f"Loading table {table_name} from {source}")
    con.execute(sql)
    logger.info(f"Loaded {row_count(con, table_name)} rows into {table_name}")


def list_tables(con: duckdb.DuckDBPyConnection) -> List[str]:
    return sorted(row[0] for row in con.execute("SHOW TABLES").fetchall())


def resolve_table_name(con: duckdb.DuckDBPyConnection, table_name: str) -> str:
    """Stored name of a table, matched case-insensitively like DuckDB identifiers"""
    quote_identifier(table_name)
    for name in list_tables(con):
        if name.lower() == table_name.lower():
            return name
    raise TableNotFoundError(table_name)


def describe_table(con: duckdb.DuckDBPyConnection, table_name: str) -> List[Tuple[str, str]]:
    """Column (name, type) pairs in table order"""
    ident = quote_identifier(resolve_table_name(con, table_name))
    return [(row[0], row[1]) for row in con.execute(f"DESCRIBE {ident}").fetchall()]


def row_count(con: duckdb.DuckDBPyConnection, table_name: str) -> int:
    return con.execute(f"SELECT COUNT(*) FROM {quote_identifier(table_name)}").fetchone()[0]
