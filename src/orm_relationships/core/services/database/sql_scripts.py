"""Splitting and running plain SQL scripts (schema and fixture files)."""

from collections.abc import Iterable
from pathlib import Path

import sqlparse
from loguru import logger
from sqlalchemy.engine import Connection


def split_statements(script: str) -> list[str]:
    """Split a SQL script into statements.

    Comments are dropped, and so are the trailing ``;`` and empty statements.
    Semicolons inside quoted strings or identifiers do not end a statement.
    """
    statements = []
    for statement in sqlparse.split(sqlparse.format(script, strip_comments=True)):
        statement = statement.rstrip(";").strip()
        if statement:
            statements.append(statement)
    return statements


def execute_statements(connection: Connection, statements: Iterable[str]) -> int:
    """Execute statements in order on an open connection. Returns how many ran."""
    count = 0
    for statement in statements:
        connection.exec_driver_sql(statement)
        count += 1
    return count


def run_script(connection: Connection, path: Path) -> int:
    """Read, split and execute the script at ``path``."""
    statements = split_statements(path.read_text(encoding="utf-8"))
    logger.debug("Running {} statement(s) from {}", len(statements), path.name)
    return execute_statements(connection, statements)
