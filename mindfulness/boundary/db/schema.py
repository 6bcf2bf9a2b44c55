"""
Database schema bootstrap.

Runs the bundled SQL script for the connected dialect, one statement at a
time. Used by tests and first-time setup, never by request handling.

Dependencies: sqlalchemy, importlib.resources
System role: Database schema initialization

Usage:
    python -m mindfulness.boundary.db.schema
"""

import logging
from importlib import resources

from sqlalchemy import text

from mindfulness.boundary.db.connection import ConnectionProvider, get_connection_provider

logger = logging.getLogger(__name__)

SQL_PACKAGE = "mindfulness.boundary.db.sql"


def load_schema_script(dialect: str) -> str:
    """
    Read the bundled schema script for a dialect.

    Args:
        dialect: SQLAlchemy dialect name (postgresql, sqlite)

    Returns:
        str: Script contents

    Raises:
        FileNotFoundError: If no script is bundled for the dialect
    """
    script = resources.files(SQL_PACKAGE).joinpath(f"{dialect}.sql")
    if not script.is_file():
        raise FileNotFoundError(f"No schema script bundled for dialect '{dialect}'")
    return script.read_text(encoding="utf-8")


def split_statements(script: str) -> list[str]:
    """Split a script on ';' and drop empty statements."""
    return [part.strip() for part in script.split(";") if part.strip()]


def initialize_schema(
    provider: ConnectionProvider | None = None,
    script: str | None = None,
) -> int:
    """
    Create the users and mindfulness_sessions tables.

    Idempotent for the bundled scripts (CREATE ... IF NOT EXISTS).

    Args:
        provider: Connection provider (defaults to the process-wide one)
        script: SQL text to run instead of the bundled script

    Returns:
        int: Number of statements executed

    Raises:
        FileNotFoundError: If no script is bundled for the dialect
        SQLAlchemyError: If a statement fails
    """
    provider = provider or get_connection_provider()
    with provider.connection() as conn:
        if script is None:
            script = load_schema_script(conn.dialect.name)
        statements = split_statements(script)
        for statement in statements:
            conn.execute(text(statement))
    logger.info("Schema initialized", extra={"statements": len(statements)})
    return len(statements)


if __name__ == "__main__":
    from mindfulness.observability.logger import configure_logging

    configure_logging()
    initialize_schema()
