"""
Database connection management.

Holds one process-wide SQLAlchemy connection, opened lazily and reopened
when the previous one was closed or invalidated. Opening and checking the
connection happens under a single lock, and DAOs hold the same lock while
a statement runs so the shared connection is never used by two threads at
the same time.

Dependencies: sqlalchemy, mindfulness.configs
System role: Database connection lifecycle management
"""

import logging
import threading
from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from mindfulness.configs import get_settings

logger = logging.getLogger(__name__)


class ConnectionProvider:
    """
    Lazily opened, shared database connection.

    Every connection runs in AUTOCOMMIT mode, so each statement is its own
    atomic unit.

    Attributes:
        url: SQLAlchemy database URL
    """

    def __init__(
        self,
        url: str,
        echo: bool = False,
        **engine_kwargs: Any,
    ) -> None:
        """
        Initialize provider without connecting.

        Args:
            url: SQLAlchemy database URL
            echo: Echo SQL statements to logs
            **engine_kwargs: Extra create_engine arguments (connect_args, poolclass)
        """
        self.url = url
        self._echo = echo
        self._engine_kwargs = engine_kwargs
        self._engine: Engine | None = None
        self._connection: Connection | None = None
        self._lock = threading.RLock()

    def _get_engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(self.url, echo=self._echo, **self._engine_kwargs)
        return self._engine

    def get_connection(self) -> Connection:
        """
        Return the shared connection, opening a new one if needed.

        Returns:
            Connection: Live connection in AUTOCOMMIT mode

        Raises:
            SQLAlchemyError: If the connection cannot be opened (no retry)
        """
        with self._lock:
            conn = self._connection
            if conn is None or conn.closed or conn.invalidated:
                logger.info("Opening database connection", extra={"dialect": self.url.split(":", 1)[0]})
                self._connection = self._get_engine().connect().execution_options(
                    isolation_level="AUTOCOMMIT"
                )
            return self._connection

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """
        Hold the shared connection for the duration of one statement.

        Usage:
            with provider.connection() as conn:
                conn.execute(text("SELECT 1"))
        """
        with self._lock:
            yield self.get_connection()

    def close_connection(self) -> None:
        """Release the held connection. Errors during release are ignored."""
        with self._lock:
            if self._connection is not None:
                try:
                    self._connection.close()
                except SQLAlchemyError:
                    logger.debug("Ignoring error while closing connection", exc_info=True)
                self._connection = None

    def dispose(self) -> None:
        """Close the connection and release the engine."""
        with self._lock:
            self.close_connection()
            if self._engine is not None:
                self._engine.dispose()
                self._engine = None


@lru_cache
def get_connection_provider() -> ConnectionProvider:
    """
    Get the process-wide provider built from settings.

    Returns:
        ConnectionProvider: Shared provider singleton
    """
    db_config = get_settings().database
    return ConnectionProvider(db_config.database_url, echo=db_config.echo_sql)


def get_connection() -> Connection:
    """Return the process-wide shared connection."""
    return get_connection_provider().get_connection()


def close_connection() -> None:
    """Best-effort release of the process-wide connection."""
    get_connection_provider().close_connection()
