"""
Base DAO operations over raw SQL.

Provides the statement helpers every DAO shares: run an INSERT and read
its generated id, run an UPDATE/DELETE and report whether exactly one row
changed, and run a SELECT returning mapped entities.

Dependencies: sqlalchemy, mindfulness.boundary.db.connection
System role: Foundation for all database access objects
"""

from contextlib import closing
from typing import Any, Callable, Generic, TypeVar

from sqlalchemy.engine import Row
from sqlalchemy.sql.elements import TextClause

from mindfulness.boundary.db.connection import ConnectionProvider, get_connection_provider

EntityT = TypeVar("EntityT")

NO_GENERATED_KEY = -1


class BaseDAO(Generic[EntityT]):
    """
    Generic base class for DAOs.

    Subclasses declare their SQL as module constants (named placeholders
    only, never string-built) and a row mapper. Storage errors propagate
    to the caller untouched.

    Attributes:
        provider: Connection provider supplying the shared connection
    """

    def __init__(
        self,
        mapper: Callable[[Row], EntityT],
        provider: ConnectionProvider | None = None,
    ) -> None:
        """
        Initialize DAO.

        Args:
            mapper: Function building an entity from one result row
            provider: Connection provider (defaults to the process-wide one)
        """
        self.mapper = mapper
        self.provider = provider or get_connection_provider()

    def _insert(self, statement: TextClause, params: dict[str, Any]) -> int:
        """
        Execute an INSERT ... RETURNING id statement.

        Returns:
            First generated id, or -1 when the engine reports none
        """
        with self.provider.connection() as conn:
            with closing(conn.execute(statement, params)) as result:
                row = result.first()
        if row is None or row[0] is None:
            return NO_GENERATED_KEY
        return int(row[0])

    def _fetch_one(self, statement: TextClause, params: dict[str, Any]) -> EntityT | None:
        with self.provider.connection() as conn:
            with closing(conn.execute(statement, params)) as result:
                row = result.first()
        return self.mapper(row) if row is not None else None

    def _fetch_all(
        self, statement: TextClause, params: dict[str, Any] | None = None
    ) -> list[EntityT]:
        with self.provider.connection() as conn:
            with closing(conn.execute(statement, params or {})) as result:
                rows = result.all()
        return [self.mapper(row) for row in rows]

    def _execute_single_row(self, statement: TextClause, params: dict[str, Any]) -> bool:
        """
        Execute an UPDATE or DELETE.

        Returns:
            True iff exactly one row was affected
        """
        with self.provider.connection() as conn:
            with closing(conn.execute(statement, params)) as result:
                return result.rowcount == 1
