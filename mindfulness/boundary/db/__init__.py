"""
Database boundary layer: connection management, row mapping, DAOs and
schema bootstrap.

Exports:
  - ConnectionProvider, get_connection_provider(), get_connection(),
    close_connection(): shared connection lifecycle
  - UserDAO, MindfulnessSessionDAO: raw SQL data access objects
  - initialize_schema(): run the bundled schema script

Dependencies: sqlalchemy, mindfulness.configs
System role: Database adapter for users and mindfulness sessions
"""

from mindfulness.boundary.db.connection import (
    ConnectionProvider,
    close_connection,
    get_connection,
    get_connection_provider,
)
from mindfulness.boundary.db.DAO import (
    NO_GENERATED_KEY,
    BaseDAO,
    MindfulnessSessionDAO,
    UserDAO,
)
from mindfulness.boundary.db.schema import initialize_schema

__all__ = [
    "BaseDAO",
    "ConnectionProvider",
    "MindfulnessSessionDAO",
    "NO_GENERATED_KEY",
    "UserDAO",
    "close_connection",
    "get_connection",
    "get_connection_provider",
    "initialize_schema",
]
