"""
User DAO.

CRUD statements for the users table. Every externally supplied value is
passed as a bound parameter.

Dependencies: sqlalchemy, mindfulness.boundary.db
System role: User persistence operations
"""

from sqlalchemy import text

from mindfulness.boundary.db.connection import ConnectionProvider
from mindfulness.boundary.db.DAO.base_dao import BaseDAO
from mindfulness.boundary.db.mappers import map_user_row, user_params
from mindfulness.models.user import User

INSERT_SQL = text(
    """
    INSERT INTO users (full_name, email, password, focus_area)
    VALUES (:full_name, :email, :password, :focus_area)
    RETURNING id
    """
)

SELECT_BY_ID_SQL = text(
    """
    SELECT id, full_name, email, password, focus_area
    FROM users WHERE id = :id
    """
)

SELECT_ALL_SQL = text(
    """
    SELECT id, full_name, email, password, focus_area
    FROM users ORDER BY id
    """
)

UPDATE_SQL = text(
    """
    UPDATE users
    SET full_name = :full_name, email = :email, password = :password, focus_area = :focus_area
    WHERE id = :id
    """
)

DELETE_SQL = text("DELETE FROM users WHERE id = :id")


class UserDAO(BaseDAO[User]):
    """DAO for the users table."""

    def __init__(self, provider: ConnectionProvider | None = None) -> None:
        super().__init__(map_user_row, provider)

    def insert(self, user: User) -> int:
        """
        Insert a user.

        Args:
            user: User to persist (id is ignored)

        Returns:
            int: Generated id, or -1 if the engine returned none
        """
        return self._insert(INSERT_SQL, user_params(user))

    def find_by_id(self, id: int) -> User | None:
        return self._fetch_one(SELECT_BY_ID_SQL, {"id": id})

    def find_all(self) -> list[User]:
        """Return every user ordered by id."""
        return self._fetch_all(SELECT_ALL_SQL)

    def update(self, user: User) -> bool:
        """
        Overwrite name, email, password and focus area of an existing user.

        Returns:
            bool: True iff exactly one row changed
        """
        return self._execute_single_row(UPDATE_SQL, {**user_params(user), "id": user.id})

    def delete(self, id: int) -> bool:
        """Delete a user. Their sessions are left in place."""
        return self._execute_single_row(DELETE_SQL, {"id": id})
