"""
Mindfulness session DAO.

CRUD statements for the mindfulness_sessions table. scheduled_at is bound
and read through the DateTime type so drivers without native timestamps
(SQLite) round-trip it correctly.

Dependencies: sqlalchemy, mindfulness.boundary.db
System role: Session persistence operations
"""

from sqlalchemy import DateTime, bindparam, text

from mindfulness.boundary.db.connection import ConnectionProvider
from mindfulness.boundary.db.DAO.base_dao import BaseDAO
from mindfulness.boundary.db.mappers import map_session_row, session_params
from mindfulness.models.activity import MindfulnessSession

_SELECT_COLUMNS = (
    "SELECT id, user_id, title, description, difficulty, category, "
    "scheduled_at, duration_minutes, reflection_notes FROM mindfulness_sessions"
)

INSERT_SQL = text(
    """
    INSERT INTO mindfulness_sessions
        (user_id, title, description, difficulty, category, scheduled_at, duration_minutes, reflection_notes)
    VALUES
        (:user_id, :title, :description, :difficulty, :category, :scheduled_at, :duration_minutes, :reflection_notes)
    RETURNING id
    """
).bindparams(bindparam("scheduled_at", type_=DateTime()))

SELECT_BY_ID_SQL = text(f"{_SELECT_COLUMNS} WHERE id = :id").columns(scheduled_at=DateTime())

SELECT_BY_USER_SQL = text(
    f"{_SELECT_COLUMNS} WHERE user_id = :user_id ORDER BY scheduled_at DESC"
).columns(scheduled_at=DateTime())

UPDATE_REFLECTION_SQL = text(
    """
    UPDATE mindfulness_sessions
    SET reflection_notes = :reflection_notes, duration_minutes = :duration_minutes
    WHERE id = :id
    """
)

DELETE_SQL = text("DELETE FROM mindfulness_sessions WHERE id = :id")


class MindfulnessSessionDAO(BaseDAO[MindfulnessSession]):
    """DAO for the mindfulness_sessions table."""

    def __init__(self, provider: ConnectionProvider | None = None) -> None:
        super().__init__(map_session_row, provider)

    def insert(self, session: MindfulnessSession) -> int:
        """
        Insert a session.

        Args:
            session: Session to persist (id is ignored)

        Returns:
            int: Generated id, or -1 if the engine returned none
        """
        return self._insert(INSERT_SQL, session_params(session))

    def find_by_id(self, id: int) -> MindfulnessSession | None:
        return self._fetch_one(SELECT_BY_ID_SQL, {"id": id})

    def find_by_user(self, user_id: int) -> list[MindfulnessSession]:
        """
        Return a user's sessions, most recently scheduled first.

        Args:
            user_id: Owning user id

        Returns:
            list[MindfulnessSession]: Empty when the user has none
        """
        return self._fetch_all(SELECT_BY_USER_SQL, {"user_id": user_id})

    def update_reflection(self, session_id: int, notes: str | None, duration_minutes: int) -> bool:
        """Set reflection notes and duration; no other column is touched."""
        return self._execute_single_row(
            UPDATE_REFLECTION_SQL,
            {
                "reflection_notes": notes,
                "duration_minutes": duration_minutes,
                "id": session_id,
            },
        )

    def delete(self, session_id: int) -> bool:
        return self._execute_single_row(DELETE_SQL, {"id": session_id})
