"""
Mindfulness session service orchestrator.

Coordinates scheduling, listing, reflection updates and deletion of
sessions. Writes are validated first; storage failures surface as
DataAccessError.

Dependencies: sqlalchemy, mindfulness.boundary.db.DAO, mindfulness.core
System role: Session use case orchestration
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from mindfulness.boundary.db.DAO.session_dao import MindfulnessSessionDAO
from mindfulness.core.cache import LRUCache
from mindfulness.core.exceptions import DataAccessError
from mindfulness.core.validators import validate_reflection_update, validate_session
from mindfulness.models.activity import MindfulnessSession

logger = logging.getLogger(__name__)


class MindfulnessSessionService:
    """Session service orchestrator."""

    def __init__(
        self,
        session_dao: MindfulnessSessionDAO,
        cache: LRUCache[int, MindfulnessSession] | None = None,
    ) -> None:
        """
        Initialize session service.

        Args:
            session_dao: DAO for the mindfulness_sessions table
            cache: Lookup cache for find_by_id (a private one is created if omitted)
        """
        self.session_dao = session_dao
        self.cache = cache if cache is not None else LRUCache()

    def schedule_session(self, session: MindfulnessSession) -> int:
        """
        Validate and insert a new session.

        Args:
            session: Session payload

        Returns:
            int: Generated session id

        Raises:
            ValidationError: If the payload breaks a rule (nothing is written)
            DataAccessError: If the insert fails
        """
        validate_session(session)
        try:
            session_id = self.session_dao.insert(session)
        except SQLAlchemyError as e:
            logger.error(
                "Failed to schedule session",
                extra={"error": str(e), "user_id": session.user_id},
            )
            raise DataAccessError("Failed to schedule session", cause=e, operation="insert") from e
        logger.info(
            "Session scheduled",
            extra={"session_id": session_id, "user_id": session.user_id},
        )
        return session_id

    def sessions_for_user(self, user_id: int) -> list[MindfulnessSession]:
        """
        List a user's sessions, most recently scheduled first.

        Args:
            user_id: Owning user id

        Returns:
            list[MindfulnessSession]: Empty when the user has none
        """
        try:
            return self.session_dao.find_by_user(user_id)
        except SQLAlchemyError as e:
            logger.error("Failed to fetch sessions", extra={"error": str(e), "user_id": user_id})
            raise DataAccessError("Failed to fetch sessions", cause=e, operation="select") from e

    def find_by_id(self, session_id: int) -> MindfulnessSession | None:
        cached = self.cache.get(session_id)
        if cached is not None:
            return cached.model_copy(deep=True)
        generation = self.cache.generation(session_id)
        try:
            session = self.session_dao.find_by_id(session_id)
        except SQLAlchemyError as e:
            logger.error(
                "Failed to fetch session",
                extra={"error": str(e), "session_id": session_id},
            )
            raise DataAccessError("Failed to fetch session", cause=e, operation="select") from e
        if session is not None:
            self.cache.put_if_unchanged(session_id, session.model_copy(deep=True), generation)
        return session

    def update_reflection(
        self, session_id: int, notes: str | None, duration_minutes: int
    ) -> bool:
        """
        Update reflection notes and duration of a session.

        Args:
            session_id: Session id
            notes: New reflection notes (may be None)
            duration_minutes: New duration, must be positive

        Returns:
            bool: True iff exactly one row was updated

        Raises:
            ValidationError: If the id or duration is not positive
            DataAccessError: If the update fails
        """
        validate_reflection_update(session_id, duration_minutes)
        try:
            updated = self.session_dao.update_reflection(session_id, notes, duration_minutes)
        except SQLAlchemyError as e:
            logger.error(
                "Failed to update session",
                extra={"error": str(e), "session_id": session_id},
            )
            raise DataAccessError("Failed to update session", cause=e, operation="update") from e
        if updated:
            self.cache.invalidate(session_id)
        return updated

    def delete(self, session_id: int) -> bool:
        try:
            deleted = self.session_dao.delete(session_id)
        except SQLAlchemyError as e:
            logger.error(
                "Failed to delete session",
                extra={"error": str(e), "session_id": session_id},
            )
            raise DataAccessError("Failed to delete session", cause=e, operation="delete") from e
        if deleted:
            self.cache.invalidate(session_id)
            logger.info("Session deleted", extra={"session_id": session_id})
        return deleted
