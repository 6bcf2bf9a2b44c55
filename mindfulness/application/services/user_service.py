"""
User service orchestrator.

Validates users before they reach the DAO and converts storage failures
into DataAccessError. get_user reads through an LRU cache that writers
invalidate.

Dependencies: sqlalchemy, mindfulness.boundary.db.DAO, mindfulness.core
System role: User use case orchestration
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from mindfulness.boundary.db.DAO.user_dao import UserDAO
from mindfulness.core.cache import LRUCache
from mindfulness.core.exceptions import DataAccessError
from mindfulness.core.validators import validate_user, validate_user_update
from mindfulness.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """User service orchestrator."""

    def __init__(self, user_dao: UserDAO, cache: LRUCache[int, User] | None = None) -> None:
        """
        Initialize user service.

        Args:
            user_dao: DAO for the users table
            cache: Lookup cache for get_user (a private one is created if omitted)
        """
        self.user_dao = user_dao
        self.cache = cache if cache is not None else LRUCache()

    def register_user(self, user: User) -> int:
        """
        Validate and insert a new user.

        Args:
            user: User payload

        Returns:
            int: Generated user id

        Raises:
            ValidationError: If the payload breaks a rule (nothing is written)
            DataAccessError: If the insert fails
        """
        validate_user(user)
        try:
            user_id = self.user_dao.insert(user)
        except SQLAlchemyError as e:
            logger.error("Failed to create user", extra={"error": str(e)})
            raise DataAccessError("Failed to create user", cause=e, operation="insert") from e
        logger.info("User registered", extra={"user_id": user_id})
        return user_id

    def list_users(self) -> list[User]:
        try:
            return self.user_dao.find_all()
        except SQLAlchemyError as e:
            logger.error("Failed to list users", extra={"error": str(e)})
            raise DataAccessError("Failed to list users", cause=e, operation="select") from e

    def get_user(self, user_id: int) -> User | None:
        """
        Get user by id.

        Args:
            user_id: User id

        Returns:
            User | None: None when no user has this id
        """
        cached = self.cache.get(user_id)
        if cached is not None:
            return cached.model_copy(deep=True)
        generation = self.cache.generation(user_id)
        try:
            user = self.user_dao.find_by_id(user_id)
        except SQLAlchemyError as e:
            logger.error("Failed to fetch user", extra={"error": str(e), "user_id": user_id})
            raise DataAccessError("Failed to fetch user", cause=e, operation="select") from e
        if user is not None:
            self.cache.put_if_unchanged(user_id, user.model_copy(deep=True), generation)
        return user

    def update_user(self, user: User) -> bool:
        """
        Validate and overwrite an existing user.

        Returns:
            bool: True iff exactly one row was updated

        Raises:
            ValidationError: If the id is missing or a field rule fails
            DataAccessError: If the update fails
        """
        validate_user_update(user)
        try:
            updated = self.user_dao.update(user)
        except SQLAlchemyError as e:
            logger.error("Failed to update user", extra={"error": str(e), "user_id": user.id})
            raise DataAccessError("Failed to update user", cause=e, operation="update") from e
        if updated:
            self.cache.invalidate(user.id)
            logger.info("User updated", extra={"user_id": user.id})
        return updated

    def delete_user(self, user_id: int) -> bool:
        try:
            deleted = self.user_dao.delete(user_id)
        except SQLAlchemyError as e:
            logger.error("Failed to delete user", extra={"error": str(e), "user_id": user_id})
            raise DataAccessError("Failed to delete user", cause=e, operation="delete") from e
        if deleted:
            self.cache.invalidate(user_id)
            logger.info("User deleted", extra={"user_id": user_id})
        return deleted
