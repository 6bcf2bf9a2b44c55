"""
Data access objects over raw, parameterized SQL.

Usage:
    from mindfulness.boundary.db.DAO import UserDAO
    user_id = UserDAO().insert(user)
"""

from mindfulness.boundary.db.DAO.base_dao import NO_GENERATED_KEY, BaseDAO
from mindfulness.boundary.db.DAO.session_dao import MindfulnessSessionDAO
from mindfulness.boundary.db.DAO.user_dao import UserDAO

__all__ = [
    "BaseDAO",
    "MindfulnessSessionDAO",
    "NO_GENERATED_KEY",
    "UserDAO",
]
