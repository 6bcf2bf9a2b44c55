"""
Row <-> entity mapping.

Reads entities from result rows by column name and turns entities into
bound statement parameters in the declared column order.

Dependencies: sqlalchemy, mindfulness.models
System role: Record mapping for the DAOs
"""

from datetime import datetime
from typing import Any

from sqlalchemy.engine import Row

from mindfulness.models.activity import MindfulnessSession
from mindfulness.models.user import User

USER_COLUMNS = ("full_name", "email", "password", "focus_area")
SESSION_COLUMNS = (
    "user_id",
    "title",
    "description",
    "difficulty",
    "category",
    "scheduled_at",
    "duration_minutes",
    "reflection_notes",
)


def map_user_row(row: Row) -> User:
    data = row._mapping
    return User(
        id=data["id"],
        full_name=data["full_name"],
        email=data["email"],
        password=data["password"],
        focus_area=data["focus_area"],
    )


def map_session_row(row: Row) -> MindfulnessSession:
    """
    Build a session from a result row.

    A null scheduled_at is read as the current instant instead of failing.
    """
    data = row._mapping
    scheduled_at = data["scheduled_at"]
    return MindfulnessSession(
        id=data["id"],
        user_id=data["user_id"],
        title=data["title"],
        description=data["description"],
        difficulty=data["difficulty"],
        category=data["category"],
        scheduled_at=scheduled_at if scheduled_at is not None else datetime.now(),
        duration_minutes=data["duration_minutes"],
        reflection_notes=data["reflection_notes"],
    )


def user_params(user: User) -> dict[str, Any]:
    return {column: getattr(user, column) for column in USER_COLUMNS}


def session_params(session: MindfulnessSession) -> dict[str, Any]:
    return {column: getattr(session, column) for column in SESSION_COLUMNS}
