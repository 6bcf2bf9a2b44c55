"""
Response mapping utilities.

Transforms domain entities into Pydantic response models and JSON bodies.

Dependencies: mindfulness.models
System role: Response transformation
"""

from typing import Any

from mindfulness.models import MindfulnessSession, User
from mindfulness.models.responses import (
    SessionResponse,
    SessionSummaryResponse,
    UserResponse,
)


def map_user_to_response(user: User) -> dict[str, Any]:
    return UserResponse.model_validate(user).model_dump(by_alias=True)


def map_users_to_response(users: list[User]) -> list[dict[str, Any]]:
    return [map_user_to_response(user) for user in users]


def map_session_to_response(session: MindfulnessSession) -> dict[str, Any]:
    return SessionResponse.model_validate(session).model_dump(mode="json", by_alias=True)


def map_sessions_to_summary(sessions: list[MindfulnessSession]) -> list[dict[str, Any]]:
    """Build the per-user listing rows: id, title, category, durationMinutes."""
    return [
        SessionSummaryResponse.model_validate(session).model_dump(by_alias=True)
        for session in sessions
    ]
