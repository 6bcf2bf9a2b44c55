"""
User domain model.

Dependencies: pydantic, mindfulness.models.activity
System role: User entity carried between DAOs, services and API
"""

from pydantic import BaseModel, Field

from mindfulness.models.activity import MindfulnessSession


class User(BaseModel):
    """
    Learner profile.

    The password is stored as opaque text. completed_sessions is an
    in-memory aggregation only and is never written to storage.
    """

    id: int = 0
    full_name: str | None = None
    email: str | None = None
    password: str | None = None
    focus_area: str | None = None
    completed_sessions: list[MindfulnessSession] = Field(
        default_factory=list, exclude=True
    )

    def add_completed_session(self, session: MindfulnessSession) -> None:
        self.completed_sessions.append(session)
