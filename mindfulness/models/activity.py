"""
Mindfulness activity domain models.

Courses and sessions share identity, title and description through
MindfulnessActivity and are told apart by the practice_type discriminator
field. Practice is the tagged union over both variants.

Dependencies: pydantic
System role: Activity entities carried between DAOs, services and API
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class PracticeType(str, Enum):
    """Discriminator for the kinds of mindfulness content."""

    COURSE = "COURSE"
    SESSION = "SESSION"


class MindfulnessActivity(BaseModel):
    """Fields shared by every kind of mindfulness content."""

    id: int = 0
    title: str | None = None
    description: str | None = None


class MindfulnessCourse(MindfulnessActivity):
    """Curated course a learner can enroll in. Modeled only, not persisted."""

    practice_type: Literal[PracticeType.COURSE] = PracticeType.COURSE
    instructor: str | None = None
    level: str | None = None
    duration_minutes: int = 0

    @property
    def category(self) -> str:
        return f"{self.level} Course"


class MindfulnessSession(MindfulnessActivity):
    """
    A single meditation or mindfulness practice scheduled by a user.

    Attributes:
        user_id: Owning user id (validated positive, not a foreign key)
        difficulty: Free-text difficulty label
        category: Free-text category
        scheduled_at: Local date-time the session is planned for
        duration_minutes: Planned or actual length, must be positive
        reflection_notes: Notes added after the session, mutable
    """

    practice_type: Literal[PracticeType.SESSION] = PracticeType.SESSION
    user_id: int = 0
    difficulty: str | None = None
    category: str | None = None
    scheduled_at: datetime | None = None
    duration_minutes: int = 0
    reflection_notes: str | None = None


Practice = Annotated[
    Union[MindfulnessCourse, MindfulnessSession],
    Field(discriminator="practice_type"),
]
