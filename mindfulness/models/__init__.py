"""
Domain models and HTTP schemas.

Exports:
  - User: learner profile entity
  - MindfulnessActivity, MindfulnessCourse, MindfulnessSession, Practice,
    PracticeType: activity entities as a tagged variant
"""

from mindfulness.models.activity import (
    MindfulnessActivity,
    MindfulnessCourse,
    MindfulnessSession,
    Practice,
    PracticeType,
)
from mindfulness.models.user import User

__all__ = [
    "MindfulnessActivity",
    "MindfulnessCourse",
    "MindfulnessSession",
    "Practice",
    "PracticeType",
    "User",
]
