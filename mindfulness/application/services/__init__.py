"""
Application services: validation plus persistence for each use case.
"""

from mindfulness.application.services.session_service import MindfulnessSessionService
from mindfulness.application.services.user_service import UserService

__all__ = ["MindfulnessSessionService", "UserService"]
