"""
Dependency injection container.

Factory functions for FastAPI dependencies. DAOs share the process-wide
connection provider; lookup caches are process-wide singletons so that
invalidation by one request is seen by the next.

Dependencies: mindfulness.configs, mindfulness.application, mindfulness.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from mindfulness.application.services import MindfulnessSessionService, UserService
from mindfulness.boundary.db.connection import ConnectionProvider, get_connection_provider
from mindfulness.boundary.db.DAO import MindfulnessSessionDAO, UserDAO
from mindfulness.configs import get_settings
from mindfulness.core.cache import LRUCache
from mindfulness.models import MindfulnessSession, User


def get_provider() -> ConnectionProvider:
    """Get the shared connection provider."""
    return get_connection_provider()


@lru_cache
def get_user_cache() -> LRUCache[int, User]:
    """Get the process-wide user lookup cache."""
    return LRUCache(get_settings().cache.user_max_size)


@lru_cache
def get_session_cache() -> LRUCache[int, MindfulnessSession]:
    """Get the process-wide session lookup cache."""
    return LRUCache(get_settings().cache.session_max_size)


def get_user_service(
    provider: ConnectionProvider = Depends(get_provider),
    cache: LRUCache[int, User] = Depends(get_user_cache),
) -> UserService:
    """
    Get user service instance.

    Args:
        provider: Connection provider (injected via Depends)
        cache: Shared user lookup cache (injected via Depends)

    Returns:
        UserService: Service bound to a UserDAO and the shared user cache
    """
    return UserService(UserDAO(provider), cache)


def get_session_service(
    provider: ConnectionProvider = Depends(get_provider),
    cache: LRUCache[int, MindfulnessSession] = Depends(get_session_cache),
) -> MindfulnessSessionService:
    """
    Get session service instance.

    Args:
        provider: Connection provider (injected via Depends)
        cache: Shared session lookup cache (injected via Depends)

    Returns:
        MindfulnessSessionService: Service bound to a session DAO and the shared cache
    """
    return MindfulnessSessionService(MindfulnessSessionDAO(provider), cache)
