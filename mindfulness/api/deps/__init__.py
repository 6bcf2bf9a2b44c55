"""FastAPI dependency providers."""

from mindfulness.api.deps.dependencies import (
    get_provider,
    get_session_cache,
    get_session_service,
    get_user_cache,
    get_user_service,
)

__all__ = [
    "get_provider",
    "get_session_cache",
    "get_session_service",
    "get_user_cache",
    "get_user_service",
]
