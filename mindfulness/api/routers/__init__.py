"""API routers."""

from .health import router as health_router
from .sessions import router as sessions_router
from .users import router as users_router

__all__ = [
    "health_router",
    "sessions_router",
    "users_router",
]
