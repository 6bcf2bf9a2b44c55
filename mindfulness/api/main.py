"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, mindfulness.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mindfulness import __version__
from mindfulness.boundary.db.connection import close_connection
from mindfulness.configs import get_settings
from mindfulness.observability import RequestLoggingMiddleware, configure_logging

from .routers import health_router, sessions_router, users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and releases the shared database
    connection on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")
    logger.info("Mindfulness API starting", extra={"environment": settings.environment})

    yield

    close_connection()
    logger.info("Database connection released")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title=get_settings().app_name,
        description="Users, scheduled mindfulness sessions and reflections",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(sessions_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "mindfulness.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
