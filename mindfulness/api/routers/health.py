"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: mindfulness.boundary
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from mindfulness.api.deps.dependencies import get_provider
from mindfulness.boundary.db.connection import ConnectionProvider
from mindfulness.models.responses import ErrorResponse

from .router_utils import error_response

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get(
    "/db",
    response_model=HealthResponse,
    responses={503: {"model": ErrorResponse}},
)
def health_check_db(
    provider: ConnectionProvider = Depends(get_provider),
) -> HealthResponse | JSONResponse:
    """Database health check running SELECT 1 on the shared connection."""
    try:
        with provider.connection() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Database health check failed", extra={"error": str(e)})
        return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, "Database unavailable")
    return HealthResponse(status="healthy", message="Database connection OK")
