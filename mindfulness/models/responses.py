"""
HTTP response schemas.

JSON bodies use camelCase keys; Python attributes stay snake_case.

Dependencies: pydantic
System role: API contracts for user and session endpoints
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serializing field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RegisterResponse(CamelModel):
    message: str = "User registered"
    user_id: int


class ScheduleResponse(CamelModel):
    message: str = "Session scheduled"
    session_id: int


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""

    error: str


class UserResponse(CamelModel):
    """User as exposed over HTTP. The password is never included."""

    id: int
    full_name: str | None
    email: str | None
    focus_area: str | None


class SessionSummaryResponse(CamelModel):
    """Row of the per-user session listing."""

    id: int
    title: str | None
    category: str | None
    duration_minutes: int


class SessionResponse(CamelModel):
    """Full session detail."""

    id: int
    user_id: int
    title: str | None
    description: str | None
    difficulty: str | None
    category: str | None
    scheduled_at: datetime
    duration_minutes: int
    reflection_notes: str | None


class UpdateResultResponse(BaseModel):
    updated: bool


class DeleteResultResponse(BaseModel):
    deleted: bool
