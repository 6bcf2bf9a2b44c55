"""
User API endpoints.

Routes:
- POST /api/register - Register a new user (form fields)
- GET /api/users - List all users
- GET /api/users/{id} - Get single user
- PUT /api/users/{id} - Update user (form fields)
- DELETE /api/users/{id} - Delete user

Dependencies: mindfulness.application.services, mindfulness.models
System role: User management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import JSONResponse

from mindfulness.api.deps.dependencies import get_user_service
from mindfulness.application.services.user_service import UserService
from mindfulness.models import User
from mindfulness.models.responses import (
    DeleteResultResponse,
    ErrorResponse,
    RegisterResponse,
    UpdateResultResponse,
)

from .router_utils import error_response, handle_api_errors
from .router_utils.responses import map_user_to_response, map_users_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses=ERROR_RESPONSES,
)
@handle_api_errors
def register_user(
    full_name: str | None = Form(None, alias="fullName"),
    email: str | None = Form(None),
    password: str | None = Form(None),
    focus_area: str | None = Form(None, alias="focusArea"),
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """
    Register a user from form fields.

    Returns:
        201 {"message": "User registered", "userId": id}

    Raises:
        400: Validation failed
        500: Storage failure
    """
    user = User(full_name=full_name, email=email, password=password, focus_area=focus_area)
    user_id = user_service.register_user(user)
    body = RegisterResponse(user_id=user_id)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=body.model_dump(by_alias=True))


@router.get("/users")
@handle_api_errors
def list_users(user_service: UserService = Depends(get_user_service)) -> JSONResponse:
    users = user_service.list_users()
    return JSONResponse(content=map_users_to_response(users))


@router.get("/users/{user_id}", responses={404: {"model": ErrorResponse}})
@handle_api_errors
def get_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """
    Get single user by id.

    Raises:
        404: No user with this id
    """
    user = user_service.get_user(user_id)
    if user is None:
        return error_response(status.HTTP_404_NOT_FOUND, f"User {user_id} not found")
    return JSONResponse(content=map_user_to_response(user))


@router.put("/users/{user_id}", response_model=UpdateResultResponse, responses=ERROR_RESPONSES)
@handle_api_errors
def update_user(
    user_id: int,
    full_name: str | None = Form(None, alias="fullName"),
    email: str | None = Form(None),
    password: str | None = Form(None),
    focus_area: str | None = Form(None, alias="focusArea"),
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """
    Overwrite a user's fields.

    Returns:
        200 {"updated": bool}; false when no row matched the id
    """
    user = User(
        id=user_id,
        full_name=full_name,
        email=email,
        password=password,
        focus_area=focus_area,
    )
    updated = user_service.update_user(user)
    return JSONResponse(content=UpdateResultResponse(updated=updated).model_dump())


@router.delete("/users/{user_id}", response_model=DeleteResultResponse)
@handle_api_errors
def delete_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    deleted = user_service.delete_user(user_id)
    return JSONResponse(content=DeleteResultResponse(deleted=deleted).model_dump())
