"""
FastAPI router for user endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request

from fitness.dependencies import AdminUser, CurrentUser, RegularUser, get_user_service
from fitness.enums import UserRole
from fitness.http import json_response
from fitness.schemas.user import UpdateUserRequest
from fitness.services import UserService
from fitness.validation import param_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

UserId = Annotated[int, Path(), param_id("User id")]


@router.get("")
async def list_users(
    request: Request,
    current_user: CurrentUser,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """
    List users.

    Admins get full records; regular users get only id and nickName.
    """
    if current_user.role == UserRole.ADMIN:
        users = await user_service.list_users()
    else:
        users = await user_service.list_nicknames()
    return json_response(request, users, "List of users")


@router.get("/me")
async def get_own_profile(
    request: Request,
    current_user: RegularUser,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get the caller's own profile."""
    profile = await user_service.get_profile(current_user.id)
    return json_response(request, profile, "User profile")


@router.get("/{user_id}")
async def get_user(
    request: Request,
    user_id: UserId,
    _admin: AdminUser,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user by ID."""
    user = await user_service.get_user(user_id)
    return json_response(request, user, "User detail")


@router.put("/{user_id}")
async def update_user(
    request: Request,
    user_id: UserId,
    body: UpdateUserRequest,
    _admin: AdminUser,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Partially update a user."""
    user = await user_service.update_user(user_id, body.model_dump(exclude_unset=True))
    return json_response(request, user, "User updated")
