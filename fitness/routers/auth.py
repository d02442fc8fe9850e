"""
FastAPI router for auth endpoints.

Provides registration and login.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from fitness.dependencies import get_auth_service
from fitness.http import json_response
from fitness.schemas.auth import LoginRequest, RegisterRequest
from fitness.services import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=201)
async def register(
    request: Request,
    body: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Register a new user account.

    The created user is returned without its password hash.
    """
    user = await auth_service.register(
        name=body.name,
        surname=body.surname,
        nick_name=body.nickName,
        email=body.email,
        age=body.age,
        role=body.role,
        password=body.password,
    )
    return json_response(request, user, "You have successfully registered", status_code=201)


@router.post("/login")
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Log in with email and password.

    Returns a bearer token carrying the user's id, role and email.
    """
    token = await auth_service.login(body.email, body.password)
    return json_response(request, token, "You have successfully logged in")
