"""
Pydantic models for auth request validation.

Field order is the order in which rules are reported; only the first
failing field reaches the client.
"""

from typing import Annotated

from pydantic import BaseModel

from fitness.config import settings
from fitness.enums import UserRole
from fitness.validation import (
    email_address,
    min_length,
    non_negative_int,
    one_of,
    required_string,
)


class RegisterRequest(BaseModel):
    """Request body for user registration."""
    name: Annotated[str, required_string("Name")]
    surname: Annotated[str, required_string("Surname")]
    nickName: Annotated[str, required_string("NickName")]
    email: Annotated[str, email_address("Email")]
    age: Annotated[int, non_negative_int("Age")]
    role: Annotated[UserRole, one_of("role", UserRole)]
    password: Annotated[str, min_length("Password", settings.PASSWORD_MIN_LENGTH)]


class LoginRequest(BaseModel):
    """Request body for user login."""
    email: Annotated[str, email_address("Email")]
    password: Annotated[str, required_string("Password", strip=False)]
