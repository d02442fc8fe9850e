"""
Pydantic models for user management.
"""

from typing import Annotated, Optional

from pydantic import BaseModel

from fitness.enums import UserRole
from fitness.validation import non_negative_int, one_of, optional_string


class UpdateUserRequest(BaseModel):
    """Partial update of a user by an admin. Omitted fields are kept."""
    name: Annotated[Optional[str], optional_string("Name")] = None
    surname: Annotated[Optional[str], optional_string("Surname")] = None
    nickName: Annotated[Optional[str], optional_string("NickName")] = None
    age: Annotated[Optional[int], non_negative_int("Age")] = None
    role: Annotated[Optional[UserRole], one_of("role", UserRole)] = None
