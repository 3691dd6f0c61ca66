"""
Authentication Pydantic schemas.

Defines request and response schemas for authentication endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from datetime import datetime
from typing import Optional, Union
from driverapp.app.core.exceptions import InvalidInputError
from driverapp.app.models.enums import RoleName, SEED_ROLES

# Numeric role ids accepted at registration (1 -> user, 2 -> driver)
ACCEPTED_ROLE_IDS = tuple(range(1, len(SEED_ROLES) + 1))


class RoleRef(BaseModel):
    """
    Reference to a role, either by name or by numeric id.

    Exactly one of ``by_name`` / ``by_id`` is set.
    """
    by_name: Optional[RoleName] = None
    by_id: Optional[int] = None

    @classmethod
    def parse(cls, value: Union[int, str]) -> "RoleRef":
        """
        Build a reference from the raw ``role`` field of a registration.

        Raises:
            InvalidInputError: if the value is neither an accepted role name
                nor an accepted role id
        """
        if isinstance(value, str):
            try:
                return cls(by_name=RoleName(value))
            except ValueError:
                raise InvalidInputError("Invalid role")
        if isinstance(value, int) and not isinstance(value, bool) and value in ACCEPTED_ROLE_IDS:
            return cls(by_id=value)
        raise InvalidInputError("Invalid role")


class UserRegister(BaseModel):
    """
    Schema for user registration.

    Used by POST /api/register. ``role`` accepts a role name
    ("user", "driver") or a role id (1, 2).
    """
    username: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="User email address (unique)")
    password: str = Field(..., min_length=1, description="Plaintext password")
    role: Union[StrictInt, StrictStr] = Field(..., description="Role name or role id")

    @property
    def role_ref(self) -> RoleRef:
        return RoleRef.parse(self.role)


class UserLogin(BaseModel):
    """Schema for user login. Used by POST /api/login."""
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class UserResponse(BaseModel):
    """Public view of a user; never includes the password hash."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role_id: int
    created_at: datetime
    updated_at: datetime


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class TokenResponse(BaseModel):
    """Returned by a successful login."""
    token: str = Field(..., description="JWT bearer token")
