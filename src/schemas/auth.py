"""Authentication schemas."""

from typing import Literal

from pydantic import BaseModel, EmailStr, Field

from src.models.enums import InvestorType
from src.schemas.profile import OptionalText50
from src.schemas.user import AccountCreate, UserResponse


class UserRegister(AccountCreate):
    """Public registration request.

    Profile fields are optional; missing ones fall back to defaults.
    """

    role: Literal["farmer", "investor"]
    contact: OptionalText50 | None = None
    budget_range: OptionalText50 | None = None
    investor_type: InvestorType | None = None


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class AuthData(BaseModel):
    """Payload returned by register and login."""

    user: UserResponse
    token: str
    token_type: str = "Bearer"  # noqa: S105
    expires_in: int
