"""Account schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.models.enums import InvestorType, ProfileType, Role
from src.schemas.profile import (
    FarmerResponse,
    InvestorResponse,
    OptionalText50,
    Text20,
    Text30,
    Text50,
    Text255,
)


class AccountCreate(BaseModel):
    """Identity fields every account-creating request carries."""

    name: Text255
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)
    phone: Text20


class AdminCreate(AccountCreate):
    """Admin creation request; the role is fixed to admin."""


class FarmerRegister(AccountCreate):
    """Self-service farmer registration."""

    contact: OptionalText50 | None = None


class InvestorRegister(AccountCreate):
    """Self-service investor registration."""

    contact: OptionalText50 | None = None
    budget_range: OptionalText50 | None = None
    investor_type: InvestorType | None = None


class FarmerCreate(AccountCreate):
    """Admin-created farmer account with explicit profile fields."""

    farmer_fname: Text30
    farmer_lname: Text30
    farmer_contact: Text50


class InvestorCreate(AccountCreate):
    """Admin-created investor account with explicit profile fields."""

    investor_name: Text255
    investor_contact_no: Text50
    investor_budget_range: OptionalText50 | None = None
    investor_type: InvestorType | None = None


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    role: Role
    profile_type: ProfileType | None = None
    profile_id: int | None = None
    created_at: datetime
    updated_at: datetime
    profile: FarmerResponse | InvestorResponse | None = None
