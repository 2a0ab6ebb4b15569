"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthData, UserLogin, UserRegister
from src.schemas.envelope import Envelope
from src.schemas.profile import (
    FarmerProfileUpdate,
    FarmerResponse,
    InvestorProfileUpdate,
    InvestorResponse,
)
from src.schemas.user import (
    AdminCreate,
    FarmerCreate,
    FarmerRegister,
    InvestorCreate,
    InvestorRegister,
    UserResponse,
)

__all__ = [
    "Envelope",
    "UserRegister",
    "UserLogin",
    "AuthData",
    "UserResponse",
    "AdminCreate",
    "FarmerRegister",
    "FarmerCreate",
    "InvestorRegister",
    "InvestorCreate",
    "FarmerProfileUpdate",
    "FarmerResponse",
    "InvestorProfileUpdate",
    "InvestorResponse",
]
