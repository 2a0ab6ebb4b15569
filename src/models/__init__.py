"""SQLAlchemy models."""

from src.models.access_token import AccessToken
from src.models.farmer import Farmer
from src.models.investor import Investor
from src.models.user import ProfileRef, User

__all__ = [
    "User",
    "ProfileRef",
    "Farmer",
    "Investor",
    "AccessToken",
]
