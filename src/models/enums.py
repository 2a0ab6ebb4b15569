"""Enums for model fields."""

from enum import Enum


class Role(str, Enum):
    """Account roles; the role decides which profile may be attached."""

    ADMIN = "admin"
    FARMER = "farmer"
    INVESTOR = "investor"

    @property
    def profile_type(self) -> "ProfileType | None":
        """Profile kind required by this role, None for admins."""
        if self == Role.FARMER:
            return ProfileType.FARMER
        if self == Role.INVESTOR:
            return ProfileType.INVESTOR
        return None


class ProfileType(str, Enum):
    """Tag stored in users.profile_type."""

    FARMER = "farmer"
    INVESTOR = "investor"


class InvestorType(str, Enum):
    """Investor classifications."""

    INDIVIDUAL = "individual"
    ORGANIZATION = "organization"
