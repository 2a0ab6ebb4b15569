"""Subtype linker: attaches farmer and investor profiles to users."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from src.exceptions import ValidationFailed
from src.models.enums import InvestorType, ProfileType, Role
from src.models.farmer import Farmer
from src.models.investor import Investor
from src.models.user import ProfileRef, User

logger = logging.getLogger(__name__)

DEFAULT_CONTACT = ""
DEFAULT_BUDGET_RANGE = "0-0"
DEFAULT_INVESTOR_TYPE = InvestorType.INDIVIDUAL


@dataclass
class FarmerFields:
    """Writable farmer profile fields."""

    farmer_fname: str
    farmer_lname: str = ""
    farmer_contact: str | None = None


@dataclass
class InvestorFields:
    """Writable investor profile fields."""

    investor_name: str
    investor_contact_no: str | None = None
    investor_budget_range: str | None = None
    investor_type: InvestorType | str | None = None


def split_name(name: str) -> tuple[str, str]:
    """Split a full name into (first, rest); rest is empty for single words."""
    parts = name.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def _check_attachable(user: User, kind: ProfileType) -> None:
    role = Role(user.role)
    if role.profile_type != kind:
        raise ValidationFailed(
            errors={"role": [f"A {role.value} account cannot have a {kind.value} profile."]}
        )
    if user.profile_ref is not None:
        raise ValidationFailed(errors={"profile": ["The account already has a profile."]})


def attach_farmer(db: Session, user: User, fields: FarmerFields) -> Farmer:
    """Create a farmer profile and point ``user`` at it. Flushed, not committed."""
    _check_attachable(user, ProfileType.FARMER)

    farmer = Farmer(
        farmer_fname=fields.farmer_fname,
        farmer_lname=fields.farmer_lname or "",
        farmer_contact=fields.farmer_contact or DEFAULT_CONTACT,
    )
    db.add(farmer)
    db.flush()

    user.profile_ref = ProfileRef(kind=ProfileType.FARMER, id=farmer.id)
    db.flush()
    return farmer


def attach_investor(db: Session, user: User, fields: InvestorFields) -> Investor:
    """Create an investor profile and point ``user`` at it. Flushed, not committed."""
    _check_attachable(user, ProfileType.INVESTOR)

    investor_type = InvestorType(fields.investor_type or DEFAULT_INVESTOR_TYPE)
    investor = Investor(
        investor_name=fields.investor_name,
        investor_contact_no=fields.investor_contact_no or DEFAULT_CONTACT,
        investor_budget_range=fields.investor_budget_range or DEFAULT_BUDGET_RANGE,
        investor_type=investor_type.value,
    )
    db.add(investor)
    db.flush()

    user.profile_ref = ProfileRef(kind=ProfileType.INVESTOR, id=investor.id)
    db.flush()
    return investor


def load_profile(db: Session, user: User) -> Farmer | Investor | None:
    """Load the profile a user points at."""
    ref = user.profile_ref
    if ref is None:
        return None
    if ref.kind == ProfileType.FARMER:
        return db.get(Farmer, ref.id)
    if ref.kind == ProfileType.INVESTOR:
        return db.get(Investor, ref.id)
    return None


def delete_profile(db: Session, user: User) -> None:
    """Delete the user's profile row and clear the reference. Flushed, not committed."""
    profile = load_profile(db, user)
    user.profile_ref = None
    if profile is not None:
        db.delete(profile)
        logger.info(f"Deleted {profile.profile_type.value} profile {profile.id} of user {user.id}")
    db.flush()
