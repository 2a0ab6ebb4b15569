"""Role-scoped account management for admins, farmers and investors."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.exceptions import DuplicateEmail, InternalError, NotFound, ValidationFailed
from src.models.enums import Role
from src.models.farmer import Farmer
from src.models.investor import Investor
from src.models.user import User
from src.schemas.profile import (
    FarmerProfileUpdate,
    FarmerResponse,
    InvestorProfileUpdate,
    InvestorResponse,
)
from src.schemas.user import UserResponse
from src.services.profiles import (
    FarmerFields,
    InvestorFields,
    delete_profile,
    load_profile,
)
from src.services.registration import NewAccount, Registration, register_account

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "The email has already been taken."


def to_profile_response(
    profile: Farmer | Investor | None,
) -> FarmerResponse | InvestorResponse | None:
    if isinstance(profile, Farmer):
        return FarmerResponse.model_validate(profile)
    if isinstance(profile, Investor):
        return InvestorResponse.model_validate(profile)
    return None


def to_user_response(db: Session, user: User) -> UserResponse:
    """Serialize a user together with its profile."""
    response = UserResponse.model_validate(user)
    response.profile = to_profile_response(load_profile(db, user))
    return response


def list_users(db: Session, role: Role) -> list[User]:
    return db.query(User).filter(User.role == role).order_by(User.id).all()


def get_user_with_role(db: Session, user_id: int, role: Role) -> User:
    """Get a user by id, treating a user with another role as missing."""
    user = db.query(User).filter(User.id == user_id, User.role == role).first()
    if user is None:
        raise NotFound(f"{role.value.capitalize()} not found")
    return user


def create_admin(db: Session, account: NewAccount) -> User:
    """Create an admin account without a profile or session token.

    Admin creation is a trusted path, so a taken email is reported on the
    email field instead of the generic registration error.
    """
    try:
        result = register_account(db, account, Role.ADMIN, with_token=False)
    except DuplicateEmail:
        raise ValidationFailed(errors={"email": [EMAIL_TAKEN]}) from None
    return result.user


def create_farmer(db: Session, account: NewAccount, fields: FarmerFields) -> Registration:
    return register_account(db, account, Role.FARMER, fields, with_token=False)


def create_investor(db: Session, account: NewAccount, fields: InvestorFields) -> Registration:
    return register_account(db, account, Role.INVESTOR, fields, with_token=False)


def update_farmer_profile(db: Session, user: User, data: FarmerProfileUpdate) -> Farmer:
    """Overwrite the allow-listed farmer profile fields."""
    farmer = load_profile(db, user)
    if not isinstance(farmer, Farmer):
        raise NotFound("Farmer profile not found")

    farmer.farmer_fname = data.farmer_fname
    farmer.farmer_lname = data.farmer_lname
    farmer.farmer_contact = data.farmer_contact
    _commit(db, f"update farmer profile {farmer.id}")
    db.refresh(farmer)
    return farmer


def update_investor_profile(db: Session, user: User, data: InvestorProfileUpdate) -> Investor:
    """Overwrite the allow-listed investor profile fields.

    Optional fields left out of the request keep their current value.
    """
    investor = load_profile(db, user)
    if not isinstance(investor, Investor):
        raise NotFound("Investor profile not found")

    investor.investor_name = data.investor_name
    investor.investor_contact_no = data.investor_contact_no
    if data.investor_budget_range is not None:
        investor.investor_budget_range = data.investor_budget_range
    if data.investor_type is not None:
        investor.investor_type = data.investor_type.value
    _commit(db, f"update investor profile {investor.id}")
    db.refresh(investor)
    return investor


def delete_account(db: Session, user: User) -> None:
    """Delete the user, its profile and its tokens in one transaction."""
    user_id = user.id
    try:
        delete_profile(db, user)
        db.delete(user)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete account {user_id}: {e}", exc_info=True)
        raise InternalError("Unable to delete account", detail=str(e)) from e
    logger.info(f"Deleted account {user_id}")


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to {action}: {e}", exc_info=True)
        raise InternalError(detail=str(e)) from e
