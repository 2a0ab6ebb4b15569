"""Registration workflow: create user, attach profile, issue token, commit once."""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.exceptions import AppError, InternalError
from src.models.enums import Role
from src.models.farmer import Farmer
from src.models.investor import Investor
from src.models.user import User
from src.services.auth import create_user, issue_token
from src.services.profiles import FarmerFields, InvestorFields, attach_farmer, attach_investor

logger = logging.getLogger(__name__)


@dataclass
class NewAccount:
    """Identity fields for a new account."""

    name: str
    email: str
    password: str
    phone: str


@dataclass
class Registration:
    """Outcome of a successful registration."""

    user: User
    profile: Farmer | Investor | None
    token: str | None = None


def register_account(
    db: Session,
    account: NewAccount,
    role: Role,
    profile_fields: FarmerFields | InvestorFields | None = None,
    with_token: bool = True,
) -> Registration:
    """Create a user of ``role`` with its profile, optionally issuing a token.

    Everything is flushed inside one transaction and committed at the end;
    any failure rolls the whole registration back. Farmers and investors
    must come with matching profile fields, admins with none.
    """
    _check_profile_fields(role, profile_fields)

    try:
        user = create_user(
            db,
            name=account.name,
            email=account.email,
            password=account.password,
            phone=account.phone,
            role=role,
        )

        profile: Farmer | Investor | None = None
        if isinstance(profile_fields, FarmerFields):
            profile = attach_farmer(db, user, profile_fields)
        elif isinstance(profile_fields, InvestorFields):
            profile = attach_investor(db, user, profile_fields)

        token = None
        if with_token:
            token, _ = issue_token(db, user)

        db.commit()
    except AppError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Registration of a {role.value} account failed: {e}", exc_info=True)
        raise InternalError("Registration failed", detail=str(e)) from e

    db.refresh(user)
    logger.info(f"Registered {role.value} account {user.id}")
    return Registration(user=user, profile=profile, token=token)


def _check_profile_fields(role: Role, profile_fields: FarmerFields | InvestorFields | None) -> None:
    expected = {Role.FARMER: FarmerFields, Role.INVESTOR: InvestorFields}.get(role)
    if expected is None:
        if profile_fields is not None:
            raise ValueError(f"{role.value} accounts take no profile fields")
        return
    if not isinstance(profile_fields, expected):
        raise ValueError(f"{role.value} accounts need {expected.__name__}")
