"""Investor account API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user, require_admin
from src.database import get_db
from src.exceptions import Forbidden
from src.models.enums import Role
from src.models.user import User
from src.schemas.envelope import Envelope, success
from src.schemas.profile import InvestorProfileUpdate
from src.schemas.user import InvestorCreate, InvestorRegister, UserResponse
from src.services import accounts
from src.services.profiles import InvestorFields
from src.services.registration import NewAccount

router = APIRouter(prefix="/api/v1/investors", tags=["investors"])


@router.post(
    "/register",
    response_model=Envelope[dict[str, UserResponse]],
    status_code=status.HTTP_201_CREATED,
)
async def register_investor(
    investor_data: InvestorRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register an investor account without starting a session."""
    result = accounts.create_investor(
        db,
        NewAccount(
            name=investor_data.name,
            email=investor_data.email,
            password=investor_data.password,
            phone=investor_data.phone,
        ),
        InvestorFields(
            investor_name=investor_data.name,
            investor_contact_no=investor_data.contact,
            investor_budget_range=investor_data.budget_range,
            investor_type=investor_data.investor_type,
        ),
    )
    return success(
        message="Investor registered successfully",
        data={"user": accounts.to_user_response(db, result.user)},
    )


@router.get("", response_model=Envelope[dict[str, list[UserResponse]]])
async def list_investors(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List investor accounts."""
    investors = accounts.list_users(db, Role.INVESTOR)
    return success(data={"investors": [accounts.to_user_response(db, i) for i in investors]})


@router.post(
    "",
    response_model=Envelope[dict[str, UserResponse]],
    status_code=status.HTTP_201_CREATED,
)
async def create_investor(
    investor_data: InvestorCreate,
    admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create an investor account with explicit profile fields (admin only)."""
    result = accounts.create_investor(
        db,
        NewAccount(
            name=investor_data.name,
            email=investor_data.email,
            password=investor_data.password,
            phone=investor_data.phone,
        ),
        InvestorFields(
            investor_name=investor_data.investor_name,
            investor_contact_no=investor_data.investor_contact_no,
            investor_budget_range=investor_data.investor_budget_range,
            investor_type=investor_data.investor_type,
        ),
    )
    return success(
        message="Investor created successfully",
        data={"investor": accounts.to_user_response(db, result.user)},
    )


@router.get("/{investor_id}", response_model=Envelope[dict[str, UserResponse]])
async def get_investor(
    investor_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get one investor account."""
    investor = accounts.get_user_with_role(db, investor_id, Role.INVESTOR)
    return success(data={"investor": accounts.to_user_response(db, investor)})


@router.put("/{investor_id}", response_model=Envelope[dict[str, UserResponse]])
async def update_investor(
    investor_id: int,
    profile_data: InvestorProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update an investor profile (admin or the investor themself)."""
    investor = accounts.get_user_with_role(db, investor_id, Role.INVESTOR)
    if not current_user.is_admin and current_user.id != investor.id:
        raise Forbidden()

    accounts.update_investor_profile(db, investor, profile_data)
    return success(
        message="Investor updated successfully",
        data={"investor": accounts.to_user_response(db, investor)},
    )


@router.delete("/{investor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_investor(
    investor_id: int,
    admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete an investor account with its profile and tokens (admin only)."""
    investor = accounts.get_user_with_role(db, investor_id, Role.INVESTOR)
    accounts.delete_account(db, investor)
