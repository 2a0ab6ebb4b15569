"""Farmer account API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user, require_admin
from src.database import get_db
from src.exceptions import Forbidden
from src.models.enums import Role
from src.models.user import User
from src.schemas.envelope import Envelope, success
from src.schemas.profile import FarmerProfileUpdate
from src.schemas.user import FarmerCreate, FarmerRegister, UserResponse
from src.services import accounts
from src.services.profiles import FarmerFields, split_name
from src.services.registration import NewAccount

router = APIRouter(prefix="/api/v1/farmers", tags=["farmers"])


@router.post(
    "/register",
    response_model=Envelope[dict[str, UserResponse]],
    status_code=status.HTTP_201_CREATED,
)
async def register_farmer(
    farmer_data: FarmerRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a farmer account without starting a session."""
    first_name, last_name = split_name(farmer_data.name)
    result = accounts.create_farmer(
        db,
        NewAccount(
            name=farmer_data.name,
            email=farmer_data.email,
            password=farmer_data.password,
            phone=farmer_data.phone,
        ),
        FarmerFields(
            farmer_fname=first_name,
            farmer_lname=last_name,
            farmer_contact=farmer_data.contact,
        ),
    )
    return success(
        message="Farmer registered successfully",
        data={"user": accounts.to_user_response(db, result.user)},
    )


@router.get("", response_model=Envelope[dict[str, list[UserResponse]]])
async def list_farmers(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List farmer accounts."""
    farmers = accounts.list_users(db, Role.FARMER)
    return success(data={"farmers": [accounts.to_user_response(db, f) for f in farmers]})


@router.post(
    "",
    response_model=Envelope[dict[str, UserResponse]],
    status_code=status.HTTP_201_CREATED,
)
async def create_farmer(
    farmer_data: FarmerCreate,
    admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a farmer account with explicit profile fields (admin only)."""
    result = accounts.create_farmer(
        db,
        NewAccount(
            name=farmer_data.name,
            email=farmer_data.email,
            password=farmer_data.password,
            phone=farmer_data.phone,
        ),
        FarmerFields(
            farmer_fname=farmer_data.farmer_fname,
            farmer_lname=farmer_data.farmer_lname,
            farmer_contact=farmer_data.farmer_contact,
        ),
    )
    return success(
        message="Farmer created successfully",
        data={"farmer": accounts.to_user_response(db, result.user)},
    )


@router.get("/{farmer_id}", response_model=Envelope[dict[str, UserResponse]])
async def get_farmer(
    farmer_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get one farmer account."""
    farmer = accounts.get_user_with_role(db, farmer_id, Role.FARMER)
    return success(data={"farmer": accounts.to_user_response(db, farmer)})


@router.put("/{farmer_id}", response_model=Envelope[dict[str, UserResponse]])
async def update_farmer(
    farmer_id: int,
    profile_data: FarmerProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update a farmer profile (admin or the farmer themself)."""
    farmer = accounts.get_user_with_role(db, farmer_id, Role.FARMER)
    if not current_user.is_admin and current_user.id != farmer.id:
        raise Forbidden()

    accounts.update_farmer_profile(db, farmer, profile_data)
    return success(
        message="Farmer updated successfully",
        data={"farmer": accounts.to_user_response(db, farmer)},
    )


@router.delete("/{farmer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_farmer(
    farmer_id: int,
    admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a farmer account with its profile and tokens (admin only)."""
    farmer = accounts.get_user_with_role(db, farmer_id, Role.FARMER)
    accounts.delete_account(db, farmer)
