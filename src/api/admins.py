"""Admin account API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import require_admin
from src.database import get_db
from src.models.enums import Role
from src.models.user import User
from src.schemas.envelope import Envelope, success
from src.schemas.user import AdminCreate, UserResponse
from src.services import accounts
from src.services.registration import NewAccount

router = APIRouter(prefix="/api/v1/admins", tags=["admins"])


@router.post(
    "",
    response_model=Envelope[dict[str, UserResponse]],
    status_code=status.HTTP_201_CREATED,
)
async def create_admin(
    admin_data: AdminCreate,
    current_admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create another admin account."""
    admin = accounts.create_admin(
        db,
        NewAccount(
            name=admin_data.name,
            email=admin_data.email,
            password=admin_data.password,
            phone=admin_data.phone,
        ),
    )
    return success(
        message="Admin user created successfully",
        data={"admin": accounts.to_user_response(db, admin)},
    )


@router.get("", response_model=Envelope[dict[str, list[UserResponse]]])
async def list_admins(
    current_admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
):
    """List admin accounts."""
    admins = accounts.list_users(db, Role.ADMIN)
    return success(data={"admins": [accounts.to_user_response(db, a) for a in admins]})
