"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_auth_context
from src.config import get_settings
from src.database import get_db
from src.models.enums import Role
from src.schemas.auth import AuthData, UserLogin, UserRegister
from src.schemas.envelope import Envelope, success
from src.schemas.user import UserResponse
from src.services import session as session_service
from src.services.accounts import to_user_response
from src.services.profiles import FarmerFields, InvestorFields, split_name
from src.services.registration import NewAccount, register_account
from src.services.session import AuthContext

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])

settings = get_settings()


def profile_fields_for(user_data: UserRegister) -> FarmerFields | InvestorFields:
    """Profile fields derived from a public registration request."""
    if user_data.role == Role.FARMER.value:
        first_name, last_name = split_name(user_data.name)
        return FarmerFields(
            farmer_fname=first_name,
            farmer_lname=last_name,
            farmer_contact=user_data.contact,
        )
    return InvestorFields(
        investor_name=user_data.name,
        investor_contact_no=user_data.contact,
        investor_budget_range=user_data.budget_range,
        investor_type=user_data.investor_type,
    )


@router.post(
    "/register",
    response_model=Envelope[AuthData],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a farmer or investor and start a session."""
    result = register_account(
        db,
        NewAccount(
            name=user_data.name,
            email=user_data.email,
            password=user_data.password,
            phone=user_data.phone,
        ),
        Role(user_data.role),
        profile_fields_for(user_data),
    )

    return success(
        message="Registration successful",
        data=AuthData(
            user=to_user_response(db, result.user),
            token=result.token,
            expires_in=settings.jwt_expiration_minutes,
        ),
    )


@router.post("/login", response_model=Envelope[AuthData])
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password; older sessions are revoked."""
    result = session_service.login(db, credentials.email, credentials.password)

    return success(
        message="Login successful",
        data=AuthData(
            user=to_user_response(db, result.user),
            token=result.token,
            expires_in=settings.jwt_expiration_minutes,
        ),
    )


@router.get("/me", response_model=Envelope[UserResponse])
async def get_me(
    context: Annotated[AuthContext, Depends(get_auth_context)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get current user information."""
    return success(data=to_user_response(db, session_service.me(context)))


@router.post("/logout", response_model=Envelope[None])
async def logout(
    context: Annotated[AuthContext, Depends(get_auth_context)],
    db: Annotated[Session, Depends(get_db)],
):
    """Revoke the token used for this request."""
    session_service.logout(db, context)
    return success(message="Logged out successfully")
