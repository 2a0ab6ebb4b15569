"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.exceptions import Forbidden
from src.models.user import User
from src.services.auth import resolve_token
from src.services.session import AuthContext

security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str = "Invalid authentication credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> AuthContext:
    """Resolve the bearer token of the current request to its user and token."""
    if credentials is None:
        raise _unauthorized("Not authenticated")

    resolved = resolve_token(db, credentials.credentials)
    if resolved is None:
        raise _unauthorized()

    user, token = resolved
    return AuthContext(user=user, token=token)


def get_current_user(
    context: Annotated[AuthContext, Depends(get_auth_context)],
) -> User:
    """Get the current authenticated user."""
    return context.user


def require_admin(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """Allow only admin accounts through."""
    if not current_user.is_admin:
        raise Forbidden("Admin access required")
    return current_user
