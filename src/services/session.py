"""Session workflow: login with token rotation, logout, current user."""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.exceptions import InternalError, InvalidCredentials
from src.models.access_token import AccessToken
from src.models.user import User
from src.services.auth import authenticate_user, issue_token, revoke_all_tokens, revoke_token

logger = logging.getLogger(__name__)


@dataclass
class AuthContext:
    """The user and token record behind the current request."""

    user: User
    token: AccessToken


@dataclass
class LoginResult:
    user: User
    token: str


def login(db: Session, email: str, password: str) -> LoginResult:
    """Authenticate and rotate tokens.

    Every active token of the user is revoked before exactly one new token
    is issued; both happen in the same commit. Wrong credentials change
    nothing.
    """
    user = authenticate_user(db, email, password)
    if user is None:
        logger.info("Rejected login attempt")
        raise InvalidCredentials()

    try:
        revoked = revoke_all_tokens(db, user)
        token, _ = issue_token(db, user)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Login failed for user {user.id}: {e}", exc_info=True)
        raise InternalError("Login failed", detail=str(e)) from e

    db.refresh(user)
    logger.info(f"User {user.id} logged in, {revoked} previous token(s) revoked")
    return LoginResult(user=user, token=token)


def logout(db: Session, context: AuthContext) -> None:
    """Revoke only the token used for the current request."""
    try:
        revoke_token(db, context.token)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Logout failed for user {context.user.id}: {e}", exc_info=True)
        raise InternalError("Logout failed", detail=str(e)) from e

    logger.info(f"User {context.user.id} logged out")


def me(context: AuthContext) -> User:
    return context.user
