"""Credential store: password hashing, users and bearer tokens."""

import hashlib
import logging
import secrets
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.exceptions import DuplicateEmail
from src.models.access_token import AccessToken
from src.models.enums import Role
from src.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

LEGACY_API_TOKEN_LENGTH = 60


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookups."""
    return email.strip().lower()


def hash_token_id(token_id: str) -> str:
    return hashlib.sha256(token_id.encode()).hexdigest()


def generate_legacy_api_token() -> str:
    """Random string for the legacy users.api_token column."""
    return secrets.token_urlsafe(LEGACY_API_TOKEN_LENGTH)[:LEGACY_API_TOKEN_LENGTH]


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email, case-insensitively."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def create_user(
    db: Session,
    name: str,
    email: str,
    password: str,
    phone: str,
    role: Role,
) -> User:
    """Insert a user inside the caller's transaction.

    The row is flushed so the unique email index is checked now; the caller
    commits or rolls back. A duplicate email rolls back the session and
    raises DuplicateEmail.
    """
    user = User(
        name=name,
        email=normalize_email(email),
        password_hash=get_password_hash(password),
        phone=phone,
        role=role,
        api_token=generate_legacy_api_token(),
    )
    db.add(user)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        raise DuplicateEmail() from None
    return user


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password.

    Unknown emails still pay for one hash verification, so timing does not
    reveal whether an account exists.
    """
    user = get_user_by_email(db, email)
    if not user:
        pwd_context.dummy_verify()
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def create_access_token(user_id: int, token_id: str, expires_at: datetime) -> str:
    """Create a signed JWT carrying the user id and the random token id."""
    to_encode = {
        "sub": str(user_id),
        "jti": token_id,
        "exp": expires_at,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def issue_token(db: Session, user: User) -> tuple[str, AccessToken]:
    """Issue a new bearer token for ``user``.

    The plaintext token is only returned here; the database keeps the
    sha256 of its id. Flushed, not committed.
    """
    token_id = secrets.token_urlsafe(32)
    expires_at = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    record = AccessToken(
        user_id=user.id,
        name=settings.token_name,
        token_hash=hash_token_id(token_id),
        expires_at=expires_at,
    )
    db.add(record)
    db.flush()
    return create_access_token(user.id, token_id, expires_at), record


def resolve_token(db: Session, token: str) -> tuple[User, AccessToken] | None:
    """Map a bearer token to its user and token record, or None if unusable."""
    payload = decode_access_token(token)
    if payload is None:
        return None

    token_id = payload.get("jti")
    user_id = payload.get("sub")
    if not token_id or user_id is None:
        return None

    record = (
        db.query(AccessToken)
        .filter(AccessToken.token_hash == hash_token_id(token_id))
        .first()
    )
    if record is None or record.is_revoked or record.is_expired():
        return None
    if str(record.user_id) != str(user_id):
        return None

    user = db.get(User, record.user_id)
    if user is None:
        return None
    return user, record


def revoke_token(db: Session, record: AccessToken) -> None:
    """Revoke one token. Revoking a revoked token is a no-op."""
    if record.revoked_at is None:
        record.revoked_at = datetime.now(UTC)
        db.flush()


def revoke_all_tokens(db: Session, user: User) -> int:
    """Revoke every active token of ``user``; returns how many were revoked."""
    revoked = (
        db.query(AccessToken)
        .filter(AccessToken.user_id == user.id, AccessToken.revoked_at.is_(None))
        .update({AccessToken.revoked_at: datetime.now(UTC)}, synchronize_session="fetch")
    )
    db.flush()
    if revoked:
        logger.info(f"Revoked {revoked} token(s) for user {user.id}")
    return revoked
