"""User model."""

from dataclasses import dataclass

from sqlalchemy import CheckConstraint, Column, Enum, Integer, String, UniqueConstraint

from src.database import Base
from src.models.enums import ProfileType, Role
from src.models.mixins import TimestampMixin


@dataclass(frozen=True)
class ProfileRef:
    """Reference from a user to its farmer or investor profile."""

    kind: ProfileType
    id: int


class User(Base, TimestampMixin):
    """Identity record shared by admins, farmers and investors."""

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("profile_type", "profile_id", name="uq_users_profile"),
        CheckConstraint(
            "(profile_type IS NULL) = (profile_id IS NULL)",
            name="ck_users_profile_ref_complete",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=False)
    role = Column(
        Enum(Role, name="userrole", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        index=True,
    )
    # Legacy long-lived token, kept for old clients; never serialized
    api_token = Column(String(80), unique=True, nullable=True)
    profile_type = Column(
        Enum(ProfileType, name="profiletype", values_callable=lambda x: [e.value for e in x]),
        nullable=True,
    )
    profile_id = Column(Integer, nullable=True)

    @property
    def profile_ref(self) -> ProfileRef | None:
        """Tagged profile reference, or None for accounts without a profile."""
        if self.profile_type is None or self.profile_id is None:
            return None
        return ProfileRef(kind=ProfileType(self.profile_type), id=self.profile_id)

    @profile_ref.setter
    def profile_ref(self, ref: ProfileRef | None) -> None:
        self.profile_type = ref.kind if ref else None
        self.profile_id = ref.id if ref else None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
