"""Mixins for SQLAlchemy models."""

from sqlalchemy import Column, DateTime, Integer, func


class TimestampMixin:
    """created_at / updated_at columns filled by the database."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class ProfileMixin(TimestampMixin):
    """Shared shape of the role-specific profile tables.

    A profile row has no foreign key of its own; ownership lives on
    users.profile_type / users.profile_id. Subclasses set the
    ``profile_type`` tag they are stored under.
    """

    id = Column(Integer, primary_key=True, index=True)
