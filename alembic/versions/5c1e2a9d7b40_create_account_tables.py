"""create account tables

Revision ID: 5c1e2a9d7b40
Revises:
Create Date: 2026-10-19 09:12:04.118220

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1e2a9d7b40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    # Enum values match the Python enum string values
    userrole_enum = sa.Enum("admin", "farmer", "investor", name="userrole")
    profiletype_enum = sa.Enum("farmer", "investor", name="profiletype")

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=False),
        sa.Column("role", userrole_enum, nullable=False),
        sa.Column("api_token", sa.String(length=80), nullable=True),
        sa.Column("profile_type", profiletype_enum, nullable=True),
        sa.Column("profile_id", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("api_token"),
        sa.UniqueConstraint("profile_type", "profile_id", name="uq_users_profile"),
        sa.CheckConstraint(
            "(profile_type IS NULL) = (profile_id IS NULL)",
            name="ck_users_profile_ref_complete",
        ),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_role"), "users", ["role"], unique=False)

    op.create_table(
        "farmers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("farmer_fname", sa.String(length=255), nullable=False),
        sa.Column("farmer_lname", sa.String(length=255), nullable=False),
        sa.Column("farmer_contact", sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_farmers_id"), "farmers", ["id"], unique=False)

    op.create_table(
        "investors",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("investor_name", sa.String(length=255), nullable=False),
        sa.Column("investor_contact_no", sa.String(length=50), nullable=False),
        sa.Column("investor_budget_range", sa.String(length=50), nullable=False),
        sa.Column("investor_type", sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_investors_id"), "investors", ["id"], unique=False)

    op.create_table(
        "access_tokens",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("token_hash", sa.String(length=64), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_access_tokens_id"), "access_tokens", ["id"], unique=False)
    op.create_index(op.f("ix_access_tokens_user_id"), "access_tokens", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_access_tokens_token_hash"), "access_tokens", ["token_hash"], unique=True
    )
    op.create_index(
        op.f("ix_access_tokens_revoked_at"), "access_tokens", ["revoked_at"], unique=False
    )


def downgrade() -> None:
    op.drop_table("access_tokens")
    op.drop_table("investors")
    op.drop_table("farmers")
    op.drop_table("users")
    sa.Enum(name="profiletype").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="userrole").drop(op.get_bind(), checkfirst=True)
