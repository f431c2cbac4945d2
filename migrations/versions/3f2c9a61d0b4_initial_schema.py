"""initial_schema

Create the schema for the TK Solution chat console backend:
- Profiles (one per identity-service account, cached display role)
- User roles (authoritative role grants)
- Invites (single-use, time-limited registration tokens)
- Bug reports (user-submitted defects with triage status)
- has_role / validate_invite_token helper functions

Revision ID: 3f2c9a61d0b4
Revises:
Create Date: 2026-01-12 00:34:07.412270

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a61d0b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _create_enum(name: str, *values: str) -> None:
    labels = ", ".join(f"'{value}'" for value in values)
    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE {name} AS ENUM ({labels});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    _create_enum("app_role", "user", "admin", "owner")
    _create_enum("profile_role", "user", "admin")
    _create_enum("account_status", "active", "inactive")
    _create_enum("invite_status", "pending", "accepted", "expired")
    _create_enum("bug_report_status", "pending", "fixed")

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),  # Identity service account ID
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "role",
            postgresql.ENUM("user", "admin", name="profile_role", create_type=False),
            nullable=False,
            server_default="user",
        ),
        sa.Column(
            "account_status",
            postgresql.ENUM(
                "active", "inactive", name="account_status", create_type=False
            ),
            nullable=False,
            server_default="active",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("last_sign_in_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_profiles_email", "profiles", ["email"])

    # ========================================================================
    # USER_ROLES table (authoritative)
    # ========================================================================
    op.create_table(
        "user_roles",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "role",
            postgresql.ENUM(
                "user", "admin", "owner", name="app_role", create_type=False
            ),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )
    op.create_index("idx_user_roles_user_id", "user_roles", ["user_id"])

    # ========================================================================
    # INVITES table
    # ========================================================================
    op.create_table(
        "invites",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("invited_by", sa.UUID(), nullable=False),
        sa.Column("token", sa.String(255), nullable=False, unique=True),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "accepted",
                "expired",
                name="invite_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("accepted_by_user_id", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(
            ["accepted_by_user_id"], ["profiles.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_invites_token", "invites", ["token"])
    op.create_index("idx_invites_email_status", "invites", ["email", "status"])

    # ========================================================================
    # BUG_REPORTS table
    # ========================================================================
    op.create_table(
        "bug_reports",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("screenshot_url", sa.Text(), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending", "fixed", name="bug_report_status", create_type=False
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "length(trim(description)) > 0", name="ck_bug_reports_description"
        ),
    )
    op.create_index(
        "idx_bug_reports_created_at", "bug_reports", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # Helper functions
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION has_role(p_user_id UUID, p_role app_role)
        RETURNS BOOLEAN
        LANGUAGE sql
        STABLE
        SECURITY DEFINER
        SET search_path = public
        AS $$
            SELECT EXISTS (
                SELECT 1 FROM user_roles
                WHERE user_id = p_user_id AND role = p_role
            )
        $$;
    """)

    # Reveals only validity and the bound email for a token
    op.execute("""
        CREATE OR REPLACE FUNCTION validate_invite_token(p_token TEXT)
        RETURNS TABLE (is_valid BOOLEAN, email TEXT)
        LANGUAGE plpgsql
        STABLE
        SECURITY DEFINER
        SET search_path = public
        AS $$
        BEGIN
            RETURN QUERY
            SELECT TRUE, i.email::TEXT
            FROM invites i
            WHERE i.token = p_token
              AND i.status = 'pending'
              AND i.expires_at > NOW();

            IF NOT FOUND THEN
                RETURN QUERY SELECT FALSE, NULL::TEXT;
            END IF;
        END;
        $$;
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP FUNCTION IF EXISTS validate_invite_token(TEXT)")
    op.execute("DROP FUNCTION IF EXISTS has_role(UUID, app_role)")

    op.drop_table("bug_reports")
    op.drop_table("invites")
    op.drop_table("user_roles")
    op.drop_table("profiles")

    op.execute("DROP TYPE IF EXISTS bug_report_status")
    op.execute("DROP TYPE IF EXISTS invite_status")
    op.execute("DROP TYPE IF EXISTS account_status")
    op.execute("DROP TYPE IF EXISTS profile_role")
    op.execute("DROP TYPE IF EXISTS app_role")
