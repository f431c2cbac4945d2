"""SQLAlchemy table definitions for tkchat.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (one row per identity-service account)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),  # Identity service account ID
    Column("email", String(255), nullable=True),
    Column("full_name", String(255), nullable=True),
    Column("phone", String(50), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "role",
        Enum("user", "admin", name="profile_role", create_type=False),
        nullable=False,
        server_default="user",
    ),  # Cache of user_roles
    Column(
        "account_status",
        Enum("active", "inactive", name="account_status", create_type=False),
        nullable=False,
        server_default="active",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_sign_in_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_profiles_email", profiles_table.c.email)

# ============================================================================
# USER ROLES TABLE (authoritative role membership)
# ============================================================================
user_roles_table = Table(
    "user_roles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "role",
        Enum("user", "admin", "owner", name="app_role", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
)

Index("idx_user_roles_user_id", user_roles_table.c.user_id)

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False),  # Normalized lowercase
    Column("invited_by", UUID, nullable=False),
    Column("token", String(255), nullable=False, unique=True),
    Column(
        "status",
        Enum("pending", "accepted", "expired", name="invite_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "accepted_by_user_id",
        UUID,
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    ),
)

Index("idx_invites_token", invites_table.c.token)
Index("idx_invites_email_status", invites_table.c.email, invites_table.c.status)

# ============================================================================
# BUG REPORTS TABLE
# ============================================================================
bug_reports_table = Table(
    "bug_reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True
    ),
    Column("description", Text, nullable=False),
    Column("screenshot_url", Text, nullable=True),
    Column(
        "status",
        Enum("pending", "fixed", name="bug_report_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(trim(description)) > 0", name="ck_bug_reports_description"),
)

Index("idx_bug_reports_created_at", bug_reports_table.c.created_at)
