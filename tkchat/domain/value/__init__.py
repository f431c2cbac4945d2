"""Domain value objects for tkchat."""

from tkchat.domain.value.identifiers import (
    BugReportId,
    InviteId,
    RoleGrantId,
    UserId,
)
from tkchat.domain.value.password import (
    PASSWORD_REQUIREMENTS,
    PasswordRequirement,
    unmet_requirements,
)
from tkchat.domain.value.types import (
    AccountStatus,
    Actor,
    AppRole,
    BugReportStatus,
    Email,
    InviteStatus,
    InviteToken,
    ProfileRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "InviteId",
    "RoleGrantId",
    "BugReportId",
    # Types
    "AccountStatus",
    "Actor",
    "AppRole",
    "BugReportStatus",
    "Email",
    "InviteStatus",
    "InviteToken",
    "ProfileRole",
    # Password policy
    "PASSWORD_REQUIREMENTS",
    "PasswordRequirement",
    "unmet_requirements",
]
