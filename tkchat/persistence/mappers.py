"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from tkchat.domain.model import BugReport, Invite, Profile, RoleGrant
from tkchat.domain.value import (
    AccountStatus,
    AppRole,
    BugReportId,
    BugReportStatus,
    Email,
    InviteId,
    InviteStatus,
    InviteToken,
    ProfileRole,
    RoleGrantId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_user_id(value: Any) -> UserId | None:
    return UserId(_uuid(value)) if value else None


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]) if row.get("email") else None,
        full_name=row.get("full_name"),
        phone=row.get("phone"),
        avatar_url=row.get("avatar_url"),
        role=ProfileRole(row["role"]),
        account_status=AccountStatus(row["account_status"]),
        created_at=row["created_at"],
        last_sign_in_at=row.get("last_sign_in_at"),
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Args:
        profile: Profile domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = profile.model_dump()
    data["email"] = profile.email.root if profile.email else None
    data["role"] = profile.role.value
    data["account_status"] = profile.account_status.value
    return data


def row_to_role_grant(row: Dict[str, Any]) -> RoleGrant:
    """Convert database row to RoleGrant domain model."""
    return RoleGrant(
        id=RoleGrantId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        role=AppRole(row["role"]),
        created_at=row["created_at"],
    )


def role_grant_to_dict(grant: RoleGrant) -> Dict[str, Any]:
    """Convert RoleGrant domain model to database dict."""
    data = grant.model_dump()
    data["role"] = grant.role.value
    return data


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(_uuid(row["id"])),
        email=Email(row["email"]),
        invited_by=UserId(_uuid(row["invited_by"])),
        token=InviteToken(root=row["token"]),
        status=InviteStatus(row["status"]),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        accepted_at=row.get("accepted_at"),
        accepted_by_user_id=_optional_user_id(row.get("accepted_by_user_id")),
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = invite.model_dump()
    data["email"] = invite.email.root
    data["token"] = invite.token.root
    data["status"] = invite.status.value
    return data


def row_to_bug_report(row: Dict[str, Any]) -> BugReport:
    """Convert database row to BugReport domain model."""
    return BugReport(
        id=BugReportId(_uuid(row["id"])),
        user_id=_optional_user_id(row.get("user_id")),
        description=row["description"],
        screenshot_url=row.get("screenshot_url"),
        status=BugReportStatus(row["status"]),
        created_at=row["created_at"],
    )


def bug_report_to_dict(report: BugReport) -> Dict[str, Any]:
    """Convert BugReport domain model to database dict."""
    data = report.model_dump()
    data["status"] = report.status.value
    return data
