"""Domain model entities for tkchat."""

from tkchat.domain.model.bug_report import BugReport
from tkchat.domain.model.invite import Invite
from tkchat.domain.model.profile import Profile
from tkchat.domain.model.role import RoleGrant

__all__ = [
    "BugReport",
    "Invite",
    "Profile",
    "RoleGrant",
]
