"""Repository interfaces for the tkchat domain.

Interfaces live in the domain layer (dependency inversion);
implementations live in the persistence layer.
"""

from tkchat.domain.repository.bug_report import BugReportRepository
from tkchat.domain.repository.invite import InviteRepository
from tkchat.domain.repository.profile import ProfileRepository
from tkchat.domain.repository.role import RoleRepository

__all__ = [
    "BugReportRepository",
    "InviteRepository",
    "ProfileRepository",
    "RoleRepository",
]
