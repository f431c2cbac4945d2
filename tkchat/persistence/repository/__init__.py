"""PostgreSQL repository implementations."""

from tkchat.persistence.repository.bug_report import PostgresBugReportRepository
from tkchat.persistence.repository.invite import PostgresInviteRepository
from tkchat.persistence.repository.profile import PostgresProfileRepository
from tkchat.persistence.repository.role import PostgresRoleRepository

__all__ = [
    "PostgresBugReportRepository",
    "PostgresInviteRepository",
    "PostgresProfileRepository",
    "PostgresRoleRepository",
]
