"""In-memory repository implementations for testing."""

from .bug_report import InMemoryBugReportRepository
from .invite import InMemoryInviteRepository
from .profile import InMemoryProfileRepository
from .role import InMemoryRoleRepository

__all__ = [
    "InMemoryBugReportRepository",
    "InMemoryInviteRepository",
    "InMemoryProfileRepository",
    "InMemoryRoleRepository",
]
