"""Strongly typed identifiers for tkchat entities.

NewType keeps account ids, invite ids and report ids from being mixed up
while staying plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

# Account id issued by the identity service; profiles share it as primary key
UserId = NewType("UserId", UUID)
InviteId = NewType("InviteId", UUID)
RoleGrantId = NewType("RoleGrantId", UUID)
BugReportId = NewType("BugReportId", UUID)
