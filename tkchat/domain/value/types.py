"""Domain value objects for tkchat.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

import re
from enum import Enum

from pydantic import field_validator

from tkchat.domain.value.common import RootValueObject, ValueObject
from tkchat.domain.value.identifiers import UserId


class InviteStatus(str, Enum):
    """Stored status of an invite.

    ``EXPIRED`` is never written by the service itself; a pending invite
    past its expiry is reported as expired when read.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"


class AppRole(str, Enum):
    """Role labels held in the grant table."""

    USER = "user"
    ADMIN = "admin"
    OWNER = "owner"


class ProfileRole(str, Enum):
    """Denormalized role label cached on the profile row."""

    USER = "user"
    ADMIN = "admin"


class AccountStatus(str, Enum):
    """Whether an account may sign in."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class BugReportStatus(str, Enum):
    """Triage status of a bug report."""

    PENDING = "pending"
    FIXED = "fixed"


class InviteToken(RootValueObject[str]):
    """Opaque invite credential carried in the registration link."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty and bounded."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v


_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase without surrounding spaces.

    Invites, profiles and the identity service all compare emails in this
    normalized form.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate the address shape."""
        v = v.strip().lower()
        if len(v) > 255 or not _EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v


class Actor(ValueObject):
    """Authenticated caller with the role set resolved server-side.

    Passed explicitly into every operation that needs to know who is
    acting; never read from client-supplied claims.
    """

    user_id: UserId
    roles: frozenset[AppRole]

    @property
    def is_admin(self) -> bool:
        """Whether the actor holds admin or owner."""
        return AppRole.ADMIN in self.roles or AppRole.OWNER in self.roles
