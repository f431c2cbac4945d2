"""Domain services."""

from .authorization import (
    Action,
    Capability,
    can_act_on,
    can_assign_role,
    has_capability,
    is_elevated,
    profile_role_for,
    require_capability,
)
from .base import Service
from .bug_report_service import BugReportService
from .identity_service import IdentityAccount, IdentityClient, IdentityService
from .invite_service import InviteService
from .jwt_service import JWTService
from .notification_service import (
    BugReportNotification,
    InviteNotification,
    NotificationService,
    Notifier,
)
from .profile_service import ProfileService
from .role_service import RoleService
from .user_admin_service import UserAdminService

__all__ = [
    "Action",
    "BugReportNotification",
    "BugReportService",
    "Capability",
    "IdentityAccount",
    "IdentityClient",
    "IdentityService",
    "InviteNotification",
    "InviteService",
    "JWTService",
    "NotificationService",
    "Notifier",
    "ProfileService",
    "RoleService",
    "Service",
    "UserAdminService",
    "can_act_on",
    "can_assign_role",
    "has_capability",
    "is_elevated",
    "profile_role_for",
    "require_capability",
]
