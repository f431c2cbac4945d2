"""Domain layer DI providers."""

from dishka import Scope, provide

from tkchat.config import AuthSettings, InvitationSettings
from tkchat.domain.repository import (
    BugReportRepository,
    InviteRepository,
    ProfileRepository,
    RoleRepository,
)
from tkchat.domain.service import (
    BugReportService,
    IdentityClient,
    IdentityService,
    InviteService,
    JWTService,
    NotificationService,
    Notifier,
    ProfileService,
    RoleService,
    UserAdminService,
)
from tkchat.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_invite_service(
        self, invite_repository: InviteRepository, settings: InvitationSettings
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository,
            expiry_days=settings.expiry_days,
        )

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_role_service(
        self, role_repository: RoleRepository, profile_repository: ProfileRepository
    ) -> RoleService:
        """Provide role store."""
        return RoleService(
            role_repository=role_repository, profile_repository=profile_repository
        )

    @provide
    def get_identity_service(self, identity_client: IdentityClient) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(identity_client=identity_client)

    @provide
    def get_notification_service(self, notifier: Notifier) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notifier=notifier)

    @provide
    def get_user_admin_service(
        self,
        profile_repository: ProfileRepository,
        role_service: RoleService,
        identity_service: IdentityService,
    ) -> UserAdminService:
        """Provide account administration domain service."""
        return UserAdminService(
            profile_repository=profile_repository,
            role_service=role_service,
            identity_service=identity_service,
        )

    @provide
    def get_bug_report_service(
        self, bug_report_repository: BugReportRepository
    ) -> BugReportService:
        """Provide bug report domain service."""
        return BugReportService(bug_report_repository=bug_report_repository)
