"""Application layer DI providers."""

from dishka import Scope, provide

from tkchat.application.usecase.auth import (
    ChangePasswordUseCase,
    GetCurrentUserUseCase,
    RegisterUseCase,
    RequestPasswordResetUseCase,
    SignInUseCase,
)
from tkchat.application.usecase.bug_report import (
    DeleteBugReportUseCase,
    ListBugReportsUseCase,
    SubmitBugReportUseCase,
    ToggleBugReportUseCase,
)
from tkchat.application.usecase.invite import (
    IssueInviteUseCase,
    ListInvitesUseCase,
    RevokeInviteUseCase,
    ValidateInviteUseCase,
)
from tkchat.application.usecase.user import (
    DeleteUserUseCase,
    ListUsersUseCase,
    SetAccountStatusUseCase,
    SetUserRoleUseCase,
    UpdateProfileUseCase,
)
from tkchat.config import Settings
from tkchat.domain.service import (
    BugReportService,
    IdentityService,
    InviteService,
    JWTService,
    NotificationService,
    ProfileService,
    RoleService,
    UserAdminService,
)
from tkchat.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        invite_service: InviteService,
        identity_service: IdentityService,
        profile_service: ProfileService,
        role_service: RoleService,
        jwt_service: JWTService,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            invite_service=invite_service,
            identity_service=identity_service,
            profile_service=profile_service,
            role_service=role_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(
        self,
        identity_service: IdentityService,
        profile_service: ProfileService,
        role_service: RoleService,
        jwt_service: JWTService,
    ) -> SignInUseCase:
        """Provide sign in use case."""
        return SignInUseCase(
            identity_service=identity_service,
            profile_service=profile_service,
            role_service=role_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, profile_service: ProfileService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_change_password_use_case(
        self, identity_service: IdentityService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_request_password_reset_use_case(
        self, identity_service: IdentityService, settings: Settings
    ) -> RequestPasswordResetUseCase:
        """Provide request password reset use case."""
        return RequestPasswordResetUseCase(
            identity_service=identity_service, settings=settings
        )

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_issue_invite_use_case(
        self,
        invite_service: InviteService,
        profile_service: ProfileService,
        identity_service: IdentityService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> IssueInviteUseCase:
        """Provide issue invite use case."""
        return IssueInviteUseCase(
            invite_service=invite_service,
            profile_service=profile_service,
            identity_service=identity_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_validate_invite_use_case(
        self, invite_service: InviteService
    ) -> ValidateInviteUseCase:
        """Provide validate invite use case."""
        return ValidateInviteUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_list_invites_use_case(
        self, invite_service: InviteService, settings: Settings
    ) -> ListInvitesUseCase:
        """Provide list invites use case."""
        return ListInvitesUseCase(invite_service=invite_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_revoke_invite_use_case(
        self, invite_service: InviteService
    ) -> RevokeInviteUseCase:
        """Provide revoke invite use case."""
        return RevokeInviteUseCase(invite_service=invite_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, profile_service: ProfileService, role_service: RoleService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(
            profile_service=profile_service, role_service=role_service
        )

    @provide(scope=Scope.REQUEST)
    def get_set_user_role_use_case(
        self, role_service: RoleService
    ) -> SetUserRoleUseCase:
        """Provide set user role use case."""
        return SetUserRoleUseCase(role_service=role_service)

    @provide(scope=Scope.REQUEST)
    def get_set_account_status_use_case(
        self, user_admin_service: UserAdminService
    ) -> SetAccountStatusUseCase:
        """Provide set account status use case."""
        return SetAccountStatusUseCase(user_admin_service=user_admin_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(
        self, user_admin_service: UserAdminService
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_admin_service=user_admin_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    # Bug report use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_bug_report_use_case(
        self,
        bug_report_service: BugReportService,
        profile_service: ProfileService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> SubmitBugReportUseCase:
        """Provide submit bug report use case."""
        return SubmitBugReportUseCase(
            bug_report_service=bug_report_service,
            profile_service=profile_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_bug_reports_use_case(
        self, bug_report_service: BugReportService, profile_service: ProfileService
    ) -> ListBugReportsUseCase:
        """Provide list bug reports use case."""
        return ListBugReportsUseCase(
            bug_report_service=bug_report_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_bug_report_use_case(
        self, bug_report_service: BugReportService
    ) -> ToggleBugReportUseCase:
        """Provide toggle bug report use case."""
        return ToggleBugReportUseCase(bug_report_service=bug_report_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_bug_report_use_case(
        self, bug_report_service: BugReportService
    ) -> DeleteBugReportUseCase:
        """Provide delete bug report use case."""
        return DeleteBugReportUseCase(bug_report_service=bug_report_service)
