"""Settings providers."""

from dishka import Scope, provide

from tkchat.config import (
    AuthSettings,
    IdentitySettings,
    InvitationSettings,
    NotificationSettings,
    Settings,
)
from tkchat.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Serves the settings object and the sections components depend on.

    Components ask for the narrowest section they need, so tests can
    reason about which knobs affect which service.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Read settings from the environment and .env."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_identity_settings(self, settings: Settings) -> IdentitySettings:
        return settings.identity

    @provide
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        return settings.invitations

    @provide
    def provide_notification_settings(
        self, settings: Settings
    ) -> NotificationSettings:
        return settings.notifications
