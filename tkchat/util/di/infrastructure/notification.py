"""Notification infrastructure providers."""

from dishka import Scope, provide

from tkchat.adapter.webhook.client import WebhookNotifier
from tkchat.config import NotificationSettings
from tkchat.domain.service import Notifier
from tkchat.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider posting to webhooks."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self, settings: NotificationSettings) -> Notifier:
        """Provide webhook notifier."""
        return WebhookNotifier(
            invite_url=settings.invite_webhook_url,
            bug_report_url=settings.bug_report_webhook_url,
            timeout=settings.timeout_seconds,
        )
