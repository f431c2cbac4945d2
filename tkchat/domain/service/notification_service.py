"""Outbound notification domain service."""

from datetime import datetime

import logfire

from tkchat.domain.value.common import ValueObject

from .base import Service


class InviteNotification(ValueObject):
    """Payload announcing a new invite."""

    email: str
    invite_url: str
    expires_at: datetime
    invited_by: str


class BugReportNotification(ValueObject):
    """Payload announcing a new bug report."""

    company: str
    user: str
    description: str
    image_link: str | None = None


class Notifier:
    """Generic notification channel interface.

    Implementations raise ``tkchat.adapter.error.NotificationError`` when
    a message cannot be delivered.
    """

    async def send_invite(self, notification: InviteNotification) -> None:
        """Deliver an invite notification."""
        raise NotImplementedError

    async def send_bug_report(self, notification: BugReportNotification) -> None:
        """Deliver a bug report notification."""
        raise NotImplementedError


class NotificationService(Service):
    """Domain service dispatching notifications.

    Delivery failures propagate; callers decide whether they are fatal.
    """

    def __init__(self, notifier: Notifier) -> None:
        """Initialize notification service.

        Args:
            notifier: Notification channel implementation
        """
        self.notifier = notifier

    async def notify_invite(self, notification: InviteNotification) -> None:
        """Send the registration link to an invitee."""
        with logfire.span("notification_service.notify_invite", email=notification.email):
            await self.notifier.send_invite(notification)
            logfire.info("Invite notification sent", email=notification.email)

    async def notify_bug_report(self, notification: BugReportNotification) -> None:
        """Forward a bug report to the triage channel."""
        with logfire.span("notification_service.notify_bug_report", user=notification.user):
            await self.notifier.send_bug_report(notification)
            logfire.info("Bug report notification sent", user=notification.user)
