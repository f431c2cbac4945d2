"""Webhook notifier implementation.

Posts JSON to configured webhook URLs (an automation workflow picks them
up and sends the actual emails or chat messages).
"""

import httpx
import logfire

from tkchat.adapter.error import NotificationError
from tkchat.domain.service.notification_service import (
    BugReportNotification,
    InviteNotification,
    Notifier,
)


class WebhookNotifier(Notifier):
    """Notifier posting to HTTP webhooks."""

    def __init__(
        self,
        invite_url: str | None,
        bug_report_url: str | None,
        timeout: float = 15.0,
    ) -> None:
        """Initialize webhook notifier.

        Args:
            invite_url: Webhook for invite notifications, None to disable
            bug_report_url: Webhook for bug reports, None to disable
            timeout: Per-request timeout in seconds
        """
        self.invite_url = invite_url
        self.bug_report_url = bug_report_url
        self.timeout = timeout

    async def _post(self, url: str | None, payload: dict) -> None:
        if not url:
            raise NotificationError("Webhook URL is not configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, json=payload)
        except httpx.HTTPError as e:
            logfire.error("Webhook HTTP error", error=str(e))
            raise NotificationError(f"HTTP error calling webhook: {e}")

        if response.status_code >= 300:
            logfire.error(
                "Webhook rejected notification",
                status_code=response.status_code,
                error=response.text,
            )
            raise NotificationError(f"Webhook failed: {response.status_code}")

    async def send_invite(self, notification: InviteNotification) -> None:
        """Post an invite notification."""
        await self._post(
            self.invite_url,
            {
                "email": notification.email,
                "invite_url": notification.invite_url,
                "expires_at": notification.expires_at.isoformat(),
                "invited_by": notification.invited_by,
            },
        )

    async def send_bug_report(self, notification: BugReportNotification) -> None:
        """Post a bug report notification."""
        await self._post(
            self.bug_report_url,
            {
                "empresa": notification.company,
                "usuario": notification.user,
                "descricao": notification.description,
                "link_imagem": notification.image_link,
            },
        )


class MockNotifier(Notifier):
    """Notifier recording messages in memory.

    Set ``fail`` to make every delivery raise.
    """

    def __init__(self) -> None:
        """Initialize empty outboxes."""
        self.invites: list[InviteNotification] = []
        self.bug_reports: list[BugReportNotification] = []
        self.fail = False

    async def send_invite(self, notification: InviteNotification) -> None:
        """Record an invite notification."""
        if self.fail:
            raise NotificationError("Webhook unavailable")
        self.invites.append(notification)

    async def send_bug_report(self, notification: BugReportNotification) -> None:
        """Record a bug report notification."""
        if self.fail:
            raise NotificationError("Webhook unavailable")
        self.bug_reports.append(notification)
