"""Unit tests for the webhook notifier."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest
from httpx import Response

from tkchat.adapter.error import NotificationError
from tkchat.adapter.webhook.client import WebhookNotifier
from tkchat.domain.service import BugReportNotification, InviteNotification


class TestWebhookNotifier:
    """Tests for WebhookNotifier."""

    @pytest.mark.asyncio
    async def test_bug_report_payload(self):
        """Bug reports keep the field names the triage workflow expects."""
        notifier = WebhookNotifier(
            invite_url=None, bug_report_url="https://hooks.example.com/bugs"
        )

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = Response(200)

            await notifier.send_bug_report(
                BugReportNotification(
                    company="TK Solution",
                    user="Ana Souza",
                    description="Crash",
                    image_link=None,
                )
            )

            mock_client.post.assert_called_once_with(
                "https://hooks.example.com/bugs",
                json={
                    "empresa": "TK Solution",
                    "usuario": "Ana Souza",
                    "descricao": "Crash",
                    "link_imagem": None,
                },
            )

    @pytest.mark.asyncio
    async def test_invite_payload(self):
        notifier = WebhookNotifier(
            invite_url="https://hooks.example.com/invites", bug_report_url=None
        )
        expires_at = datetime(2026, 1, 19, 12, tzinfo=timezone.utc)

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = Response(204)

            await notifier.send_invite(
                InviteNotification(
                    email="friend@example.com",
                    invite_url="http://localhost:3000/register?token=abc",
                    expires_at=expires_at,
                    invited_by="admin-id",
                )
            )

            _, kwargs = mock_client.post.call_args
            assert kwargs["json"]["expires_at"] == "2026-01-19T12:00:00+00:00"

    @pytest.mark.asyncio
    async def test_rejected_delivery_raises(self):
        notifier = WebhookNotifier(
            invite_url=None, bug_report_url="https://hooks.example.com/bugs"
        )

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = Response(500, text="boom")

            with pytest.raises(NotificationError):
                await notifier.send_bug_report(
                    BugReportNotification(
                        company="TK Solution", user="u", description="d"
                    )
                )

    @pytest.mark.asyncio
    async def test_unconfigured_url_raises(self):
        notifier = WebhookNotifier(invite_url=None, bug_report_url=None)

        with pytest.raises(NotificationError):
            await notifier.send_invite(
                InviteNotification(
                    email="friend@example.com",
                    invite_url="http://localhost:3000/register?token=abc",
                    expires_at=datetime.now(timezone.utc),
                    invited_by="admin-id",
                )
            )
