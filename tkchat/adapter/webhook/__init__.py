"""Webhook notification adapter."""

from .client import MockNotifier, WebhookNotifier

__all__ = ["MockNotifier", "WebhookNotifier"]
