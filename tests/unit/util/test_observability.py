"""Unit tests for observability helpers."""

from tkchat.config import ObservabilitySettings, Settings
from tkchat.util.observability import _should_send, mask_token


class TestMaskToken:
    def test_keeps_prefix_only(self):
        assert mask_token("2b0c9f1e-aaaa-bbbb-cccc-dddddddddddd") == "2b0c9f1e..."

    def test_empty_passes_through(self):
        assert mask_token(None) is None
        assert mask_token("") == ""


class TestShouldSend:
    def test_token_enables_sending(self):
        settings = Settings(observability=ObservabilitySettings(logfire_token="t"))

        assert _should_send(settings) is True

    def test_explicit_flag_wins(self):
        settings = Settings(
            observability=ObservabilitySettings(
                logfire_token="t", send_to_logfire=False
            )
        )

        assert _should_send(settings) is False

    def test_nothing_configured(self):
        assert _should_send(Settings()) is False
