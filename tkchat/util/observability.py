"""Logfire setup for the API, the persistence layer and outbound HTTP.

Application code logs through ``logfire`` directly::

    logfire.info("Invite issued", invite_id=str(invite.id))

    with logfire.span("register.execute", email=email):
        ...

Invite tokens, session tokens and passwords never go into attributes
unmasked; use :func:`mask_token` when a token must be correlated.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tkchat.config import Settings

SERVICE_NAME = "tkchat-backend"

# Attribute names scrubbed on top of Logfire's defaults
SCRUB_PATTERNS = ["service_role", "anon_key"]


def mask_token(token: str | None) -> str | None:
    """Shorten a secret token to a loggable prefix."""
    if not token:
        return token
    return f"{token[:8]}..."


def _should_send(settings: Settings) -> bool:
    # Explicit setting wins, otherwise send whenever a token is configured
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Development sends nothing unless a token is set and prints verbose
    console output when ``debug`` is on. Production sends to Logfire
    cloud when ``OBSERVABILITY__LOGFIRE_TOKEN`` is present.
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``.

    Headers are not captured since they carry the session cookie.
    """

    def _request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        if getattr(request, "client", None):
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace calls to the identity service and notification webhooks."""
    logfire.instrument_httpx()
