#!/usr/bin/env python3
"""Serve the API with uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from tkchat.config import Settings
from tkchat.util.observability import configure_logfire


def main() -> int:
    """Run the application server."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting tkchat API", environment=settings.environment)
        uvicorn.run(
            "tkchat.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
