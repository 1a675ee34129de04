#!/usr/bin/env python3
"""Start the accounts API, reporting startup errors to Logfire."""

import sys

import logfire
import uvicorn

from gather.config import Settings
from gather.util.logging import setup_logging
from gather.util.observability import configure_logfire


def main() -> int:
    """Configure logging and observability, then serve the app with uvicorn."""
    settings = Settings()

    setup_logging(settings)
    # Logfire first, so a failing app import is reported
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting accounts API",
            host=settings.api.host,
            port=settings.api.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "gather.interface.api.app:app",
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Accounts API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
