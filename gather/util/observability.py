"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("User created", stable_id=user.stable_id, provider="kakao")

    with logfire.span("federated_login", provider="google"):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from gather.config import Settings

# Attribute names redacted from spans and logs on top of Logfire's defaults
SCRUBBED_FIELDS = ["placeholder_secret", "client_secret", "access_token"]


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit ``send_to_logfire`` wins, otherwise send only when a token is set."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API and the scripts.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship telemetry to Logfire
    cloud; without it everything stays on the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    logfire.configure(
        service_name="gather-accounts",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_FIELDS),
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
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes.

    Headers carry bearer tokens and are never captured.
    """
    logfire.instrument_fastapi(app, capture_headers=False, excluded_urls="/health")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries of an async engine."""
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )


def instrument_httpx() -> None:
    """Instrument httpx so provider round-trips show up as spans."""
    logfire.instrument_httpx()
