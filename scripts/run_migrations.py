#!/usr/bin/env python3
"""Upgrade the accounts database schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from gather.config import Settings
from gather.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade to ``revision``; a failure aborts so the API never starts on a stale schema."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database schema up to date", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
