"""Standard library logging setup.

Application code logs through Logfire; this routes the stdlib loggers of
uvicorn, SQLAlchemy, alembic and httpx to Logfire as well, and to stdout.
"""

import logging
import sys

import logfire

from gather.config import Settings

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger.

    Args:
        settings: Application settings; ``debug`` lowers the level to DEBUG
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logging.basicConfig(
        level=level,
        handlers=[stream_handler, logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
