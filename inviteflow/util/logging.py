"""Stdlib logging setup.

Library code reports through logfire; this covers the records emitted by
dependencies (SQLAlchemy, asyncpg, alembic) and by scripts.
"""

import logging
import sys

import logfire

from inviteflow.config import Settings

_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncio", "asyncpg")


def resolve_log_level(settings: Settings) -> int:
    """Pick the root log level for the current environment."""
    if settings.observability.log_level:
        return logging.getLevelName(settings.observability.log_level.upper())
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger.

    Records go to stdout and, once Logfire is configured, are forwarded
    to it as well so that migration and driver output lands next to the
    application spans.

    Args:
        settings: Application settings
    """
    level = resolve_log_level(settings)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.observability.forward_stdlib_logs:
        handlers.append(logfire.LogfireLoggingHandler())

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("inviteflow").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
