#!/usr/bin/env python3
"""Apply invite schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a specific revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from inviteflow.config import Settings
from inviteflow.util.logging import setup_logging
from inviteflow.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    try:
        logfire.info("Applying invite migrations", target=target)
        command.upgrade(Config("alembic.ini"), target)
        logfire.info("Invite migrations applied", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Invite migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
