#!/usr/bin/env python3
"""Apply alembic migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade or downgrade to a revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from threads.config import Settings
from threads.util.logging import get_logger, setup_logging
from threads.util.observability import configure_logfire

logger = get_logger(__name__)


def migrate(config: Config, target: str) -> None:
    """Move the schema to ``target``, downgrading for ``-N`` or ``base``."""
    if target == "base" or target.startswith("-"):
        command.downgrade(config, target)
    else:
        command.upgrade(config, target)


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    with logfire.span(
        "run_migrations", target=target, environment=settings.environment
    ):
        try:
            migrate(Config("alembic.ini"), target)
        except Exception:
            # The app must not start against a half-migrated schema
            logger.exception("Migration to %s failed", target)
            raise
    logger.info("Schema is at %s", target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
