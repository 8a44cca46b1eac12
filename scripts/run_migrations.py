#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from blog.config import Settings
from blog.util.error import ConfigurationError
from blog.util.logging import get_logger, setup_logging
from blog.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"

logger = get_logger(__name__)


def main() -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    if not ALEMBIC_INI.exists():
        raise ConfigurationError(f"Alembic config not found at {ALEMBIC_INI}")

    try:
        logfire.info("Starting database migrations")
        logger.info("Upgrading %s to head", settings.environment)

        alembic_cfg = Config(str(ALEMBIC_INI))
        command.upgrade(alembic_cfg, "head")

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deploy fails instead of running on a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
