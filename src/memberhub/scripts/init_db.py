"""Create the memberhub tables in the configured database."""
from __future__ import annotations

import argparse
import logging

from memberhub.core.logging_config import configure_logging
from memberhub.core.settings import get_settings
from memberhub.db.session import create_db_engine, create_tables, drop_tables

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create the memberhub schema")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing memberhub tables before creating them.",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    engine = create_db_engine(settings)
    try:
        if args.drop:
            drop_tables(engine)
            logger.info("Dropped existing tables")
        create_tables(engine)
        logger.info("Database initialized (%s)", settings.database_dialect)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
