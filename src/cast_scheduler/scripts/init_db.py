# src/cast_scheduler/scripts/init_db.py
"""Create (or recreate) the database tables without running migrations."""
from __future__ import annotations

import argparse
import logging

from cast_scheduler.db.session import create_tables, drop_tables

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--drop",
        action="store_true",
        help="drop existing tables before creating them",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    if args.drop:
        drop_tables()
        logger.info("Dropped existing tables")
    create_tables()
    logger.info("Database initialized")


if __name__ == "__main__":
    main()
