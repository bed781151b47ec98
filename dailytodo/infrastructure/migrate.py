# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Command-line entrypoint that creates the schema for the configured database."""

from __future__ import annotations

import argparse
import sys

from dailytodo.infrastructure.db.session import Database
from dailytodo.shared.config import load_config
from dailytodo.shared.errors import StoreUnavailableError
from dailytodo.shared.logging import logger, setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create missing tables in the dailytodo database")
    parser.add_argument(
        "--database-url",
        default=None,
        help="Connection string to migrate (defaults to DATABASE_URL)",
    )
    parser.add_argument(
        "--dialect",
        choices=("sqlite", "mysql"),
        default=None,
        help="Force the SQL dialect instead of inferring it from the URL",
    )
    args = parser.parse_args(argv)

    config = load_config()
    setup_logging(config.log_level, debug_mode=config.debug_logging)

    overrides: dict[str, object] = {}
    if args.database_url:
        overrides["url"] = args.database_url
    if args.dialect:
        overrides["dialect"] = args.dialect
    db_config = config.database.model_copy(update=overrides)

    database = Database(db_config)
    try:
        database.migrate()
    except StoreUnavailableError:
        logger.error("migrate: database unavailable, schema not created")
        return 1
    finally:
        database.dispose()

    logger.info(f"migrate: done ({database.dialect})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
