#!/usr/bin/env python3
"""
Print the SQL migrations for the sauna directory database.

The hosted database only exposes tables over REST, so DDL has to be
run in the project's SQL editor.  This script checks that the store is
configured and prints every migration file in order, ready to paste.

Usage:
    python migrate.py
    python migrate.py --dir ./sauna_directory/db/migrations
"""

import argparse
import logging
import sys
from pathlib import Path

from sauna_directory.app.core.config import settings
from sauna_directory.app.core.db import MIGRATIONS_DIR, iter_migrations
from sauna_directory.app.core.exceptions import ConfigurationError
from sauna_directory.app.core.logging_config import setup_logging

logger = logging.getLogger("migrate")


def main() -> int:
    ap = argparse.ArgumentParser(description="Print SQL migrations for manual application.")
    ap.add_argument("--dir", default=str(MIGRATIONS_DIR), help="Directory holding *.sql migration files")
    args = ap.parse_args()

    setup_logging(settings.log_level)
    try:
        settings.require_store()
    except ConfigurationError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 1

    migrations = list(iter_migrations(Path(args.dir)))
    if not migrations:
        print("[i] No migration files found")
        return 0

    print(f"[+] Found {len(migrations)} migration file(s)")
    for name, sql in migrations:
        print(f"-- {name}")
        print(sql)
        print("---")
        logger.info("Migration %s ready for execution", name)

    print("[i] Paste the SQL above into the Supabase SQL editor and run it,")
    print("    then verify the tables in the table editor.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
