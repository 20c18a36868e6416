#!/usr/bin/env python3
"""
Seed the sauna directory with the initial Stockholm catalog.

Refuses to touch a table that already contains saunas.  To reseed,
clear the ``saunas`` table manually first.

Usage:
    python seed.py
    python seed.py --data ./sauna_directory/db/seed_data.json
"""

import argparse
import asyncio
import sys
from pathlib import Path

from sauna_directory.app.core.config import settings
from sauna_directory.app.core.db import SEED_DATA_PATH, load_seed_data, seed_database
from sauna_directory.app.core.exceptions import ConfigurationError, StoreError
from sauna_directory.app.core.logging_config import setup_logging
from sauna_directory.app.core.store import create_store_client


async def run(data_path: Path) -> int:
    records = load_seed_data(data_path)
    print(f"[+] Found {len(records)} saunas to seed")
    async with create_store_client(settings) as client:
        saunas = await seed_database(client, records)
    if saunas is None:
        print("[!] Database already contains sauna data; nothing was inserted.")
        print("    Clear the saunas table manually if you want to reseed.")
        return 0
    print(f"[+] Verification: {len(saunas)} saunas in database")
    for index, sauna in enumerate(saunas, start=1):
        print(f"   {index}. {sauna.name}")
    return 0


def main() -> int:
    ap = argparse.ArgumentParser(description="Seed the saunas table.")
    ap.add_argument("--data", default=str(SEED_DATA_PATH), help="Path to the seed JSON file")
    args = ap.parse_args()

    setup_logging(settings.log_level)
    try:
        return asyncio.run(run(Path(args.data)))
    except ConfigurationError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 1
    except StoreError as e:
        print(f"[!] Seeding failed: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
