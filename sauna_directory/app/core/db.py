"""
Database schema and seed helpers.

The schema lives in ordered SQL files under ``sauna_directory/db/migrations``.
The hosted store only exposes tables over REST, so migrations cannot be
executed from here; ``iter_migrations`` yields them for the migration
script to print, and they are applied in the project's SQL editor.

``seed_database`` fills an empty ``saunas`` table from
``sauna_directory/db/seed_data.json``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..schemas.sauna import SaunaCreate, SaunaRead
from ..services.sauna_service import SaunaService
from .store import RowStoreClient

logger = logging.getLogger(__name__)

DB_DIR = Path(__file__).resolve().parent.parent.parent / "db"
MIGRATIONS_DIR = DB_DIR / "migrations"
SEED_DATA_PATH = DB_DIR / "seed_data.json"


def list_migration_files(migrations_dir: Path = MIGRATIONS_DIR) -> List[Path]:
    """Return the ``.sql`` files in ``migrations_dir`` sorted by name."""
    if not migrations_dir.is_dir():
        return []
    return sorted(path for path in migrations_dir.iterdir() if path.suffix == ".sql")


def iter_migrations(migrations_dir: Path = MIGRATIONS_DIR) -> Iterator[Tuple[str, str]]:
    """Yield ``(file name, sql)`` for every migration in order."""
    for path in list_migration_files(migrations_dir):
        yield path.name, path.read_text(encoding="utf-8")


def load_seed_data(path: Path = SEED_DATA_PATH) -> List[SaunaCreate]:
    """Load and validate the seed catalog."""
    with open(path, "r", encoding="utf-8") as f:
        raw: List[Dict[str, Any]] = json.load(f)
    return [SaunaCreate.model_validate(item) for item in raw]


async def seed_database(
    client: RowStoreClient, records: Optional[List[SaunaCreate]] = None
) -> Optional[List[SaunaRead]]:
    """Insert the seed catalog if the ``saunas`` table is empty.

    Returns the stored saunas ordered by name, or ``None`` when the
    table already had data and nothing was inserted.  Records are
    inserted one by one so a failure names the offending sauna.
    """
    existing = await client.select("saunas", columns="id", limit=1)
    if existing:
        logger.warning("Database already contains sauna data; skipping seed")
        return None

    records = records if records is not None else load_seed_data()
    service = SaunaService(client)
    for index, record in enumerate(records, start=1):
        logger.info("Seeding %d/%d: %s", index, len(records), record.name)
        await service.create_sauna(record)

    return await service.list_saunas()
