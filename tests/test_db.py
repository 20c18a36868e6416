"""
Tests for the migration files, the seed catalog and the seeding routine.
"""

import asyncio

from sauna_directory.app.core.db import (
    MIGRATIONS_DIR,
    iter_migrations,
    list_migration_files,
    load_seed_data,
    seed_database,
)
from sauna_directory.app.utils.opening_hours import WEEKDAYS
from sauna_directory.app.utils.slug import (
    find_matching_name,
    generate_sauna_slug,
    slug_to_search_name,
)


def test_migration_files_are_ordered():
    files = list_migration_files()
    assert files
    assert files[0].name == "001_initial_schema.sql"


def test_initial_schema_defines_tables_and_indexes():
    _, sql = next(iter_migrations())
    for statement in (
        "CREATE TYPE booking_type_enum",
        "CREATE TYPE heat_source_enum",
        "CREATE TYPE sauna_type_enum",
        "CREATE TYPE setting_enum",
        "CREATE TABLE saunas",
        "CREATE TABLE submissions",
        "CREATE INDEX idx_saunas_setting",
        "CREATE INDEX idx_saunas_booking_type",
    ):
        assert statement in sql


def test_missing_migrations_dir_yields_nothing(tmp_path):
    assert list_migration_files(tmp_path / "missing") == []
    assert list(iter_migrations(MIGRATIONS_DIR.parent / "missing")) == []


def test_seed_data_is_valid():
    saunas = load_seed_data()
    assert len(saunas) >= 10
    for sauna in saunas:
        assert set(sauna.opening_hours.as_dict()) == set(WEEKDAYS)
        assert sauna.name.strip()


def test_seed_names_round_trip_through_slugs():
    for sauna in load_seed_data():
        term = slug_to_search_name(generate_sauna_slug(sauna.name))
        assert find_matching_name(term, [sauna.name]) == sauna.name


def test_seed_database_inserts_once(fake_store, store_client):
    records = load_seed_data()[:3]

    stored = asyncio.run(seed_database(store_client, records))
    assert [s.name for s in stored] == sorted(r.name for r in records)
    assert len(fake_store.tables["saunas"]) == 3

    assert asyncio.run(seed_database(store_client, records)) is None
    assert len(fake_store.tables["saunas"]) == 3
