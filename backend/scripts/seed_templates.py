#!/usr/bin/env python3
"""Seed nouns and templates from the YAML files under data/seed.

Additive: rows that already exist are left alone.

Run with: python3 -m scripts.seed_templates [files...]
"""
import argparse
import sys
from pathlib import Path

from core.config import settings
from core.database import Base, engine, get_db_session
from core.logging import configure_logging
from ingest.seed import SEED_DIR, seed_from_files
import models  # noqa: F401


def main():
    parser = argparse.ArgumentParser(description="Seed nouns and sentence templates from YAML")
    parser.add_argument("files", nargs="*", type=Path, help=f"YAML files (default: {SEED_DIR}/*.yaml)")
    args = parser.parse_args()

    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON, log_sql=settings.LOG_SQL)
    print("Creating tables...")
    Base.metadata.create_all(bind=engine)

    with get_db_session() as session:
        result = seed_from_files(session, args.files or None)

    if result.is_err():
        print(f"✗ Seeding failed: {result.unwrap_err().message}")
        sys.exit(1)

    stats = result.unwrap()
    print(f"\nSeeded from: {', '.join(stats.sources) or 'nothing'}")
    print(f"  Nouns:     {stats.nouns_created} created, {stats.nouns_skipped} already present")
    print(f"  Templates: {stats.templates_created} created, {stats.templates_skipped} already present")


if __name__ == "__main__":
    main()
