#!/usr/bin/env python3
"""Migrate sentence storage to templates.

One-time cutover: extracts templates from every stored sentence, checks they
cover each (case, phase, context) drilled so far, stores them and deletes the
sentences. Runs in a single transaction; on any failure nothing changes.

Run with: python3 -m scripts.migrate_templates [--yes]
"""
import argparse
import sys
from typing import Callable

from sqlalchemy.orm import Session

from core.config import settings
from core.database import Base, engine, get_db_session
from core.logging import configure_logging
from engines.migration import migrate_to_templates
from engines.store import TemplateStore
import models  # noqa: F401


def confirm_from_stdin() -> bool:
    print("\nThis operation deletes every stored sentence once its templates are saved.")
    print("A transaction protects the data, but a backup is still recommended.")
    answer = input("\nProceed with migration? (yes/no): ")
    return answer.strip().lower() in ("yes", "y")


def run(session: Session, confirm: Callable[[], bool]) -> int:
    """Run the migration in ``session``; returns the process exit code."""
    existing = TemplateStore(session).count()
    if existing.is_err():
        print(f"✗ Could not read templates: {existing.unwrap_err().message}")
        return 1
    if existing.unwrap():
        print(f"Migration already completed. Found {existing.unwrap()} templates in database.")
        return 0

    if not confirm():
        print("Migration cancelled.")
        return 0

    result = migrate_to_templates(session)
    if result.is_err():
        error = result.unwrap_err()
        print(f"✗ Migration failed and was rolled back: [{error.code.name}] {error.message}")
        return 1

    summary = result.unwrap()
    print("\n✓ Migration complete")
    print(f"  Sentences migrated: {summary.sentences_migrated}")
    print(f"  Templates created:  {summary.templates_created}")
    print(f"  Sentences skipped:  {summary.sentences_skipped}")
    if summary.verbatim_english:
        print(f"  Prompts without {{noun}}: {summary.verbatim_english}")
    print(f"  Storage reduction:  ~{summary.reduction_percent}%")
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Migrate from sentence-based to template-based exercise storage"
    )
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    args = parser.parse_args()

    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON, log_sql=settings.LOG_SQL)
    Base.metadata.create_all(bind=engine)

    with get_db_session() as session:
        code = run(session, confirm=(lambda: True) if args.yes else confirm_from_stdin)
    sys.exit(code)


if __name__ == "__main__":
    main()
