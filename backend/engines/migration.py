"""Sentence-to-Template Migration

One-time cutover from per-sentence storage to template storage:

1. Snapshot all sentences and nouns
2. Extract deduplicated templates
3. Check the templates cover every (case, phase, context) of the sentences
4. Insert the templates and delete the sentences
5. Commit

Steps 1-5 share one transaction. Any failure rolls everything back, so the
database is either fully migrated or exactly as it was.
"""
from dataclasses import dataclass
from typing import Literal

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.logging import bound_context, generate_correlation_id, migration_logger
from core.errors import AppError, DatabaseErrorMapper, Err, Ok, Result, validation_error
from engines.coverage import validate_coverage
from engines.extractor import extract
from engines.records import ExampleSentence, VocabularyRecord
from models import Noun, Sentence, SentenceTemplate

log = migration_logger()

_mapper = DatabaseErrorMapper("migration")

MigrationStatus = Literal["committed", "already_migrated"]


@dataclass(frozen=True, slots=True)
class MigrationSummary:
    """Outcome of a migration that did not roll back."""
    status: MigrationStatus
    sentences_migrated: int = 0
    templates_created: int = 0
    sentences_skipped: int = 0
    verbatim_english: int = 0
    existing_templates: int = 0

    @property
    def reduction_percent(self) -> int:
        """Approximate drop in stored rows, sentences -> templates."""
        if not self.sentences_migrated:
            return 0
        return (self.sentences_migrated - self.templates_created) * 100 // self.sentences_migrated


def _rollback(db: Session, error: AppError) -> Err[AppError]:
    db.rollback()
    log.error("migration_rolled_back", code=error.code.name, reason=error.message)
    return Err(error)


def migrate_to_templates(db: Session) -> Result[MigrationSummary, AppError]:
    """Replace stored sentences with extracted templates in one transaction.

    Skips with status "already_migrated" when templates are already stored.
    Malformed or unresolvable sentences are skipped and counted. Returns Err
    (after rolling back) on a missing noun, a coverage gap, a rejected
    template row or any database failure.
    """
    run_id = generate_correlation_id()
    with bound_context(migration_id=run_id):
        return _migrate(db)


def _migrate(db: Session) -> Result[MigrationSummary, AppError]:
    try:
        existing = db.execute(select(func.count()).select_from(SentenceTemplate)).scalar_one()
        if existing:
            db.rollback()
            log.info("migration_already_completed", templates=existing)
            return Ok(MigrationSummary(status="already_migrated", existing_templates=existing))

        sentences = [
            ExampleSentence.from_row(row)
            for row in db.execute(select(Sentence).order_by(Sentence.id)).scalars()
        ]
        vocabulary = {
            row.id: VocabularyRecord.from_row(row)
            for row in db.execute(select(Noun)).scalars()
        }
        log.info("migration_started", sentences=len(sentences), nouns=len(vocabulary))

        extracted = extract(sentences, vocabulary)
        if extracted.is_err():
            return _rollback(db, extracted.unwrap_err())
        report = extracted.unwrap()

        validated = validate_coverage(report.templates, sentences)
        if validated.is_err():
            return _rollback(db, validated.unwrap_err())

        db.add_all([t.to_row() for t in report.templates])
        db.flush()
        db.execute(delete(Sentence))
        db.commit()
    except SQLAlchemyError as e:
        return _rollback(db, _mapper.map_exception(e))
    except ValueError as e:
        # Rejected by model validation, e.g. an unknown number tag
        return _rollback(db, validation_error(str(e), origin="migration").error)

    summary = MigrationSummary(
        status="committed",
        sentences_migrated=len(sentences),
        templates_created=len(report.templates),
        sentences_skipped=len(report.skipped),
        verbatim_english=len(report.verbatim_english),
    )
    log.info(
        "migration_committed",
        templates=summary.templates_created,
        sentences=summary.sentences_migrated,
        skipped=summary.sentences_skipped,
        reduction_percent=summary.reduction_percent,
    )
    return Ok(summary)
