"""Migration API

Runs the one-time sentence-to-template migration.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from core.database import get_db
from core.errors import raise_result
from engines.migration import migrate_to_templates

router = APIRouter()


class MigrationResponse(BaseModel):
    status: str
    sentences_migrated: int
    templates_created: int
    sentences_skipped: int
    verbatim_english: int
    existing_templates: int
    reduction_percent: int


@router.post("", response_model=MigrationResponse)
def run_migration(db: Session = Depends(get_db)):
    """Replace stored sentences with templates, atomically."""
    result = migrate_to_templates(db)
    raise_result(result)
    summary = result.unwrap()
    return MigrationResponse(
        status=summary.status,
        sentences_migrated=summary.sentences_migrated,
        templates_created=summary.templates_created,
        sentences_skipped=summary.sentences_skipped,
        verbatim_english=summary.verbatim_english,
        existing_templates=summary.existing_templates,
        reduction_percent=summary.reduction_percent,
    )
