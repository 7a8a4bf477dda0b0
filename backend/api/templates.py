"""Templates API

Read access to stored sentence templates, plus additive seeding from the
bundled YAML files.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from core.database import get_db
from core.errors import raise_result
from core.logging import api_logger
from engines.store import TemplateStore
from ingest.seed import seed_from_files

log = api_logger()

router = APIRouter()


class TemplateResponse(BaseModel):
    id: int
    english_template: str
    greek_template: str
    article_field: str
    noun_form_field: str
    case_type: str
    number: str
    difficulty_phase: int
    context_type: str
    preposition: str | None = None

    class Config:
        from_attributes = True


class SeedResponse(BaseModel):
    nouns_created: int
    nouns_skipped: int
    templates_created: int
    templates_skipped: int
    sources: list[str]


@router.get("", response_model=list[TemplateResponse])
def list_templates(db: Session = Depends(get_db)):
    """List all templates in insertion order."""
    result = TemplateStore(db).list_all()
    raise_result(result)
    return result.unwrap()


@router.get("/{template_id}", response_model=TemplateResponse)
def get_template(template_id: int, db: Session = Depends(get_db)):
    """Get a template by ID."""
    result = TemplateStore(db).get(template_id)
    raise_result(result)
    return result.unwrap()


@router.post("/seed", response_model=SeedResponse)
def seed_templates(db: Session = Depends(get_db)):
    """Add bundled nouns and templates that are not stored yet."""
    result = seed_from_files(db)
    raise_result(result)
    stats = result.unwrap()
    log.info("seed_requested", **stats.to_dict())
    return stats.to_dict()
