"""Additive seeding of nouns and templates from YAML.

File layout:

    nouns:
      - english: teacher
        gender: masculine
        nominative_sg: δάσκαλος
        ...
        acc_pl_article: τους
    templates:
      - english_template: "I see ___ {noun}"
        greek_template: "Βλέπω {article} {form}"
        article_field: acc_sg_article
        noun_form_field: accusative_sg
        case_type: accusative
        number: singular
        difficulty_phase: 1
        context_type: direct_object

Existing rows are never modified. A noun already stored with the same gloss
and nominative singular, or a template whose dedup key is already stored,
is skipped.
"""
from dataclasses import dataclass, field
from pathlib import Path
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import AppError, DatabaseErrorMapper, Err, Ok, Result, validation_error
from core.logging import db_logger
from engines.records import Template
from languages.greek import Slot, MIN_PHASE, MAX_PHASE
from languages.types import ContextType, Gender, GrammaticalCase, TemplateNumber
from models import Noun, SentenceTemplate

log = db_logger()

_mapper = DatabaseErrorMapper("seed")

SEED_DIR = Path(__file__).parent.parent.parent / "data" / "seed"


class NounSeed(BaseModel):
    english: str = Field(min_length=1)
    gender: Gender
    nominative_sg: str
    genitive_sg: str
    accusative_sg: str
    nominative_pl: str
    genitive_pl: str
    accusative_pl: str
    nom_sg_article: str
    gen_sg_article: str
    acc_sg_article: str
    nom_pl_article: str
    gen_pl_article: str
    acc_pl_article: str


class TemplateSeed(BaseModel):
    english_template: str = Field(min_length=1)
    greek_template: str = Field(min_length=1)
    article_field: str
    noun_form_field: str
    case_type: GrammaticalCase
    number: TemplateNumber
    difficulty_phase: int = Field(ge=MIN_PHASE, le=MAX_PHASE)
    context_type: ContextType
    preposition: str | None = None

    @field_validator("article_field", "noun_form_field")
    @classmethod
    def _known_slot(cls, v: str) -> str:
        slot = Slot.parse(v)
        if slot is None:
            raise ValueError(f"unknown vocabulary slot '{v}'")
        return slot.value

    def to_template(self) -> Template:
        return Template(**self.model_dump())


class SeedFile(BaseModel):
    nouns: list[NounSeed] = Field(default_factory=list)
    templates: list[TemplateSeed] = Field(default_factory=list)


@dataclass
class SeedStats:
    nouns_created: int = 0
    nouns_skipped: int = 0
    templates_created: int = 0
    templates_skipped: int = 0
    sources: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "nouns_created": self.nouns_created,
            "nouns_skipped": self.nouns_skipped,
            "templates_created": self.templates_created,
            "templates_skipped": self.templates_skipped,
            "sources": self.sources,
        }


def load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_seed(data: dict, source: str = "<dict>") -> Result[SeedFile, AppError]:
    try:
        return Ok(SeedFile.model_validate(data))
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        return validation_error(f"{source}: {location}: {first['msg']}", field=location, origin="seed")


def seed_data(db: Session, seed: SeedFile, stats: SeedStats | None = None) -> Result[SeedStats, AppError]:
    """Insert the nouns and templates that are not stored yet, in one commit."""
    stats = stats or SeedStats()
    try:
        known_nouns = {
            (n.english, n.nominative_sg)
            for n in db.execute(select(Noun)).scalars()
        }
        for noun in seed.nouns:
            key = (noun.english, noun.nominative_sg)
            if key in known_nouns:
                stats.nouns_skipped += 1
                continue
            db.add(Noun(**noun.model_dump()))
            known_nouns.add(key)
            stats.nouns_created += 1

        known_templates = {
            Template.from_row(t).key
            for t in db.execute(select(SentenceTemplate)).scalars()
        }
        for row in seed.templates:
            template = row.to_template()
            if template.key in known_templates:
                stats.templates_skipped += 1
                continue
            db.add(template.to_row())
            known_templates.add(template.key)
            stats.templates_created += 1

        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        return Err(_mapper.map_exception(e))

    log.info("seed_applied", **stats.to_dict())
    return Ok(stats)


def seed_from_files(db: Session, paths: list[Path] | None = None) -> Result[SeedStats, AppError]:
    """Seed from YAML files (default: every *.yaml under data/seed)."""
    paths = paths if paths is not None else sorted(SEED_DIR.glob("*.yaml"))
    stats = SeedStats()
    for path in paths:
        parsed = parse_seed(load_yaml(path), source=path.name)
        if parsed.is_err():
            return parsed
        stats.sources.append(path.name)
        result = seed_data(db, parsed.unwrap(), stats)
        if result.is_err():
            return result
    return Ok(stats)
