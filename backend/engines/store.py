"""Template and vocabulary storage access.

Reads copy ORM rows into frozen records; nothing returned from here is
attached to the session.
"""
import random

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database import create_entities, fetch_all, fetch_one
from core.errors import AppError, DatabaseErrorMapper, Err, Ok, Result
from core.logging import db_logger
from engines.records import Template, VocabularyRecord
from languages.greek import WILDCARD_NUMBER
from models import Noun, SentenceTemplate

log = db_logger()

_mapper = DatabaseErrorMapper("template_store")


def normalize_number_filter(number_filter: str | None) -> str | None:
    """Empty and "both" filters both mean: any number."""
    if not number_filter or number_filter == WILDCARD_NUMBER:
        return None
    return number_filter


class TemplateStore:
    """Persists templates and samples them for practice sessions."""

    __slots__ = ("_db", "_rng")

    def __init__(self, db: Session, rng: random.Random | None = None):
        self._db = db
        self._rng = rng or random.Random()

    def get(self, template_id: int) -> Result[Template, AppError]:
        return fetch_one(self._db, SentenceTemplate, template_id, "Template").map(Template.from_row)

    def list_all(self) -> Result[list[Template], AppError]:
        """All templates in insertion order."""
        return fetch_all(self._db, SentenceTemplate).map(
            lambda rows: [Template.from_row(r) for r in rows]
        )

    def count(self) -> Result[int, AppError]:
        return self.list_all().map(len)

    def add(self, template: Template) -> Result[Template, AppError]:
        return self.add_many([template]).map(lambda saved: saved[0])

    def add_many(self, templates: list[Template]) -> Result[list[Template], AppError]:
        """Insert templates in one commit and return them with their ids."""
        return create_entities(self._db, [t.to_row() for t in templates]).map(
            lambda rows: [Template.from_row(r) for r in rows]
        )

    def sample(
        self,
        phase: int,
        number_filter: str | None,
        limit: int,
    ) -> Result[list[Template], AppError]:
        """Up to ``limit`` distinct templates for a phase, uniformly at random.

        A specific number filter also admits "both" templates.
        """
        if limit <= 0:
            return Ok([])

        query = select(SentenceTemplate).where(SentenceTemplate.difficulty_phase == phase)
        number = normalize_number_filter(number_filter)
        if number is not None:
            query = query.where(or_(
                SentenceTemplate.number == number,
                SentenceTemplate.number == WILDCARD_NUMBER,
            ))

        try:
            rows = self._db.execute(query.order_by(SentenceTemplate.id)).scalars().all()
        except SQLAlchemyError as e:
            return Err(_mapper.map_exception(e))

        picked = self._rng.sample(list(rows), min(limit, len(rows)))
        log.debug("templates_sampled", phase=phase, number=number, matching=len(rows), returned=len(picked))
        return Ok([Template.from_row(r) for r in picked])


class VocabularyStore:
    """Read access to noun records."""

    __slots__ = ("_db",)

    def __init__(self, db: Session):
        self._db = db

    def list_all(self) -> Result[list[VocabularyRecord], AppError]:
        return fetch_all(self._db, Noun).map(
            lambda rows: [VocabularyRecord.from_row(r) for r in rows]
        )

    def by_id(self) -> Result[dict[int, VocabularyRecord], AppError]:
        return self.list_all().map(lambda records: {r.id: r for r in records})
