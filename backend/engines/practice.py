"""Practice Set Generator

Builds a batch of unique exercises by pairing random templates with random
nouns. One bulk read of nouns and one sample of templates per call; all
pairing happens in memory.

Generation is best-effort: when the template x noun space is smaller than
the requested count, whatever unique exercises were found are returned.
"""
import random

from sqlalchemy.orm import Session

from core.config import settings
from core.logging import engine_logger
from core.errors import (
    AppError,
    Ok,
    Result,
    no_templates,
    no_vocabulary,
    out_of_range,
)
from engines.records import ExerciseSentence, Template, VocabularyRecord
from engines.store import TemplateStore, VocabularyStore
from engines.synthesizer import synthesize
from languages.greek import DIFFICULTY_PHASES, MIN_PHASE, MAX_PHASE

log = engine_logger()

ORIGIN = "practice_generator"


def session_filters(difficulty: str, include_plural: bool) -> tuple[int, str | None]:
    """Map a session setup (difficulty level, plurals on/off) to (phase, number filter)."""
    phase = DIFFICULTY_PHASES[difficulty]
    return phase, (None if include_plural else "singular")


def generate_from(
    templates: list[Template],
    vocabulary: list[VocabularyRecord],
    count: int,
    rng: random.Random,
    attempt_factor: int = 10,
) -> list[ExerciseSentence]:
    """Pair random templates with random nouns until ``count`` unique exercises exist.

    Stops after ``attempt_factor * count`` attempts. Repeated
    (template, noun) pairs and pairs that fail synthesis are skipped.
    """
    exercises: list[ExerciseSentence] = []
    used: set[tuple[object, int]] = set()
    attempts = 0
    max_attempts = count * attempt_factor
    failures = 0

    while len(exercises) < count and attempts < max_attempts:
        attempts += 1
        template = templates[rng.randrange(len(templates))]
        record = vocabulary[rng.randrange(len(vocabulary))]

        pair = (template.id if template.id is not None else template.key, record.id)
        if pair in used:
            continue

        result = synthesize(template, record)
        if result.is_err():
            failures += 1
            log.debug("synthesis_skipped", template_id=template.id, noun_id=record.id,
                      reason=result.unwrap_err().message)
            continue

        exercises.append(result.unwrap())
        used.add(pair)

    if len(exercises) < count:
        log.info("practice_set_short", requested=count, generated=len(exercises),
                 attempts=attempts, failures=failures)
    return exercises


class PracticeSetGenerator:
    """Generates practice sessions from stored templates and nouns."""

    __slots__ = ("_templates", "_vocabulary", "_rng", "_min_pool", "_pool_factor", "_attempt_factor")

    def __init__(
        self,
        db: Session,
        rng: random.Random | None = None,
        min_pool: int = settings.PRACTICE_MIN_POOL,
        pool_factor: int = settings.PRACTICE_POOL_FACTOR,
        attempt_factor: int = settings.PRACTICE_ATTEMPT_FACTOR,
    ):
        self._rng = rng or random.Random(settings.PRACTICE_SEED)
        self._templates = TemplateStore(db, self._rng)
        self._vocabulary = VocabularyStore(db)
        self._min_pool = min_pool
        self._pool_factor = pool_factor
        self._attempt_factor = attempt_factor

    def generate(
        self,
        phase: int,
        number_filter: str | None,
        count: int,
    ) -> Result[list[ExerciseSentence], AppError]:
        """Generate up to ``count`` unique exercises.

        Returns:
            Ok(exercises), possibly fewer than ``count``
            Err(E5104) when there are no nouns
            Err(E5105) when no template matches the phase/number filter
        """
        if not MIN_PHASE <= phase <= MAX_PHASE:
            return out_of_range("phase", phase, MIN_PHASE, MAX_PHASE, origin=ORIGIN)

        vocabulary = self._vocabulary.list_all()
        if vocabulary.is_err():
            return vocabulary
        if not vocabulary.unwrap():
            return no_vocabulary(origin=ORIGIN)

        pool_size = max(self._pool_factor * count, self._min_pool)
        templates = self._templates.sample(phase, number_filter, pool_size)
        if templates.is_err():
            return templates
        if not templates.unwrap():
            return no_templates(phase, number_filter, origin=ORIGIN)

        exercises = generate_from(
            templates.unwrap(),
            vocabulary.unwrap(),
            count,
            self._rng,
            attempt_factor=self._attempt_factor,
        )
        log.info("practice_set_generated", phase=phase, number=number_filter,
                 requested=count, generated=len(exercises), pool=len(templates.unwrap()))
        return Ok(exercises)
