"""Practice API

Generates practice sets on demand and checks learner answers. Exercises are
computed fresh per request and never stored, so answer checking receives
the exercise back from the client.
"""
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from core.database import get_db
from core.errors import raise_error, validation_error, raise_result
from core.logging import api_logger
from engines.practice import PracticeSetGenerator, session_filters
from engines.records import ExerciseSentence
from languages.types import DifficultyLevel, TemplateNumber

log = api_logger()

router = APIRouter()


class ExerciseResponse(BaseModel):
    english_prompt: str
    target_text: str
    correct_answer: str
    case_type: str
    number: str
    difficulty_phase: int
    context_type: str
    vocabulary_id: int
    preposition: str | None = None
    template_id: int | None = None

    class Config:
        from_attributes = True


class AnswerCheck(BaseModel):
    exercise: ExerciseResponse
    answer: str


class AnswerResult(BaseModel):
    correct: bool
    expected: str


@router.get("", response_model=list[ExerciseResponse])
def generate_practice_set(
    difficulty: DifficultyLevel | None = Query(None),
    include_plural: bool = Query(True),
    phase: int | None = Query(None, ge=1, le=3),
    number: TemplateNumber | None = Query(None),
    count: int = Query(10, ge=1, le=200),
    db: Session = Depends(get_db),
):
    """Generate up to ``count`` unique exercises.

    Either pass a difficulty level (optionally with include_plural=false),
    or an explicit phase and number filter.
    """
    if difficulty is not None:
        phase, number = session_filters(difficulty, include_plural)
    elif phase is None:
        raise_error(validation_error("Either 'difficulty' or 'phase' is required", field="phase").error)

    result = PracticeSetGenerator(db).generate(phase, number, count)
    raise_result(result)
    return result.unwrap()


@router.post("/check", response_model=AnswerResult)
def check_answer(payload: AnswerCheck):
    """Compare a learner's answer with the exercise's correct answer."""
    exercise = ExerciseSentence(**payload.exercise.model_dump())
    correct = exercise.is_correct(payload.answer)
    log.debug("answer_checked", correct=correct, template_id=exercise.template_id)
    return AnswerResult(correct=correct, expected=exercise.correct_answer)
