"""Sentence Synthesis

Fills one template with one noun record, producing a concrete exercise.
"""
from core.errors import AppError, Ok, Result, unknown_slot
from engines.records import ExerciseSentence, Template, VocabularyRecord
from languages.greek import (
    Slot,
    WILDCARD_NUMBER,
    NOUN_PLACEHOLDER,
    ARTICLE_PLACEHOLDER,
    FORM_PLACEHOLDER,
    LEGACY_FORM_PLACEHOLDER,
)

ORIGIN = "sentence_synthesizer"


def resolve_slot(name: str, template: Template) -> Result[Slot, AppError]:
    slot = Slot.parse(name)
    if slot is None:
        return unknown_slot(name, template.id, origin=ORIGIN)
    return Ok(slot)


def synthesize(template: Template, record: VocabularyRecord) -> Result[ExerciseSentence, AppError]:
    """Substitute the record's gloss, article and form into the template.

    A "both" template takes its number from the form slot it references,
    so the exercise always carries a concrete singular/plural tag.
    """
    article_slot = resolve_slot(template.article_field, template)
    if article_slot.is_err():
        return article_slot
    form_slot = resolve_slot(template.noun_form_field, template)
    if form_slot.is_err():
        return form_slot

    article = article_slot.unwrap().resolve(record)
    form = form_slot.unwrap().resolve(record)

    english = template.english_template.replace(NOUN_PLACEHOLDER, record.english)
    greek = (
        template.greek_template
        .replace(ARTICLE_PLACEHOLDER, article)
        .replace(FORM_PLACEHOLDER, form)
        .replace(LEGACY_FORM_PLACEHOLDER, form)
    )

    number = template.number
    if number == WILDCARD_NUMBER:
        number = form_slot.unwrap().number

    return Ok(ExerciseSentence(
        english_prompt=english,
        target_text=greek,
        correct_answer=f"{article} {form}",
        case_type=template.case_type,
        number=number,
        difficulty_phase=template.difficulty_phase,
        context_type=template.context_type,
        vocabulary_id=record.id,
        preposition=template.preposition,
        template_id=template.id,
    ))
