"""Pattern Extraction Engine

Turns authored example sentences into reusable templates:

  "I see ___ (the teacher)" / "Βλέπω τον δάσκαλο" / "τον δάσκαλο"
      -> "I see ___ {noun}" / "Βλέπω {article} {form}"
         article=acc_sg_article, form=accusative_sg

Sentences with a malformed answer, or whose answer tokens cannot be traced
back to the noun record, are skipped and reported; a sentence pointing at a
missing noun aborts the batch.
"""
from dataclasses import dataclass, field

from core.logging import engine_logger
from core.errors import (
    AppError,
    ErrorCode,
    Err,
    Ok,
    Result,
    format_error,
    not_found,
    unresolved_slot,
)
from engines.records import ExampleSentence, Template, TemplateKey, VocabularyRecord
from languages.greek import (
    ARTICLE_SLOTS,
    FORM_SLOTS,
    ARTICLE_PLACEHOLDER,
    FORM_PLACEHOLDER,
    NOUN_PLACEHOLDER,
    match_slot,
)

log = engine_logger()

ORIGIN = "pattern_extractor"

# Per-sentence failures: the sentence is left out, the batch goes on
SKIPPABLE = frozenset({ErrorCode.E2002_INVALID_FORMAT, ErrorCode.E5101_UNRESOLVED_SLOT})


@dataclass(frozen=True, slots=True)
class SkippedSentence:
    """A sentence left out of extraction, with the reason."""
    sentence_id: int | None
    error: AppError


@dataclass(slots=True)
class ExtractionReport:
    """Deduplicated templates plus the sentences that were skipped."""
    templates: list[Template] = field(default_factory=list)
    skipped: list[SkippedSentence] = field(default_factory=list)
    verbatim_english: list[int | None] = field(default_factory=list)

    @property
    def keys(self) -> list[TemplateKey]:
        return [t.key for t in self.templates]


def split_answer(sentence: ExampleSentence) -> Result[tuple[str, str], AppError]:
    """Split a correct answer into (article, form)."""
    parts = sentence.correct_answer.split()
    if len(parts) != 2:
        return format_error(sentence.id, sentence.correct_answer, origin=ORIGIN)
    return Ok((parts[0], parts[1]))


def build_greek_template(greek_sentence: str, article: str, form: str) -> str:
    """Replace the first '<article> <form>' span with the two placeholders."""
    return greek_sentence.replace(
        f"{article} {form}", f"{ARTICLE_PLACEHOLDER} {FORM_PLACEHOLDER}", 1
    )


def build_english_template(english_prompt: str, gloss: str) -> str:
    """Replace the gloss with {noun}, trying '(the gloss)', '(gloss)', 'gloss'.

    When none of them occurs the prompt comes back unchanged, without a
    placeholder, and will show this gloss for every noun it is paired with.
    """
    if not gloss:
        return english_prompt
    for pattern in (f"(the {gloss})", f"({gloss})", gloss):
        if pattern in english_prompt:
            return english_prompt.replace(pattern, NOUN_PLACEHOLDER)
    return english_prompt


def extract_one(sentence: ExampleSentence, record: VocabularyRecord) -> Result[Template, AppError]:
    """Derive the template for a single sentence.

    Returns Err with E2002 for a malformed answer and E5101 when either
    token matches none of the record's slots.
    """
    parsed = split_answer(sentence)
    if parsed.is_err():
        return parsed
    article, form = parsed.unwrap()

    article_slot = match_slot(article, ARTICLE_SLOTS, record)
    if article_slot is None:
        return unresolved_slot(sentence.id, "article", article, origin=ORIGIN)
    form_slot = match_slot(form, FORM_SLOTS, record)
    if form_slot is None:
        return unresolved_slot(sentence.id, "form", form, origin=ORIGIN)

    return Ok(Template(
        english_template=build_english_template(sentence.english_prompt, record.english),
        greek_template=build_greek_template(sentence.greek_sentence, article, form),
        article_field=article_slot.value,
        noun_form_field=form_slot.value,
        case_type=sentence.case_type,
        number=sentence.number,
        difficulty_phase=sentence.difficulty_phase,
        context_type=sentence.context_type,
        preposition=sentence.preposition,
    ))


def extract(
    sentences: list[ExampleSentence],
    vocabulary_by_id: dict[int, VocabularyRecord],
) -> Result[ExtractionReport, AppError]:
    """Extract deduplicated templates from a batch of sentences.

    Malformed or unresolvable sentences are skipped and listed in the
    report. A sentence pointing at a missing noun fails the whole batch,
    since the data itself is inconsistent.
    """
    report = ExtractionReport()
    seen: set[TemplateKey] = set()

    for sentence in sentences:
        record = vocabulary_by_id.get(sentence.noun_id)
        if record is None:
            return not_found("Noun", sentence.noun_id, origin=ORIGIN)

        match extract_one(sentence, record):
            case Ok(template):
                pass
            case Err(error) if error.code in SKIPPABLE:
                log.warning("sentence_skipped", sentence_id=sentence.id, reason=error.message)
                report.skipped.append(SkippedSentence(sentence.id, error))
                continue
            case Err() as failure:
                return failure

        if NOUN_PLACEHOLDER not in template.english_template:
            log.warning(
                "english_template_verbatim",
                sentence_id=sentence.id,
                gloss=record.english,
                prompt=sentence.english_prompt,
            )
            report.verbatim_english.append(sentence.id)

        if template.key in seen:
            continue
        seen.add(template.key)
        report.templates.append(template)

    log.info(
        "templates_extracted",
        sentences=len(sentences),
        templates=len(report.templates),
        skipped=len(report.skipped),
        verbatim_english=len(report.verbatim_english),
    )
    return Ok(report)
