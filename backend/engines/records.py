"""In-memory value types shared by the template engines.

ORM rows are copied into these frozen dataclasses at the storage boundary,
so extraction, synthesis and generation never touch the session.
"""
from __future__ import annotations

from dataclasses import dataclass

from models import Noun, Sentence, SentenceTemplate

# (english, greek, article slot, form slot, case, phase, context, preposition)
TemplateKey = tuple[str, str, str, str, str, int, str, str | None]

# (case, phase, context)
CoverageTriple = tuple[str, int, str]


@dataclass(frozen=True, slots=True)
class VocabularyRecord:
    """A noun with its gloss and twelve declension slots."""
    id: int
    english: str
    gender: str
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

    @classmethod
    def from_row(cls, row: Noun) -> VocabularyRecord:
        return cls(
            id=row.id,
            english=row.english,
            gender=row.gender,
            nominative_sg=row.nominative_sg,
            genitive_sg=row.genitive_sg,
            accusative_sg=row.accusative_sg,
            nominative_pl=row.nominative_pl,
            genitive_pl=row.genitive_pl,
            accusative_pl=row.accusative_pl,
            nom_sg_article=row.nom_sg_article,
            gen_sg_article=row.gen_sg_article,
            acc_sg_article=row.acc_sg_article,
            nom_pl_article=row.nom_pl_article,
            gen_pl_article=row.gen_pl_article,
            acc_pl_article=row.acc_pl_article,
        )


@dataclass(frozen=True, slots=True)
class ExampleSentence:
    """A concrete, authored exercise from the sentence-era storage."""
    id: int | None
    noun_id: int
    english_prompt: str
    greek_sentence: str
    correct_answer: str
    case_type: str
    number: str
    difficulty_phase: int
    context_type: str
    preposition: str | None = None

    @property
    def coverage(self) -> CoverageTriple:
        return (self.case_type, self.difficulty_phase, self.context_type)

    @classmethod
    def from_row(cls, row: Sentence) -> ExampleSentence:
        return cls(
            id=row.id,
            noun_id=row.noun_id,
            english_prompt=row.english_prompt,
            greek_sentence=row.greek_sentence,
            correct_answer=row.correct_answer,
            case_type=row.case_type,
            number=row.number,
            difficulty_phase=row.difficulty_phase,
            context_type=row.context_type,
            preposition=row.preposition,
        )


@dataclass(frozen=True, slots=True)
class Template:
    """A sentence pattern with {noun}, {article} and {form} placeholders.

    Slot references stay plain strings here: rows written before slot
    validation existed may hold anything, and synthesis is where an
    unknown reference gets reported.
    """
    english_template: str
    greek_template: str
    article_field: str
    noun_form_field: str
    case_type: str
    number: str
    difficulty_phase: int
    context_type: str
    preposition: str | None = None
    id: int | None = None

    @property
    def key(self) -> TemplateKey:
        """Structural identity used for deduplication (number excluded)."""
        return (
            self.english_template,
            self.greek_template,
            self.article_field,
            self.noun_form_field,
            self.case_type,
            self.difficulty_phase,
            self.context_type,
            self.preposition,
        )

    @property
    def coverage(self) -> CoverageTriple:
        return (self.case_type, self.difficulty_phase, self.context_type)

    @classmethod
    def from_row(cls, row: SentenceTemplate) -> Template:
        return cls(
            id=row.id,
            english_template=row.english_template,
            greek_template=row.greek_template,
            article_field=row.article_field,
            noun_form_field=row.noun_form_field,
            case_type=row.case_type,
            number=row.number,
            difficulty_phase=row.difficulty_phase,
            context_type=row.context_type,
            preposition=row.preposition,
        )

    def to_row(self) -> SentenceTemplate:
        return SentenceTemplate(
            english_template=self.english_template,
            greek_template=self.greek_template,
            article_field=self.article_field,
            noun_form_field=self.noun_form_field,
            case_type=self.case_type,
            number=self.number,
            difficulty_phase=self.difficulty_phase,
            context_type=self.context_type,
            preposition=self.preposition,
        )


@dataclass(frozen=True, slots=True)
class ExerciseSentence:
    """One synthesized practice question. Never persisted."""
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

    def is_correct(self, answer: str) -> bool:
        """Exact Unicode comparison, ignoring surrounding whitespace."""
        return answer.strip() == self.correct_answer.strip()
