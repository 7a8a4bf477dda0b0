import random

import pytest
from sqlalchemy.orm import sessionmaker

from core.database import Base, make_engine
from engines.records import VocabularyRecord
from models import Noun, Sentence
from tests.factories import BROTHER, HOUSE, SISTER, TEACHER, make_sentence


@pytest.fixture
def teacher():
    return VocabularyRecord(id=1, **TEACHER)


@pytest.fixture
def house():
    return VocabularyRecord(id=2, **HOUSE)


@pytest.fixture
def sister():
    return VocabularyRecord(id=3, **SISTER)


@pytest.fixture
def brother():
    return VocabularyRecord(id=4, **BROTHER)


@pytest.fixture
def vocabulary_by_id(teacher, house, sister, brother):
    return {r.id: r for r in (teacher, house, sister, brother)}


@pytest.fixture
def example_sentences():
    """Four sentences (two sharing one pattern) covering three (case, phase, context) combinations."""
    return [
        make_sentence(1, 1, "I see ___ (the teacher)", "Βλέπω τον δάσκαλο", "τον δάσκαλο"),
        make_sentence(2, 4, "I see ___ (the brother)", "Βλέπω τον αδελφό", "τον αδελφό"),
        make_sentence(3, 1, "The book of ___ (the teacher)", "Το βιβλίο του δασκάλου", "του δασκάλου",
                      case="genitive", phase=2, context="possession"),
        make_sentence(4, 1, "I talk with ___ (the teacher)", "Μιλάω με τους δασκάλους", "τους δασκάλους",
                      number="plural", phase=3, context="preposition", preposition="με"),
    ]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def engine():
    eng = make_engine("sqlite://")
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def stored_nouns(db):
    """Teacher, house, sister and brother stored with ids 1-4."""
    rows = [
        Noun(id=1, **TEACHER),
        Noun(id=2, **HOUSE),
        Noun(id=3, **SISTER),
        Noun(id=4, **BROTHER),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def stored_sentences(db, stored_nouns, example_sentences):
    rows = [
        Sentence(
            id=s.id,
            noun_id=s.noun_id,
            english_prompt=s.english_prompt,
            greek_sentence=s.greek_sentence,
            correct_answer=s.correct_answer,
            case_type=s.case_type,
            number=s.number,
            difficulty_phase=s.difficulty_phase,
            context_type=s.context_type,
            preposition=s.preposition,
        )
        for s in example_sentences
    ]
    db.add_all(rows)
    db.commit()
    return rows
