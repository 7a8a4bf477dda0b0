import random

import pytest

from core.errors import ErrorCode
from engines.store import TemplateStore, VocabularyStore, normalize_number_filter
from models import SentenceTemplate
from tests.factories import make_template


@pytest.fixture
def store(db):
    return TemplateStore(db, random.Random(7))


@pytest.fixture
def stored(store):
    return store.add_many([
        make_template(),
        make_template(article_field="acc_pl_article", noun_form_field="accusative_pl", number="plural"),
        make_template(
            english_template="The book of ___ {noun}",
            greek_template="Το βιβλίο {article} {form}",
            article_field="gen_sg_article",
            noun_form_field="genitive_sg",
            case_type="genitive",
            number="both",
        ),
        make_template(difficulty_phase=2),
    ]).unwrap()


def ids(templates):
    return {t.id for t in templates}


def test_add_many_assigns_ids(stored):
    assert all(t.id is not None for t in stored)
    assert len(ids(stored)) == 4


def test_add_single(store):
    saved = store.add(make_template(preposition="σε")).unwrap()

    assert saved.id is not None
    assert store.get(saved.id).unwrap().preposition == "σε"


def test_get(store, stored):
    template = store.get(stored[2].id).unwrap()
    assert template == stored[2]


def test_get_missing(store, stored):
    error = store.get(999).unwrap_err()
    assert error.code is ErrorCode.E4010_NOT_FOUND
    assert error.code.http_status == 404


def test_list_all_insertion_order(store, stored):
    assert [t.id for t in store.list_all().unwrap()] == [t.id for t in stored]
    assert store.count().unwrap() == 4


@pytest.mark.parametrize("number_filter,expected", [
    (None, [0, 1, 2]),
    ("", [0, 1, 2]),
    ("both", [0, 1, 2]),
    ("singular", [0, 2]),
    ("plural", [1, 2]),
])
def test_sample_filters(store, stored, number_filter, expected):
    sampled = store.sample(1, number_filter, 10).unwrap()
    assert ids(sampled) == {stored[i].id for i in expected}


def test_sample_limit_distinct(store, stored):
    sampled = store.sample(1, None, 2).unwrap()
    assert len(sampled) == 2
    assert len(ids(sampled)) == 2


def test_sample_no_match(store, stored):
    assert store.sample(3, None, 10).unwrap() == []


def test_sample_zero_limit(store, stored):
    assert store.sample(1, None, 0).unwrap() == []


def test_sample_is_reproducible_with_seed(db, stored):
    first = TemplateStore(db, random.Random(42)).sample(1, None, 2).unwrap()
    second = TemplateStore(db, random.Random(42)).sample(1, None, 2).unwrap()
    assert [t.id for t in first] == [t.id for t in second]


@pytest.mark.parametrize("value,expected", [
    (None, None), ("", None), ("both", None), ("plural", "plural"),
])
def test_normalize_number_filter(value, expected):
    assert normalize_number_filter(value) == expected


def test_model_normalizes_legacy_slot_names():
    row = SentenceTemplate(article_field="AccSgArticle", noun_form_field="AccusativeSg")
    assert row.article_field == "acc_sg_article"
    assert row.noun_form_field == "accusative_sg"


def test_model_rejects_unknown_slot():
    with pytest.raises(ValueError, match="unknown vocabulary slot"):
        SentenceTemplate(article_field="dative_sg_article")


def test_model_rejects_unknown_number():
    with pytest.raises(ValueError):
        SentenceTemplate(number="dual")


def test_vocabulary_by_id(db, stored_nouns):
    records = VocabularyStore(db).by_id().unwrap()
    assert set(records) == {1, 2, 3, 4}
    assert records[1].acc_sg_article == "τον"
