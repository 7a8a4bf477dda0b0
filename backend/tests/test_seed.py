from sqlalchemy import func, select

from core.errors import ErrorCode
from ingest.seed import SEED_DIR, parse_seed, seed_data, seed_from_files
from models import Noun, SentenceTemplate
from tests.factories import TEACHER

TEMPLATE = {
    "english_template": "I see ___ {noun}",
    "greek_template": "Βλέπω {article} {form}",
    "article_field": "AccSgArticle",
    "noun_form_field": "accusative_sg",
    "case_type": "accusative",
    "number": "singular",
    "difficulty_phase": 1,
    "context_type": "direct_object",
}


def count(db, model):
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def test_parse_normalizes_slot_names():
    seed = parse_seed({"templates": [TEMPLATE]}).unwrap()
    assert seed.templates[0].article_field == "acc_sg_article"


def test_parse_rejects_unknown_slot():
    error = parse_seed({"templates": [{**TEMPLATE, "noun_form_field": "vocative_sg"}]}, "bad.yaml").unwrap_err()

    assert error.code is ErrorCode.E2000_VALIDATION_GENERIC
    assert error.message.startswith("bad.yaml: templates.0.noun_form_field")


def test_parse_rejects_phase_out_of_range():
    assert parse_seed({"templates": [{**TEMPLATE, "difficulty_phase": 4}]}).is_err()


def test_seed_is_additive(db):
    seed = parse_seed({"nouns": [TEACHER], "templates": [TEMPLATE, TEMPLATE]}).unwrap()

    first = seed_data(db, seed).unwrap()
    second = seed_data(db, seed).unwrap()

    assert (first.nouns_created, first.templates_created, first.templates_skipped) == (1, 1, 1)
    assert (second.nouns_skipped, second.templates_skipped) == (1, 2)
    assert count(db, Noun) == 1
    assert count(db, SentenceTemplate) == 1


def test_bundled_seed_files(db):
    assert list(SEED_DIR.glob("*.yaml"))

    stats = seed_from_files(db).unwrap()

    assert stats.nouns_created == count(db, Noun) > 0
    assert stats.templates_created == count(db, SentenceTemplate) > 0
    assert "greek_core.yaml" in stats.sources


def test_missing_file_seeds_nothing(db, tmp_path):
    stats = seed_from_files(db, [tmp_path / "absent.yaml"]).unwrap()
    assert stats.nouns_created == stats.templates_created == 0
