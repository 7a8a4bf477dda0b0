from sqlalchemy import func, select

from models import Sentence, SentenceTemplate
from scripts.migrate_templates import run


def count(db, model):
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def test_cancelled_migration_changes_nothing(db, stored_sentences, capsys):
    assert run(db, confirm=lambda: False) == 0

    assert "cancelled" in capsys.readouterr().out
    assert count(db, Sentence) == 4
    assert count(db, SentenceTemplate) == 0


def test_confirmed_migration(db, stored_sentences, capsys):
    assert run(db, confirm=lambda: True) == 0

    out = capsys.readouterr().out
    assert "Templates created:  3" in out
    assert count(db, Sentence) == 0


def test_already_migrated_skips_prompt(db, stored_sentences, capsys):
    run(db, confirm=lambda: True)

    def fail():
        raise AssertionError("prompted twice")

    assert run(db, confirm=fail) == 0
    assert "already completed" in capsys.readouterr().out


def test_failed_migration_exit_code(db, stored_nouns, capsys):
    db.add(Sentence(
        noun_id=1, english_prompt="I see ___", greek_sentence="Βλέπω", correct_answer="",
        case_type="accusative", number="singular", difficulty_phase=1, context_type="direct_object",
    ))
    db.commit()

    assert run(db, confirm=lambda: True) == 1
    assert "E5103_COVERAGE_GAP" in capsys.readouterr().out
