from core.errors import ErrorCode
from engines.coverage import missing_coverage, validate_coverage
from engines.extractor import extract

from tests.factories import make_template


def test_extracted_templates_cover_sentences(example_sentences, vocabulary_by_id):
    templates = extract(example_sentences, vocabulary_by_id).unwrap().templates
    assert validate_coverage(templates, example_sentences).is_ok()


def test_wording_is_not_compared(example_sentences):
    templates = [
        make_template(case_type="accusative", difficulty_phase=1, context_type="direct_object"),
        make_template(case_type="genitive", difficulty_phase=2, context_type="possession"),
        make_template(case_type="accusative", difficulty_phase=3, context_type="preposition",
                      english_template="Something else entirely"),
    ]
    assert validate_coverage(templates, example_sentences).is_ok()


def test_gap_names_missing_combination(example_sentences, vocabulary_by_id):
    templates = extract(example_sentences, vocabulary_by_id).unwrap().templates
    without_genitive = [t for t in templates if t.case_type != "genitive"]

    error = validate_coverage(without_genitive, example_sentences).unwrap_err()

    assert error.code is ErrorCode.E5103_COVERAGE_GAP
    assert error.metadata["missing"] == [["genitive", 2, "possession"]]
    assert "genitive-2-possession" in error.message


def test_missing_coverage_sorted(example_sentences):
    assert missing_coverage([], example_sentences) == [
        ("accusative", 1, "direct_object"),
        ("accusative", 3, "preposition"),
        ("genitive", 2, "possession"),
    ]


def test_extra_templates_are_fine(example_sentences):
    assert validate_coverage([make_template()], []).is_ok()
