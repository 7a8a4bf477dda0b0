import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from core.errors import (
    DatabaseErrorMapper,
    ErrorCode,
    coverage_gap,
    format_error,
    no_templates,
    not_found,
)


@pytest.mark.parametrize("code,status", [
    (ErrorCode.E2002_INVALID_FORMAT, 400),
    (ErrorCode.E4010_NOT_FOUND, 404),
    (ErrorCode.E4011_CONSTRAINT_VIOLATION, 409),
    (ErrorCode.E4001_CONNECTION_FAILED, 503),
    (ErrorCode.E5103_COVERAGE_GAP, 409),
    (ErrorCode.E5104_NO_VOCABULARY, 404),
    (ErrorCode.E5105_NO_TEMPLATES, 404),
    (ErrorCode.E9001_UNEXPECTED_ERROR, 500),
])
def test_http_status(code, status):
    assert code.http_status == status


def test_format_error_names_sentence():
    error = format_error(42, "τον", origin="pattern_extractor").unwrap_err()

    assert "Sentence 42" in error.message
    assert error.metadata == {"sentence_id": 42, "correct_answer": "τον"}
    assert error.context.origin == "pattern_extractor"


def test_none_metadata_dropped():
    assert "number" not in no_templates(1, None).unwrap_err().metadata


def test_coverage_gap_lists_every_triple():
    error = coverage_gap([("accusative", 1, "direct_object"), ("genitive", 2, "possession")]).unwrap_err()

    assert error.message.endswith("accusative-1-direct_object, genitive-2-possession")
    assert error.to_dict()["error"]["metadata"]["missing"][1] == ["genitive", 2, "possession"]


def test_with_context_keeps_unset_fields():
    error = not_found("Template", 3).unwrap_err()

    updated = error.with_context(correlation_id=None, request_id="req-1")

    assert updated.context.correlation_id == error.context.correlation_id
    assert updated.context.request_id == "req-1"
    assert updated.code is error.code


def test_unwrap_on_err_raises():
    with pytest.raises(ValueError):
        not_found("Template", 3).unwrap()


@pytest.mark.parametrize("exc,code", [
    (IntegrityError("INSERT", {}, Exception("NOT NULL")), ErrorCode.E4011_CONSTRAINT_VIOLATION),
    (OperationalError("SELECT", {}, Exception("database is locked")), ErrorCode.E4001_CONNECTION_FAILED),
    (SQLAlchemyError("boom"), ErrorCode.E4003_TRANSACTION_FAILED),
    (RuntimeError("boom"), ErrorCode.E9000_INTERNAL_GENERIC),
])
def test_database_error_mapper(exc, code):
    error = DatabaseErrorMapper("template_store").map_exception(exc)

    assert error.code is code
    assert error.context.origin == "template_store"
    assert error.cause is exc
