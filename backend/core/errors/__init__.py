"""Result-based error handling.

Engines never raise for expected failures; they return ``Ok(value)`` or
``Err(AppError)``. Extraction, for instance, inspects the code to decide
whether a sentence is skipped or the whole batch fails:

    match extract_one(sentence, record):
        case Ok(template):
            ...
        case Err(error) if error.code in SKIPPABLE:
            skipped.append(error)
        case Err() as failure:
            return failure
"""
from .types import AppError, ErrorCode, ErrorContext, Err, Ok, Result
from .builders import (
    constraint_violation,
    coverage_gap,
    db_connection_failed,
    format_error,
    internal_error,
    no_templates,
    no_vocabulary,
    not_found,
    out_of_range,
    transaction_failed,
    unknown_slot,
    unresolved_slot,
    validation_error,
)
from .boundaries import DatabaseErrorMapper
from .handlers import (
    AppErrorException,
    raise_error,
    raise_result,
    register_error_handlers,
    result_to_response,
)

__all__ = [
    "AppError", "ErrorCode", "ErrorContext", "Err", "Ok", "Result",
    "constraint_violation", "coverage_gap", "db_connection_failed", "format_error",
    "internal_error", "no_templates", "no_vocabulary", "not_found",
    "out_of_range", "transaction_failed", "unknown_slot", "unresolved_slot",
    "validation_error",
    "DatabaseErrorMapper",
    "AppErrorException", "raise_error", "raise_result",
    "register_error_handlers", "result_to_response",
]
