"""Domain-Specific Error Builders

Ergonomic constructors for typed errors. Each builder returns an ``Err``
wrapping an AppError with the appropriate code and metadata.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


def _build(
    code: ErrorCode,
    message: str,
    *,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
        cause=cause,
    ))


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(message: str, *, field: str | None = None, origin: str = "") -> Err[AppError]:
    return _build(ErrorCode.E2000_VALIDATION_GENERIC, message, field=field, origin=origin)


def format_error(sentence_id: int | None, answer: str, origin: str = "") -> Err[AppError]:
    """Correct answer is not exactly '<article> <form>'."""
    return _build(
        ErrorCode.E2002_INVALID_FORMAT,
        f"Sentence {sentence_id}: correct answer must be two tokens "
        f"(article and form), got '{answer}'",
        origin=origin,
        sentence_id=sentence_id,
        correct_answer=answer,
    )


def out_of_range(
    field: str, value: int, min_val: int, max_val: int, origin: str = ""
) -> Err[AppError]:
    return _build(
        ErrorCode.E2003_OUT_OF_RANGE,
        f"Value {value} for '{field}' out of range (>= {min_val}, <= {max_val})",
        origin=origin,
        field=field,
        value=value,
        min=min_val,
        max=max_val,
    )


# =============================================================================
# Database Errors (E4xxx)
# =============================================================================

def not_found(entity: str, identifier=None, origin: str = "") -> Err[AppError]:
    msg = f"{entity} not found"
    if identifier is not None:
        msg += f" with id {identifier}"
    return _build(
        ErrorCode.E4010_NOT_FOUND,
        msg,
        origin=origin,
        entity=entity,
        id=str(identifier) if identifier is not None else None,
    )


def transaction_failed(reason: str, origin: str = "", cause: Exception | None = None) -> Err[AppError]:
    return _build(
        ErrorCode.E4003_TRANSACTION_FAILED,
        f"Transaction failed: {reason}",
        origin=origin,
        cause=cause,
    )


def db_connection_failed(reason: str, origin: str = "", cause: Exception | None = None) -> Err[AppError]:
    return _build(
        ErrorCode.E4001_CONNECTION_FAILED,
        f"Database connection failed: {reason}",
        origin=origin,
        cause=cause,
    )


def constraint_violation(detail: str, origin: str = "", cause: Exception | None = None) -> Err[AppError]:
    """Primary key, NOT NULL or foreign key rejected a write."""
    return _build(
        ErrorCode.E4011_CONSTRAINT_VIOLATION,
        f"Constraint violated: {detail}",
        origin=origin,
        cause=cause,
    )


# =============================================================================
# Business Errors (E5xxx)
# =============================================================================

def unresolved_slot(
    sentence_id: int | None,
    kind: str,
    token: str,
    origin: str = "",
) -> Err[AppError]:
    """A correct-answer token matches none of the record's slots of that kind."""
    return _build(
        ErrorCode.E5101_UNRESOLVED_SLOT,
        f"Sentence {sentence_id}: {kind} '{token}' not found in vocabulary record",
        origin=origin,
        sentence_id=sentence_id,
        kind=kind,
        token=token,
    )


def unknown_slot(slot_name: str, template_id: int | None = None, origin: str = "") -> Err[AppError]:
    """A template references a slot outside the 12 known slots."""
    return _build(
        ErrorCode.E5102_UNKNOWN_SLOT,
        f"Unknown vocabulary slot '{slot_name}'",
        origin=origin,
        slot=slot_name,
        template_id=template_id,
    )


def coverage_gap(missing: list[tuple[str, int, str]], origin: str = "") -> Err[AppError]:
    """Templates do not cover every (case, phase, context) triple."""
    rendered = ", ".join(f"{c}-{p}-{ctx}" for c, p, ctx in missing)
    return _build(
        ErrorCode.E5103_COVERAGE_GAP,
        f"Missing templates for combinations: {rendered}",
        origin=origin,
        missing=[list(triple) for triple in missing],
    )


def no_vocabulary(origin: str = "") -> Err[AppError]:
    return _build(
        ErrorCode.E5104_NO_VOCABULARY,
        "No vocabulary records found",
        origin=origin,
    )


def no_templates(phase: int, number_filter: str | None, origin: str = "") -> Err[AppError]:
    return _build(
        ErrorCode.E5105_NO_TEMPLATES,
        f"No templates found for phase {phase} and number '{number_filter or 'any'}'",
        origin=origin,
        phase=phase,
        number=number_filter,
    )


# =============================================================================
# Internal Errors (E9xxx)
# =============================================================================

def internal_error(message: str, origin: str = "", cause: Exception | None = None) -> Err[AppError]:
    return _build(ErrorCode.E9000_INTERNAL_GENERIC, message, origin=origin, cause=cause)
