"""Monadic Error Handling Types

Result/Either types for deterministic, composable error propagation.
Engines return ``Ok(value)`` or ``Err(AppError)`` instead of raising, so
callers decide per call site whether a failure is skipped, collected or
propagated.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation errors
    E4xxx: Database errors
    E5xxx: Business logic errors (extraction, synthesis, generation)
    E9xxx: Internal/Unknown errors
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2002_INVALID_FORMAT = 2002
    E2003_OUT_OF_RANGE = 2003

    # Database (E4xxx)
    E4001_CONNECTION_FAILED = 4001
    E4003_TRANSACTION_FAILED = 4003
    E4010_NOT_FOUND = 4010
    E4011_CONSTRAINT_VIOLATION = 4011

    # Business Logic (E5xxx)
    E5101_UNRESOLVED_SLOT = 5101
    E5102_UNKNOWN_SLOT = 5102
    E5103_COVERAGE_GAP = 5103
    E5104_NO_VOCABULARY = 5104
    E5105_NO_TEMPLATES = 5105

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def http_status(self) -> int:
        """Map error code to appropriate HTTP status."""
        code = self.value
        if 2000 <= code < 3000:
            return 400
        if code == 4010:
            return 404
        if code == 4011:
            return 409
        if 4000 <= code < 5000:
            return 503
        if code in (5104, 5105):
            return 404
        if 5000 <= code < 6000:
            return 409
        return 500

    @property
    def category(self) -> str:
        """Human-readable error category."""
        code = self.value
        if 2000 <= code < 3000:
            return "validation"
        if 4000 <= code < 5000:
            return "database"
        if 5000 <= code < 6000:
            return "business"
        return "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was produced."""
    correlation_id: str = field(default_factory=lambda: uuid4().hex[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""
    request_id: str | None = None


@dataclass(frozen=True, slots=True)
class AppError:
    """A typed failure value.

    ``metadata`` holds the machine-readable details callers act on, such as
    the offending sentence id or the list of uncovered (case, phase, context)
    triples. ``cause`` keeps the original exception when one was mapped.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def with_context(self, **changes) -> AppError:
        """Copy with context fields replaced; falsy values keep the current ones."""
        kept = {k: v for k, v in changes.items() if v}
        return replace(self, context=replace(self.context, **kept))

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable) -> Err[E]:
        return self


Result = Union[Ok[T], Err[E]]
