"""Storage boundary.

SQLAlchemy exceptions stop here: stores catch them and hand the mapper's
AppError back inside an ``Err``.
"""
from __future__ import annotations

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from .types import AppError
from .builders import constraint_violation, db_connection_failed, internal_error, transaction_failed


class DatabaseErrorMapper:
    """Translates database exceptions into AppErrors tagged with ``origin``."""

    def __init__(self, origin: str = "database"):
        self.origin = origin

    def map_exception(self, exc: Exception) -> AppError:
        if isinstance(exc, IntegrityError):
            built = constraint_violation(str(exc.orig or exc), origin=self.origin, cause=exc)
        elif isinstance(exc, OperationalError):
            # Locked or unreachable database file
            built = db_connection_failed(str(exc.orig or exc), origin=self.origin, cause=exc)
        elif isinstance(exc, SQLAlchemyError):
            built = transaction_failed(str(exc), origin=self.origin, cause=exc)
        else:
            built = internal_error(f"Database error: {exc}", origin=self.origin, cause=exc)
        return built.error
