"""Database Module with Monadic Error Handling

Provides database session management and query helpers with Result-based
error propagation. The engine is synchronous: every operation runs to
completion on the calling thread.
"""
from contextlib import contextmanager
from typing import Iterator, TypeVar

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import settings
from core.errors import (
    AppError,
    Ok,
    Err,
    Result,
    not_found,
    DatabaseErrorMapper,
)

T = TypeVar("T")


def make_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine; in-memory SQLite shares one connection across sessions."""
    kwargs: dict = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update({
            "pool_pre_ping": True,
            "pool_size": 5,
            "max_overflow": 10,
        })
    return create_engine(url, **kwargs)


engine = make_engine(settings.DATABASE_URL, echo=settings.LOG_SQL)

SessionLocal = sessionmaker(
    bind=engine,
    expire_on_commit=False,
    autoflush=False,
)

Base = declarative_base()

_db_mapper = DatabaseErrorMapper("database")


def get_db() -> Iterator[Session]:
    """Dependency that yields database session."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def get_db_session() -> Iterator[Session]:
    """Context manager for database session."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def fetch_one(
    session: Session,
    model: type[T],
    id: int,
    entity_name: str | None = None,
) -> Result[T, AppError]:
    """Fetch single entity by ID.

    Returns:
        Ok(entity) if found
        Err(not_found) if not found
        Err(db_error) on database failure
    """
    name = entity_name or model.__name__
    try:
        entity = session.execute(select(model).where(model.id == id)).scalar_one_or_none()
        if entity is None:
            return not_found(name, id, origin="database.fetch_one")
        return Ok(entity)
    except SQLAlchemyError as e:
        return Err(_db_mapper.map_exception(e))


def fetch_all(session: Session, model: type[T]) -> Result[list[T], AppError]:
    """Fetch every row of a model in primary-key order."""
    try:
        rows = session.execute(select(model).order_by(model.id)).scalars().all()
        return Ok(list(rows))
    except SQLAlchemyError as e:
        return Err(_db_mapper.map_exception(e))


def create_entities(session: Session, entities: list[T]) -> Result[list[T], AppError]:
    """Insert entities in one commit.

    Returns:
        Ok(entities) on success (with populated IDs)
        Err(AppError) on failure, after rolling back
    """
    try:
        session.add_all(entities)
        session.commit()
        return Ok(entities)
    except SQLAlchemyError as e:
        session.rollback()
        return Err(_db_mapper.map_exception(e))
