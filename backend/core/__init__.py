"""Shared infrastructure: settings, database session, logging and errors."""
from core.config import settings
from core.database import Base, SessionLocal, engine, get_db, get_db_session, make_engine
from core.logging import (
    api_logger,
    bound_context,
    configure_logging,
    db_logger,
    engine_logger,
    generate_correlation_id,
    get_logger,
    migration_logger,
)
