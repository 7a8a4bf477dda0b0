from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import migration, practice, templates
from core.config import settings
from core.database import Base, engine
from core.errors import register_error_handlers
from core.logging import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
import models  # noqa: F401

VERSION = "0.1.0"

configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON, log_sql=settings.LOG_SQL)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    log.info("startup", version=VERSION, tables=sorted(Base.metadata.tables))
    yield
    engine.dispose()
    log.info("shutdown")


app = FastAPI(
    title="Greek Declension API",
    description="Greek noun declension drills generated from sentence templates",
    version=VERSION,
    lifespan=lifespan,
)

register_error_handlers(app)

app.add_middleware(RequestLoggingMiddleware, slow_threshold_ms=settings.SLOW_REQUEST_MS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(templates.router, prefix="/api/templates", tags=["templates"])
app.include_router(practice.router, prefix="/api/practice", tags=["practice"])
app.include_router(migration.router, prefix="/api/migration", tags=["migration"])


@app.get("/health")
def health_check():
    return {"status": "healthy", "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, reload=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,
    )
