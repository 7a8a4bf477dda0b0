from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, read from the environment and ``.env``."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./declension.db"

    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # JSON lines instead of console output
    LOG_SQL: bool = False
    SLOW_REQUEST_MS: float = 1000

    # Practice set generation
    PRACTICE_MIN_POOL: int = 100       # smallest template sample drawn per session
    PRACTICE_POOL_FACTOR: int = 2      # sample size = max(factor * count, min pool)
    PRACTICE_ATTEMPT_FACTOR: int = 10  # give up after factor * count draws
    PRACTICE_SEED: int | None = None   # fixed seed for reproducible sessions


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
