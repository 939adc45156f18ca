"""
Service settings, read from the environment (and `.env`) by pydantic-settings.

BROKER_SOURCE_MODE picks where raw broker batches come from.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database (raw broker documents) ──
    POSTGRES_USER: str = "brokers_user"
    POSTGRES_PASSWORD: str = "brokers_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "brokers_db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 5

    @property
    def DATABASE_URL(self) -> str:
        """asyncpg URL used by the session factory."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # ── Broker sources ────────────────────────
    # "database": read broker_documents directly
    # "http":     call the raw broker endpoints of another deployment
    BROKER_SOURCE_MODE: str = "database"
    BROKER_API_BASE_URL: str = "http://localhost:8000/api/v1"
    SOURCE_TIMEOUT_SECONDS: float = 30.0

    # ── Feed ──────────────────────────────────
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
