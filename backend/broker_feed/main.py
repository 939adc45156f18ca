"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from broker_feed.api.deps import get_db
from broker_feed.api.v1 import brokers
from broker_feed.core.config import settings
from broker_feed.core.constants import BROKER_ORDER
from broker_feed.core.logging import get_logger, setup_logging
from broker_feed.db.session import dispose_engine
from broker_feed.repositories import broker_documents as broker_document_repository


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(
        "DEBUG" if settings.APP_ENV == "development" else settings.LOG_LEVEL,
        json_output=settings.LOG_JSON,
    )
    logger = get_logger("startup")
    logger.info(
        "Application starting",
        env=settings.APP_ENV,
        source_mode=settings.BROKER_SOURCE_MODE,
    )
    yield
    await dispose_engine()
    logger.info("Application shutting down")


app = FastAPI(
    title="Broker Policy Feed API",
    description="Aggregates and standardizes broker policy data from multiple sources",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

API_PREFIX = "/api/v1"
app.include_router(brokers.router, prefix=API_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}


@app.get("/health/db", tags=["Health"])
async def database_health_check(db: AsyncSession = Depends(get_db)):
    """Database reachability plus raw document counts per broker."""
    try:
        counts = {
            str(source): await broker_document_repository.count_documents(db, str(source))
            for source in BROKER_ORDER
        }
    except Exception as exc:
        get_logger("health").error("Database health check failed", error=str(exc))
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(exc) or "Unknown error"},
        )

    return {
        "success": True,
        "documentCount": sum(counts.values()),
        "bySource": counts,
        "message": "Database connection successful",
    }
