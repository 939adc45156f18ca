"""
Broker endpoints — the standardized feed and the raw per-broker batches.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from broker_feed.api.deps import get_db, get_feed_engine
from broker_feed.api.schemas.feed import ErrorResponse, RawBrokerResponse, StandardizedFeedResponse
from broker_feed.core.config import settings
from broker_feed.core.constants import BrokerSource
from broker_feed.core.logging import get_logger
from broker_feed.feed.engine import FeedEngine
from broker_feed.feed.response import build_feed_response, failure_response
from broker_feed.repositories import broker_documents as broker_document_repository
from broker_feed.standardization.query import parse_query

logger = get_logger(__name__)

router = APIRouter(prefix="/brokers", tags=["Brokers"])


# ─── Standardized feed ────────────────────────────────────
@router.get(
    "/standardized",
    response_model=StandardizedFeedResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_standardized_policies(
    page: str | None = Query(None, description="Page number (>= 1, default 1)"),
    limit: str | None = Query(None, description="Page size (1-100, default 20)"),
    source: str | None = Query(None, description="broker1 or broker2; omit for both"),
    policy_type: str | None = Query(None, alias="policyType"),
    client_type: str | None = Query(None, alias="clientType"),
    search: str | None = Query(None, description="Matches policy number, description, insurer, client ref"),
    min_amount: str | None = Query(None, alias="minAmount"),
    max_amount: str | None = Query(None, alias="maxAmount"),
    start_from: str | None = Query(None, alias="startFrom", description="DD/MM/YYYY or YYYY-MM-DD"),
    start_to: str | None = Query(None, alias="startTo", description="DD/MM/YYYY or YYYY-MM-DD"),
    engine: FeedEngine = Depends(get_feed_engine),
):
    """
    Merged, standardized policy feed from both brokers.

    Malformed paging values fall back to defaults; a broker that cannot be
    reached is reported in metadata.sources and contributes no records.
    """
    try:
        query = parse_query(
            page=page,
            limit=limit,
            source=source,
            policy_type=policy_type,
            client_type=client_type,
            search=search,
            min_amount=min_amount,
            max_amount=max_amount,
            start_from=start_from,
            start_to=start_to,
            default_limit=settings.DEFAULT_PAGE_SIZE,
            max_limit=settings.MAX_PAGE_SIZE,
        )
        result = await engine.run(query)
    except Exception as exc:
        logger.exception("Standardized feed failed", error=str(exc))
        return JSONResponse(status_code=500, content=failure_response(str(exc)))

    body = build_feed_response(result)
    if not body["success"]:
        return JSONResponse(status_code=500, content=body)
    return body


# ─── Raw broker batches ───────────────────────────────────
@router.get(
    "/{source}",
    response_model=RawBrokerResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_raw_broker_documents(source: str, db: AsyncSession = Depends(get_db)):
    """Raw documents of one broker, without any standardization."""
    try:
        broker = BrokerSource(source)
    except ValueError:
        return JSONResponse(
            status_code=404,
            content={"success": False, "error": f"Unknown broker '{source}'"},
        )

    try:
        document_count = await broker_document_repository.count_documents(db, str(broker))
        documents = await broker_document_repository.list_documents(db, str(broker))
    except Exception as exc:
        logger.error("Database read failed", source=str(broker), error=str(exc))
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(exc) or "Unknown error"},
        )

    return {
        "success": True,
        "documentCount": document_count,
        "message": "Database connection successful",
        "documents": documents,
    }
