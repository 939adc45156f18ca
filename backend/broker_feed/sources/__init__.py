"""
Broker retrieval capabilities.

build_source_clients() picks the implementation configured by
BROKER_SOURCE_MODE and returns one client per broker.
"""

from __future__ import annotations

from broker_feed.core.config import Settings, settings as default_settings
from broker_feed.core.constants import BROKER_ORDER, BrokerSource, SourceMode
from broker_feed.sources.base import BrokerSourceClient, batch_from_payload
from broker_feed.sources.database_source import DatabaseBrokerSource
from broker_feed.sources.http_source import HttpBrokerSource
from broker_feed.sources.static_source import StaticBrokerSource


def build_source_clients(settings: Settings | None = None) -> dict[BrokerSource, BrokerSourceClient]:
    """One retrieval client per broker, per the configured source mode."""
    cfg = settings or default_settings
    mode = SourceMode(cfg.BROKER_SOURCE_MODE.lower())

    if mode == SourceMode.HTTP:
        return {
            source: HttpBrokerSource(
                source,
                base_url=cfg.BROKER_API_BASE_URL,
                timeout=cfg.SOURCE_TIMEOUT_SECONDS,
            )
            for source in BROKER_ORDER
        }
    return {source: DatabaseBrokerSource(source) for source in BROKER_ORDER}


__all__ = [
    "BrokerSourceClient",
    "DatabaseBrokerSource",
    "HttpBrokerSource",
    "StaticBrokerSource",
    "batch_from_payload",
    "build_source_clients",
]
