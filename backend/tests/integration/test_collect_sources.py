from __future__ import annotations

import asyncio

import pytest

from broker_feed.core.constants import BrokerSource
from broker_feed.feed.steps.collect_sources import collect_sources
from broker_feed.sources import BrokerSourceClient, StaticBrokerSource, batch_from_payload
from broker_feed.standardization.models import SourceBatch


class RaisingSource(BrokerSourceClient):
    def __init__(self, source, exc):
        self.source = source
        self._exc = exc

    async def fetch(self):
        raise self._exc


class UnsuccessfulSource(BrokerSourceClient):
    def __init__(self, source):
        self.source = source

    async def fetch(self):
        return SourceBatch(success=False, document_count=3, error="collection offline")


class RendezvousSource(BrokerSourceClient):
    """Completes only once every peer has started fetching."""

    def __init__(self, source, started: asyncio.Event, peer_started: asyncio.Event):
        self.source = source
        self._started = started
        self._peer_started = peer_started

    async def fetch(self):
        self._started.set()
        await self._peer_started.wait()
        return SourceBatch(success=True, documents=[{"_id": str(self.source)}], document_count=1)


async def test_both_sources_succeed(static_clients):
    outcomes, documents = await collect_sources(static_clients)

    assert [o.source for o in outcomes] == [BrokerSource.BROKER1, BrokerSource.BROKER2]
    assert all(o.success for o in outcomes)
    assert [o.document_count for o in outcomes] == [2, 2]
    assert len(documents[BrokerSource.BROKER1]) == 2
    assert len(documents[BrokerSource.BROKER2]) == 2


async def test_raising_source_is_isolated(static_clients):
    clients = {
        **static_clients,
        BrokerSource.BROKER1: RaisingSource(BrokerSource.BROKER1, ConnectionError("Network error")),
    }
    outcomes, documents = await collect_sources(clients)

    assert outcomes[0].success is False
    assert outcomes[0].error == "Network error"
    assert outcomes[0].document_count == 0
    assert outcomes[1].success is True
    assert list(documents) == [BrokerSource.BROKER2]


async def test_exception_without_message_reports_its_type(static_clients):
    clients = {**static_clients, BrokerSource.BROKER2: RaisingSource(BrokerSource.BROKER2, TimeoutError())}
    outcomes, _ = await collect_sources(clients)

    assert outcomes[1].error == "TimeoutError"


async def test_unsuccessful_batch_contributes_no_documents(static_clients):
    clients = {**static_clients, BrokerSource.BROKER2: UnsuccessfulSource(BrokerSource.BROKER2)}
    outcomes, documents = await collect_sources(clients)

    assert outcomes[1].success is False
    assert outcomes[1].error == "collection offline"
    assert BrokerSource.BROKER2 not in documents


async def test_missing_client_is_a_failed_source(static_clients):
    outcomes, documents = await collect_sources({BrokerSource.BROKER1: static_clients[BrokerSource.BROKER1]})

    assert outcomes[1].source == BrokerSource.BROKER2
    assert outcomes[1].success is False
    assert list(documents) == [BrokerSource.BROKER1]


async def test_only_selected_sources_are_fetched(static_clients):
    outcomes, documents = await collect_sources(static_clients, [BrokerSource.BROKER2])

    assert [o.source for o in outcomes] == [BrokerSource.BROKER2]
    assert list(documents) == [BrokerSource.BROKER2]


async def test_sources_are_fetched_concurrently():
    first_started, second_started = asyncio.Event(), asyncio.Event()
    clients = {
        BrokerSource.BROKER1: RendezvousSource(BrokerSource.BROKER1, first_started, second_started),
        BrokerSource.BROKER2: RendezvousSource(BrokerSource.BROKER2, second_started, first_started),
    }

    outcomes, _ = await asyncio.wait_for(collect_sources(clients), timeout=2)

    assert all(o.success for o in outcomes)


async def test_static_source_returns_copies(broker1_documents):
    source = StaticBrokerSource(BrokerSource.BROKER1, broker1_documents)
    batch = await source.fetch()
    batch.documents.clear()

    assert (await source.fetch()).document_count == 2


@pytest.mark.parametrize(
    "payload, success, count",
    [
        ({"success": True, "documentCount": 1, "documents": [{"_id": "1"}]}, True, 1),
        ({"success": True, "documents": [{"_id": "1"}, {"_id": "2"}]}, True, 2),
        ({"success": True, "documentCount": 5}, False, 5),
        ({"documents": [{"_id": "1"}]}, False, 0),
        ({"success": "true", "documents": []}, False, 0),
        (["not", "an", "object"], False, 0),
    ],
)
def test_batch_from_payload(payload, success, count):
    batch = batch_from_payload(payload)
    assert batch.success is success
    assert batch.document_count == count
    if not success:
        assert batch.documents == []
        assert batch.error
