#!/usr/bin/env python3
"""
Demo script — run the feed engine locally without a database.

Uses in-memory broker sources built from scripts/sample_data.py and
prints a compact view of the standardized feed.

Usage:
    cd backend
    python -m scripts.demo_feed
"""

import asyncio

from broker_feed.core.constants import BrokerSource
from broker_feed.core.logging import setup_logging
from broker_feed.feed import FeedEngine, build_feed_response
from broker_feed.sources import BrokerSourceClient, StaticBrokerSource
from broker_feed.standardization import parse_query
from broker_feed.standardization.models import SourceBatch

from scripts.sample_data import BROKER1_DOCUMENTS, BROKER2_DOCUMENTS


class UnreachableBrokerSource(BrokerSourceClient):
    """Always fails, to show per-source failure isolation."""

    def __init__(self, source: BrokerSource) -> None:
        self.source = source

    async def fetch(self) -> SourceBatch:
        raise ConnectionError(f"{self.source} is unreachable")


async def run_query(title: str, clients, **params):
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)

    engine = FeedEngine(clients=clients)
    body = build_feed_response(await engine.run(parse_query(**params)))
    _print_body(body)


def _print_body(body: dict) -> None:
    if not body["success"]:
        print(f"  FAILED: {body['error']}")
        return

    pagination = body["pagination"]
    stats = body["statistics"]
    meta = body["metadata"]

    print(f"  Page {pagination['page']}/{pagination['totalPages']}  "
          f"({pagination['totalCount']} matching policies)")
    for policy in body["data"]:
        print(f"    {policy['source']:<8} {policy['policyNumber']:<14} "
              f"{policy['startDate']:<11} {policy['policyType']:<10} "
              f"insured={policy['insuredAmount']:>10,.2f} premium={policy['premium']:>8,.2f}")

    print(f"\n  Insured total: {stats['totalInsuredAmount']:,.2f}  "
          f"avg: {stats['averageInsuredAmount']:,.2f}")
    print(f"  By type:   {stats['policyTypeBreakdown']}")
    print(f"  By source: {stats['sourceBreakdown']}")
    print(f"  Active:    {stats['activePolicies']['totalActivePolicies']} "
          f"({meta['activePoliciesPercentage']}% of {meta['totalPoliciesAcrossAllSources']})")
    print(f"  Quality:   {meta['dataQuality']}")
    for outcome in meta["sources"]:
        status = "ok" if outcome["success"] else f"FAILED ({outcome['error']})"
        print(f"  Source {outcome['source']}: {status}")


async def main():
    setup_logging("WARNING")

    clients = {
        BrokerSource.BROKER1: StaticBrokerSource(BrokerSource.BROKER1, BROKER1_DOCUMENTS),
        BrokerSource.BROKER2: StaticBrokerSource(BrokerSource.BROKER2, BROKER2_DOCUMENTS),
    }

    await run_query("DEMO 1: Both brokers, defaults", clients)
    await run_query("DEMO 2: Motor policies only", clients, policy_type="motor")
    await run_query("DEMO 3: Search 'albion', page size 1", clients, search="albion", limit="1")
    await run_query(
        "DEMO 4: broker1 unreachable",
        {**clients, BrokerSource.BROKER1: UnreachableBrokerSource(BrokerSource.BROKER1)},
    )


if __name__ == "__main__":
    asyncio.run(main())
