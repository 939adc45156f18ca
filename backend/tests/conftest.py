from __future__ import annotations

import itertools
from datetime import datetime, timezone

import pytest

from broker_feed.core.constants import BrokerSource
from broker_feed.sources import StaticBrokerSource
from broker_feed.standardization.models import CanonicalPolicy

# Snapshot used by tests that depend on "today"
SNAPSHOT = datetime(2024, 9, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def snapshot() -> datetime:
    return SNAPSHOT


@pytest.fixture
def broker1_documents() -> list[dict]:
    return [
        {
            "_id": "1",
            "PolicyNumber": "POL001",
            "InsuredAmount": 100000,
            "StartDate": "01/01/2024",
            "EndDate": "31/12/2024",
            "AdminFee": 50,
            "BusinessDescription": "Test Business",
            "BusinessEvent": "New Policy",
            "ClientType": "Individual",
            "ClientRef": "CLIENT001",
            "Commission": 500,
            "EffectiveDate": "01/01/2024",
            "InsurerPolicyNumber": "INS001",
            "IPTAmount": 120,
            "Premium": 1200,
            "PolicyFee": 25,
            "PolicyType": "Motor",
            "Insurer": "Test Insurer",
            "Product": "Motor Insurance",
            "RenewalDate": "01/01/2025",
            "RootPolicyRef": "ROOT001",
            "createdAt": "2024-01-01T00:00:00.000Z",
            "updatedAt": "2024-01-01T00:00:00.000Z",
        },
        {
            "_id": "2",
            "PolicyNumber": "POL002",
            "InsuredAmount": 50000,
            "StartDate": "15/06/2024",
            "EndDate": "14/06/2025",
            "AdminFee": 30,
            "BusinessDescription": "Another Business",
            "BusinessEvent": "Renewal",
            "ClientType": "Commercial",
            "ClientRef": "CLIENT002",
            "Commission": 250,
            "EffectiveDate": "15/06/2024",
            "InsurerPolicyNumber": "INS002",
            "IPTAmount": 60,
            "Premium": 600,
            "PolicyFee": 15,
            "PolicyType": "Property",
            "Insurer": "Another Insurer",
            "Product": "Property Insurance",
            "RenewalDate": "15/06/2025",
            "RootPolicyRef": "ROOT002",
        },
    ]


@pytest.fixture
def broker2_documents() -> list[dict]:
    return [
        {
            "_id": "3",
            "PolicyRef": "REF001",
            "CoverageAmount": 75000,
            "ExpirationDate": "31/12/2024",
            "AdminCharges": 40,
            "InitiationDate": "01/01/2024",
            "CompanyDescription": "Test Company",
            "ContractEvent": "New Contract",
            "ConsumerID": "CONSUMER001",
            "BrokerFee": 375,
            "ActivationDate": "01/01/2024",
            "ConsumerCategory": "Personal",
            "InsuranceCompanyRef": "IC001",
            "TaxAmount": 90,
            "CoverageCost": 900,
            "ContractFee": 20,
            "ContractCategory": "Life",
            "Underwriter": "Test Underwriter",
            "NextRenewalDate": "01/01/2025",
            "PrimaryPolicyRef": "PRIMARY001",
            "InsurancePlan": "Life Insurance",
        },
        {
            "_id": "4",
            "PolicyRef": "REF002",
            "CoverageAmount": 0,
            "ExpirationDate": "30/06/2024",
            "AdminCharges": 25,
            "InitiationDate": "01/07/2023",
            "CompanyDescription": "Edge Case Company",
            "ContractEvent": "Cancellation",
            "ConsumerID": "CONSUMER002",
            "BrokerFee": 0,
            "ActivationDate": "01/07/2023",
            "ConsumerCategory": "Business",
            "InsuranceCompanyRef": "IC002",
            "TaxAmount": 0,
            "CoverageCost": "TBC",
            "ContractFee": 10,
            "ContractCategory": "Motor",
            "Underwriter": "Edge Underwriter",
            "NextRenewalDate": "01/07/2024",
            "PrimaryPolicyRef": "PRIMARY002",
            "InsurancePlan": "Motor Plan",
        },
    ]


@pytest.fixture
def static_clients(broker1_documents, broker2_documents):
    return {
        BrokerSource.BROKER1: StaticBrokerSource(BrokerSource.BROKER1, broker1_documents),
        BrokerSource.BROKER2: StaticBrokerSource(BrokerSource.BROKER2, broker2_documents),
    }


@pytest.fixture
def make_policy():
    """Factory for CanonicalPolicy with sensible defaults."""
    ids = itertools.count(1)

    def _make(**overrides) -> CanonicalPolicy:
        values = {"id": f"p-{next(ids)}", "source": BrokerSource.BROKER1}
        values.update(overrides)
        return CanonicalPolicy(**values)

    return _make
