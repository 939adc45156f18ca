from __future__ import annotations

import pytest

from broker_feed.core.constants import BrokerSource
from broker_feed.core.errors import NormalizationError
from broker_feed.standardization import mapping
from broker_feed.standardization.mapping import (
    FIELD_MAPPING,
    is_populated_record,
    normalize_batch,
    standardize_broker1_record,
    standardize_broker2_record,
)


def test_field_tables_cover_the_same_canonical_fields():
    assert set(FIELD_MAPPING[BrokerSource.BROKER1]) == set(FIELD_MAPPING[BrokerSource.BROKER2])


def test_broker1_record_maps_to_canonical(broker1_documents):
    policy = standardize_broker1_record(broker1_documents[0])

    assert policy.id == "1"
    assert policy.source == BrokerSource.BROKER1
    assert policy.policy_number == "POL001"
    assert policy.insured_amount == 100000.0
    assert policy.start_date == "01/01/2024"
    assert policy.tax_amount == 120.0
    assert policy.premium == 1200.0
    assert policy.client_type == "Individual"
    assert policy.renewal_date == "01/01/2025"
    assert policy.created_at == "2024-01-01T00:00:00.000Z"


def test_broker2_record_maps_to_canonical(broker2_documents):
    policy = standardize_broker2_record(broker2_documents[0])

    assert policy.source == BrokerSource.BROKER2
    assert policy.policy_number == "REF001"
    assert policy.insured_amount == 75000.0
    assert policy.start_date == "01/01/2024"
    assert policy.end_date == "31/12/2024"
    assert policy.client_type == "Personal"
    assert policy.client_ref == "CONSUMER001"
    assert policy.commission == 375.0
    assert policy.premium == 900.0
    assert policy.insurer == "Test Underwriter"
    assert policy.product == "Life Insurance"
    assert policy.root_policy_ref == "PRIMARY001"
    assert policy.created_at is None


def test_sentinel_premium_becomes_zero(broker2_documents):
    policy = standardize_broker2_record(broker2_documents[1])

    assert policy.premium == 0
    assert policy.insured_amount == 0
    assert policy.policy_type == "Motor"


def test_missing_fields_get_empty_defaults():
    policy = standardize_broker1_record({"_id": "x", "PolicyNumber": "POL9"})

    assert policy.policy_number == "POL9"
    assert policy.insurer == ""
    assert policy.premium == 0.0
    assert policy.admin_fee == 0.0


def test_numeric_strings_are_coerced():
    policy = standardize_broker1_record({"_id": "x", "InsuredAmount": "100.50", "AdminFee": "TBC"})

    assert policy.insured_amount == 100.5
    assert policy.admin_fee == 0.0


def test_non_mapping_raises():
    with pytest.raises(NormalizationError):
        standardize_broker1_record(["not", "a", "document"])


def test_to_dict_uses_camel_case_keys(broker1_documents):
    body = standardize_broker1_record(broker1_documents[0]).to_dict()

    assert body["policyNumber"] == "POL001"
    assert body["insuredAmount"] == 100000.0
    assert body["taxAmount"] == 120.0
    assert body["source"] == "broker1"
    assert "policy_number" not in body


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({}, False),
        ({"_id": "1"}, False),
        ({"_id": "1", "PolicyNumber": ""}, False),
        ({"_id": "1", "PolicyNumber": None}, False),
        ({"_id": "1", "PolicyNumber": "POL1"}, True),
        ("not a mapping", False),
        (None, False),
    ],
)
def test_is_populated_record(raw, expected):
    assert is_populated_record(raw) is expected


def test_normalize_batch_skips_near_empty_documents(broker1_documents):
    report = normalize_batch(BrokerSource.BROKER1, broker1_documents + [{"_id": "empty"}])

    assert report.input_records == 3
    assert report.normalized == 2
    assert report.skipped == 1
    assert report.failed == 0


def test_normalize_batch_tags_records_with_batch_source(broker1_documents):
    report = normalize_batch(BrokerSource.BROKER1, broker1_documents)
    assert {p.source for p in report.policies} == {BrokerSource.BROKER1}


def test_normalize_batch_isolates_record_failures(monkeypatch, broker1_documents):
    original = mapping.STANDARDIZERS[BrokerSource.BROKER1]

    def flaky(raw):
        if raw["_id"] == "1":
            raise ValueError("corrupt record")
        return original(raw)

    monkeypatch.setitem(mapping.STANDARDIZERS, BrokerSource.BROKER1, flaky)

    report = normalize_batch(BrokerSource.BROKER1, broker1_documents)

    assert report.failed == 1
    assert [p.policy_number for p in report.policies] == ["POL002"]
    assert "corrupt record" in report.errors[0]
