from __future__ import annotations

import math
from datetime import date

import pytest

from broker_feed.core.constants import BrokerSource
from broker_feed.standardization.aggregation import (
    active_percentage,
    assess_data_quality,
    collect_filter_options,
    paginate,
    round_half_up,
    sort_policies,
    summarize,
    summarize_active,
)


def test_sort_most_recent_start_first(make_policy):
    policies = [
        make_policy(policy_number="A", start_date="01/01/2023"),
        make_policy(policy_number="B", start_date="2024-06-15"),
        make_policy(policy_number="C", start_date="01-03-2024"),
    ]
    assert [p.policy_number for p in sort_policies(policies)] == ["B", "C", "A"]


def test_sort_puts_undated_last_and_is_stable(make_policy):
    policies = [
        make_policy(policy_number="X1", start_date="Not Known"),
        make_policy(policy_number="A", start_date="01/01/2024"),
        make_policy(policy_number="X2", start_date=""),
        make_policy(policy_number="B", start_date="01/01/2024"),
    ]
    assert [p.policy_number for p in sort_policies(policies)] == ["A", "B", "X1", "X2"]


@pytest.mark.parametrize("count", [0, 1, 7, 20, 23])
@pytest.mark.parametrize("limit", [1, 5, 20, 100])
def test_pages_partition_the_set(make_policy, count, limit):
    policies = [make_policy(policy_number=str(i)) for i in range(count)]
    _, first = paginate(policies, 1, limit)
    assert first.total_pages == math.ceil(count / limit)

    seen = []
    for page in range(1, first.total_pages + 1):
        items, _ = paginate(policies, page, limit)
        seen.extend(items)

    assert [p.id for p in seen] == [p.id for p in policies]


def test_pagination_flags(make_policy):
    policies = [make_policy() for _ in range(5)]

    items, meta = paginate(policies, 2, 2)
    assert len(items) == 2
    assert meta.total_count == 5
    assert meta.total_pages == 3
    assert meta.has_next_page and meta.has_prev_page

    items, meta = paginate(policies, 3, 2)
    assert len(items) == 1
    assert not meta.has_next_page


def test_page_beyond_range_is_empty(make_policy):
    items, meta = paginate([make_policy()], 4, 20)
    assert items == []
    assert meta.has_prev_page
    assert not meta.has_next_page


def test_empty_set_has_no_pages():
    items, meta = paginate([], 1, 20)
    assert items == []
    assert meta.total_pages == 0
    assert not meta.has_next_page
    assert not meta.has_prev_page


def test_summary_totals_and_averages(make_policy):
    policies = [
        make_policy(insured_amount=amount, premium=premium)
        for amount, premium in [(100000, 1200), (50000, 600), (75000, 900), (0, 0)]
    ]
    stats = summarize(policies)

    assert stats.total_policies == 4
    assert stats.total_insured_amount == 225000
    assert stats.average_insured_amount == 56250
    assert stats.total_premium == 2700
    assert stats.average_premium == 675


def test_summary_breakdowns(make_policy):
    policies = [
        make_policy(policy_type="Motor", client_type="SME"),
        make_policy(policy_type="Motor", client_type=""),
        make_policy(source=BrokerSource.BROKER2, policy_type="Life", client_type="SME"),
    ]
    stats = summarize(policies)

    assert stats.policy_type_breakdown == {"Motor": 2, "Life": 1}
    assert stats.client_type_breakdown == {"SME": 2}
    assert stats.source_breakdown == {"broker1": 2, "broker2": 1}


def test_summary_of_nothing_is_zero():
    stats = summarize([])
    assert stats.average_insured_amount == 0
    assert stats.average_premium == 0
    assert stats.source_breakdown == {"broker1": 0, "broker2": 0}


def test_active_statistics(make_policy):
    today = date(2024, 9, 1)
    policies = [
        make_policy(client_ref="C1", insured_amount=100, start_date="01/01/2024",
                    end_date="31/12/2024", renewal_date="01/01/2025"),
        make_policy(client_ref="C1", insured_amount=50, start_date="15/06/2024",
                    end_date="14/06/2025", renewal_date="15/06/2025"),
        make_policy(source=BrokerSource.BROKER2, client_ref="C2", insured_amount=75,
                    start_date="01/01/2024", end_date="Not Known", renewal_date="01/01/2025"),
        make_policy(source=BrokerSource.BROKER2, client_ref="C3", insured_amount=999,
                    start_date="01/07/2023", end_date="30/06/2024", renewal_date="01/07/2024"),
    ]
    active = summarize_active(policies, today)

    assert active.total_active_policies == 3
    assert active.total_active_customers == 2
    assert active.total_active_insured_amount == 225
    # (365 + 364) / 2 = 364.5, rounded half up
    assert active.average_active_policy_duration == 365
    assert active.active_policies_by_source == {"broker1": 2, "broker2": 1}


def test_active_statistics_with_nothing_active(make_policy):
    active = summarize_active([make_policy(start_date="TBC")], date(2024, 9, 1))
    assert active.total_active_policies == 0
    assert active.average_active_policy_duration == 0
    assert active.active_policies_by_source == {"broker1": 0, "broker2": 0}


@pytest.mark.parametrize("value, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (364.5, 365)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    "active, total, expected",
    [(3, 4, 75), (1, 3, 33), (2, 3, 67), (1, 8, 13), (0, 0, 0), (0, 5, 0)],
)
def test_active_percentage(active, total, expected):
    assert active_percentage(active, total) == expected


def test_data_quality(make_policy):
    quality = assess_data_quality([
        make_policy(start_date="01/01/2024", renewal_date="01/01/2025"),
        make_policy(start_date="01/01/2024", renewal_date="Not Known"),
        make_policy(start_date="", renewal_date=""),
    ])
    assert quality.policies_with_valid_dates == 1
    assert quality.policies_with_missing_data == 2


def test_filter_options_are_sorted_and_distinct(make_policy):
    options = collect_filter_options([
        make_policy(policy_type="Property", client_type="SME"),
        make_policy(policy_type="Motor", client_type=""),
        make_policy(policy_type="Motor", client_type="Individual"),
    ])
    assert options.policy_types == ["Motor", "Property"]
    assert options.client_types == ["Individual", "SME"]
