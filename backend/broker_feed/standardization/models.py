"""
Canonical data shapes produced by the standardization engine.

CanonicalPolicy is the one source-independent policy record.  It is
built fresh from raw broker data on every query and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from broker_feed.core.constants import BROKER_ORDER, BrokerSource


# ═══════════════════════════════════════════════════════════
#  CanonicalPolicy
# ═══════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CanonicalPolicy:
    """A standardized policy record, independent of the broker it came from."""

    id: str
    source: BrokerSource
    policy_number: str = ""
    insured_amount: float = 0.0
    start_date: str = ""
    end_date: str = ""
    admin_fee: float = 0.0
    business_description: str = ""
    business_event: str = ""
    client_type: str = ""
    client_ref: str = ""
    commission: float = 0.0
    effective_date: str = ""
    insurer_policy_number: str = ""
    tax_amount: float = 0.0
    premium: float = 0.0
    policy_fee: float = 0.0
    policy_type: str = ""
    insurer: str = ""
    product: str = ""
    renewal_date: str = ""
    root_policy_ref: str = ""
    created_at: str | None = None
    updated_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise with the camelCase keys the feed exposes."""
        return {
            "id": self.id,
            "source": str(self.source),
            "policyNumber": self.policy_number,
            "insuredAmount": self.insured_amount,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "adminFee": self.admin_fee,
            "businessDescription": self.business_description,
            "businessEvent": self.business_event,
            "clientType": self.client_type,
            "clientRef": self.client_ref,
            "commission": self.commission,
            "effectiveDate": self.effective_date,
            "insurerPolicyNumber": self.insurer_policy_number,
            "taxAmount": self.tax_amount,
            "premium": self.premium,
            "policyFee": self.policy_fee,
            "policyType": self.policy_type,
            "insurer": self.insurer,
            "product": self.product,
            "renewalDate": self.renewal_date,
            "rootPolicyRef": self.root_policy_ref,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


# ═══════════════════════════════════════════════════════════
#  Source outcomes
# ═══════════════════════════════════════════════════════════

@dataclass
class SourceBatch:
    """Raw batch returned by a broker retrieval capability."""

    success: bool
    documents: list[dict[str, Any]] = field(default_factory=list)
    document_count: int = 0
    error: str | None = None


@dataclass
class SourceOutcome:
    """Per-source result of one collection pass."""

    source: BrokerSource
    success: bool
    document_count: int = 0
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": str(self.source),
            "success": self.success,
            "documentCount": self.document_count,
            "error": self.error,
        }


# ═══════════════════════════════════════════════════════════
#  Aggregates
# ═══════════════════════════════════════════════════════════

def empty_source_counts() -> dict[str, int]:
    """{"broker1": 0, "broker2": 0} in reporting order."""
    return {str(source): 0 for source in BROKER_ORDER}


@dataclass
class Pagination:
    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "totalCount": self.total_count,
            "totalPages": self.total_pages,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
        }


@dataclass
class Statistics:
    """Summary statistics over the filtered (pre-pagination) set."""

    total_policies: int = 0
    total_insured_amount: float = 0.0
    average_insured_amount: float = 0.0
    total_premium: float = 0.0
    average_premium: float = 0.0
    policy_type_breakdown: dict[str, int] = field(default_factory=dict)
    client_type_breakdown: dict[str, int] = field(default_factory=dict)
    source_breakdown: dict[str, int] = field(default_factory=empty_source_counts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalPolicies": self.total_policies,
            "totalInsuredAmount": self.total_insured_amount,
            "averageInsuredAmount": self.average_insured_amount,
            "totalPremium": self.total_premium,
            "averagePremium": self.average_premium,
            "policyTypeBreakdown": dict(self.policy_type_breakdown),
            "clientTypeBreakdown": dict(self.client_type_breakdown),
            "sourceBreakdown": dict(self.source_breakdown),
        }


@dataclass
class ActivePolicyStatistics:
    """Statistics over the policies active at the query's snapshot moment."""

    total_active_policies: int = 0
    total_active_customers: int = 0
    total_active_insured_amount: float = 0.0
    average_active_policy_duration: int = 0
    active_policies_by_source: dict[str, int] = field(default_factory=empty_source_counts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalActivePolicies": self.total_active_policies,
            "totalActiveCustomers": self.total_active_customers,
            "totalActiveInsuredAmount": self.total_active_insured_amount,
            "averageActivePolicyDuration": self.average_active_policy_duration,
            "activePoliciesBySource": dict(self.active_policies_by_source),
        }


@dataclass
class DataQuality:
    policies_with_valid_dates: int = 0
    policies_with_missing_data: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "policiesWithValidDates": self.policies_with_valid_dates,
            "policiesWithMissingData": self.policies_with_missing_data,
        }


@dataclass
class FilterOptions:
    """Distinct values available for the equality filters."""

    policy_types: list[str] = field(default_factory=list)
    client_types: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "policyTypes": list(self.policy_types),
            "clientTypes": list(self.client_types),
        }
