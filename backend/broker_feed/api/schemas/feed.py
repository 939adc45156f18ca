"""Standardized feed and raw broker response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from broker_feed.core.constants import BrokerSource


class CamelModel(BaseModel):
    """Serialised with camelCase keys, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PolicyOut(CamelModel):
    """One canonical policy."""

    id: str
    source: BrokerSource
    policy_number: str
    insured_amount: float
    start_date: str
    end_date: str
    admin_fee: float
    business_description: str
    business_event: str
    client_type: str
    client_ref: str
    commission: float
    effective_date: str
    insurer_policy_number: str
    tax_amount: float
    premium: float
    policy_fee: float
    policy_type: str
    insurer: str
    product: str
    renewal_date: str
    root_policy_ref: str
    created_at: str | None = None
    updated_at: str | None = None


class PaginationOut(CamelModel):
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total_count: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    has_next_page: bool
    has_prev_page: bool


class ActivePoliciesOut(CamelModel):
    total_active_policies: int
    total_active_customers: int
    total_active_insured_amount: float
    average_active_policy_duration: int
    active_policies_by_source: dict[str, int]


class StatisticsOut(CamelModel):
    total_policies: int
    total_insured_amount: float
    average_insured_amount: float
    total_premium: float
    average_premium: float
    policy_type_breakdown: dict[str, int]
    client_type_breakdown: dict[str, int]
    source_breakdown: dict[str, int]
    active_policies: ActivePoliciesOut


class SourceOutcomeOut(CamelModel):
    source: BrokerSource
    success: bool
    document_count: int
    error: str | None = None


class DataQualityOut(CamelModel):
    policies_with_valid_dates: int
    policies_with_missing_data: int


class FilterOptionsOut(CamelModel):
    policy_types: list[str]
    client_types: list[str]


class FeedMetadataOut(CamelModel):
    last_updated: str
    total_policies_across_all_sources: int
    active_policies_percentage: int
    data_quality: DataQualityOut
    filter_options: FilterOptionsOut
    sources: list[SourceOutcomeOut]


class StandardizedFeedResponse(CamelModel):
    """Successful standardized feed page."""

    success: bool = True
    data: list[PolicyOut]
    pagination: PaginationOut
    statistics: StatisticsOut
    metadata: FeedMetadataOut
    message: str


class RawBrokerResponse(CamelModel):
    """Raw broker batch, untouched documents."""

    success: bool = True
    document_count: int
    message: str
    documents: list[dict[str, Any]]


class ErrorResponse(CamelModel):
    success: bool = False
    error: str
    message: str | None = None
