"""
Schema normalizer — maps raw broker documents to CanonicalPolicy.

Each broker names the same policy attributes differently (broker1's
"InsuredAmount" is broker2's "CoverageAmount", and so on).  FIELD_MAPPING
is the static table of canonical field → raw field per broker; the two
standardize_* functions apply it, routing numeric fields through
safe_parse_number() and copying strings verbatim.

normalize_batch() runs a mapper over a whole batch with per-record
isolation: near-empty documents are skipped, a record whose mapping
raises is logged and dropped, and the rest of the batch continues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from broker_feed.core.constants import BrokerSource
from broker_feed.core.errors import NormalizationError
from broker_feed.core.logging import get_logger
from broker_feed.standardization.coercion import safe_parse_number
from broker_feed.standardization.models import CanonicalPolicy

logger = get_logger(__name__)

ID_FIELD = "_id"
AUDIT_FIELDS: tuple[str, str] = ("createdAt", "updatedAt")

# canonical attribute → raw field name, per broker
FIELD_MAPPING: dict[BrokerSource, dict[str, str]] = {
    BrokerSource.BROKER1: {
        "policy_number": "PolicyNumber",
        "insured_amount": "InsuredAmount",
        "start_date": "StartDate",
        "end_date": "EndDate",
        "admin_fee": "AdminFee",
        "business_description": "BusinessDescription",
        "business_event": "BusinessEvent",
        "client_type": "ClientType",
        "client_ref": "ClientRef",
        "commission": "Commission",
        "effective_date": "EffectiveDate",
        "insurer_policy_number": "InsurerPolicyNumber",
        "tax_amount": "IPTAmount",
        "premium": "Premium",
        "policy_fee": "PolicyFee",
        "policy_type": "PolicyType",
        "insurer": "Insurer",
        "product": "Product",
        "renewal_date": "RenewalDate",
        "root_policy_ref": "RootPolicyRef",
    },
    BrokerSource.BROKER2: {
        "policy_number": "PolicyRef",
        "insured_amount": "CoverageAmount",
        "start_date": "InitiationDate",
        "end_date": "ExpirationDate",
        "admin_fee": "AdminCharges",
        "business_description": "CompanyDescription",
        "business_event": "ContractEvent",
        "client_type": "ConsumerCategory",
        "client_ref": "ConsumerID",
        "commission": "BrokerFee",
        "effective_date": "ActivationDate",
        "insurer_policy_number": "InsuranceCompanyRef",
        "tax_amount": "TaxAmount",
        "premium": "CoverageCost",
        "policy_fee": "ContractFee",
        "policy_type": "ContractCategory",
        "insurer": "Underwriter",
        "product": "InsurancePlan",
        "renewal_date": "NextRenewalDate",
        "root_policy_ref": "PrimaryPolicyRef",
    },
}

NUMERIC_FIELDS: frozenset[str] = frozenset({
    "insured_amount",
    "admin_fee",
    "commission",
    "tax_amount",
    "premium",
    "policy_fee",
})

# Documents with fewer populated fields than this are skipped
MIN_POPULATED_FIELDS = 2


# ═══════════════════════════════════════════════════════════
#  Single-record mapping
# ═══════════════════════════════════════════════════════════

def _passthrough(value: Any) -> str:
    """Copy a string field verbatim; absent values become ""."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _standardize(raw: Mapping[str, Any], source: BrokerSource) -> CanonicalPolicy:
    if not isinstance(raw, Mapping):
        raise NormalizationError(
            f"Expected a mapping, got {type(raw).__name__}",
            source=source,
        )

    values: dict[str, Any] = {}
    for canonical_field, raw_field in FIELD_MAPPING[source].items():
        raw_value = raw.get(raw_field)
        if canonical_field in NUMERIC_FIELDS:
            values[canonical_field] = safe_parse_number(raw_value)
        else:
            values[canonical_field] = _passthrough(raw_value)

    created_field, updated_field = AUDIT_FIELDS
    return CanonicalPolicy(
        id=_passthrough(raw.get(ID_FIELD)),
        source=source,
        created_at=_optional_text(raw.get(created_field)),
        updated_at=_optional_text(raw.get(updated_field)),
        **values,
    )


def standardize_broker1_record(raw: Mapping[str, Any]) -> CanonicalPolicy:
    """Map a broker1 document (PolicyNumber, InsuredAmount, IPTAmount, ...)."""
    return _standardize(raw, BrokerSource.BROKER1)


def standardize_broker2_record(raw: Mapping[str, Any]) -> CanonicalPolicy:
    """Map a broker2 document (PolicyRef, CoverageAmount, CoverageCost, ...)."""
    return _standardize(raw, BrokerSource.BROKER2)


STANDARDIZERS: dict[BrokerSource, Callable[[Mapping[str, Any]], CanonicalPolicy]] = {
    BrokerSource.BROKER1: standardize_broker1_record,
    BrokerSource.BROKER2: standardize_broker2_record,
}


def is_populated_record(raw: Any) -> bool:
    """True if the document has at least MIN_POPULATED_FIELDS non-blank fields."""
    if not isinstance(raw, Mapping):
        return False
    populated = sum(1 for value in raw.values() if value is not None and value != "")
    return populated >= MIN_POPULATED_FIELDS


# ═══════════════════════════════════════════════════════════
#  Batch normalisation
# ═══════════════════════════════════════════════════════════

@dataclass
class NormalizationReport:
    """Outcome of normalising one broker batch."""

    source: BrokerSource
    policies: list[CanonicalPolicy] = field(default_factory=list)
    input_records: int = 0
    skipped: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def normalized(self) -> int:
        return len(self.policies)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": str(self.source),
            "input_records": self.input_records,
            "normalized": self.normalized,
            "skipped": self.skipped,
            "failed": self.failed,
        }


def normalize_batch(
    source: BrokerSource,
    documents: list[Any],
) -> NormalizationReport:
    """
    Standardize every usable document of one broker batch.

    The broker tag comes from `source` (which capability supplied the
    batch), never from the document contents.
    """
    standardize = STANDARDIZERS[source]
    report = NormalizationReport(source=source, input_records=len(documents))

    for idx, raw in enumerate(documents):
        if not is_populated_record(raw):
            report.skipped += 1
            continue
        try:
            report.policies.append(standardize(raw))
        except Exception as exc:
            report.failed += 1
            report.errors.append(f"{source} record {idx}: {exc}")
            logger.warning(
                "Failed to standardize record, skipping",
                source=str(source),
                row_index=idx,
                record_id=raw.get(ID_FIELD),
                error=str(exc),
            )

    logger.debug(
        "Batch normalized",
        **report.to_dict(),
    )
    return report
