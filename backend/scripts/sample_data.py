"""
Sample raw broker documents for local development.

Deliberately messy in the ways real broker exports are: sentinel strings,
blank numerics, an unknown renewal date, one near-empty document.
"""

BROKER1_DOCUMENTS = [
    {
        "_id": "b1-0001",
        "PolicyNumber": "POL-2024-001",
        "InsuredAmount": 100000,
        "StartDate": "01/01/2024",
        "EndDate": "31/12/2024",
        "AdminFee": 50,
        "BusinessDescription": "Harbour Logistics Ltd",
        "BusinessEvent": "New Business",
        "ClientType": "Corporate",
        "ClientRef": "CL-1001",
        "Commission": 500,
        "EffectiveDate": "01/01/2024",
        "InsurerPolicyNumber": "INS-77881",
        "IPTAmount": 120,
        "Premium": 1200,
        "PolicyFee": 25,
        "PolicyType": "Motor",
        "Insurer": "Northgate Mutual",
        "Product": "Fleet Motor",
        "RenewalDate": "01/01/2027",
        "RootPolicyRef": "ROOT-001",
    },
    {
        "_id": "b1-0002",
        "PolicyNumber": "POL-2024-002",
        "InsuredAmount": "50000",
        "StartDate": "15/06/2024",
        "EndDate": "14/06/2025",
        "AdminFee": "TBC",
        "BusinessDescription": "Greenfield Bakery",
        "BusinessEvent": "Renewal",
        "ClientType": "SME",
        "ClientRef": "CL-1002",
        "Commission": 250,
        "EffectiveDate": "15/06/2024",
        "InsurerPolicyNumber": "INS-77882",
        "IPTAmount": 60,
        "Premium": 600,
        "PolicyFee": 15,
        "PolicyType": "Property",
        "Insurer": "Albion Insurance",
        "Product": "Commercial Property",
        "RenewalDate": "15/06/2025",
        "RootPolicyRef": "ROOT-002",
    },
    {
        "_id": "b1-0003",
        "PolicyNumber": "POL-2025-003",
        "InsuredAmount": 250000,
        "StartDate": "01/03/2025",
        "EndDate": "28/02/2026",
        "AdminFee": 75,
        "BusinessDescription": "Riverside Clinic",
        "BusinessEvent": "New Business",
        "ClientType": "Corporate",
        "ClientRef": "CL-1003",
        "Commission": 1100,
        "EffectiveDate": "01/03/2025",
        "InsurerPolicyNumber": "INS-77883",
        "IPTAmount": "Not Known",
        "Premium": 4800,
        "PolicyFee": 40,
        "PolicyType": "Liability",
        "Insurer": "Northgate Mutual",
        "Product": "Professional Indemnity",
        "RenewalDate": "Not Known",
        "RootPolicyRef": "ROOT-003",
    },
    {"_id": "b1-0004"},
]

BROKER2_DOCUMENTS = [
    {
        "_id": "b2-0001",
        "PolicyRef": "REF-9001",
        "CoverageAmount": 75000,
        "ExpirationDate": "31/12/2024",
        "AdminCharges": 40,
        "InitiationDate": "01/01/2024",
        "CompanyDescription": "Oak & Ash Joinery",
        "ContractEvent": "New Contract",
        "ConsumerID": "CN-2001",
        "BrokerFee": 375,
        "ActivationDate": "01/01/2024",
        "ConsumerCategory": "SME",
        "InsuranceCompanyRef": "IC-501",
        "TaxAmount": 90,
        "CoverageCost": 900,
        "ContractFee": 20,
        "ContractCategory": "Property",
        "Underwriter": "Albion Insurance",
        "NextRenewalDate": "01/01/2027",
        "PrimaryPolicyRef": "PRIMARY-001",
        "InsurancePlan": "Premises Cover",
    },
    {
        "_id": "b2-0002",
        "PolicyRef": "REF-9002",
        "CoverageAmount": 0,
        "ExpirationDate": "2025-09-30",
        "AdminCharges": "",
        "InitiationDate": "2024-10-01",
        "CompanyDescription": "Blue Finch Cafe",
        "ContractEvent": "Mid-term Adjustment",
        "ConsumerID": "CN-2002",
        "BrokerFee": None,
        "ActivationDate": "2024-10-01",
        "ConsumerCategory": "Individual",
        "InsuranceCompanyRef": "IC-502",
        "CoverageCost": "TBC",
        "ContractFee": 10,
        "ContractCategory": "Motor",
        "Underwriter": "Crown & Anchor",
        "NextRenewalDate": "01-10-2026",
        "PrimaryPolicyRef": "PRIMARY-002",
        "InsurancePlan": "Private Car",
    },
]
