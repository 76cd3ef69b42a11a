"""Keyword and pattern scans for metrics, risks, compliance and actions.

Severity, status and priority values are fixed placeholders; nothing
here scores a signal.
"""

import re
from typing import Dict, List, Tuple

from ..models.business import (
    KPI,
    ActionItem,
    BusinessMetrics,
    ComplianceCheck,
    RiskIndicator,
)
from ..models.enums import (
    ActionPriority,
    ActionStatus,
    ComplianceStatus,
    KPIStatus,
    RiskSeverity,
    RiskType,
)

KPI_PATTERNS: List[Tuple[str, "re.Pattern[str]"]] = [
    ("Revenue Growth", re.compile(r"revenue\s+growth\s+(\d+(?:\.\d+)?)%", re.IGNORECASE)),
    ("Customer Satisfaction", re.compile(r"satisfaction\s+(\d+(?:\.\d+)?)%", re.IGNORECASE)),
    ("Employee Retention", re.compile(r"retention\s+(\d+(?:\.\d+)?)%", re.IGNORECASE)),
]

RISK_KEYWORDS: Dict[RiskType, List[str]] = {
    RiskType.FINANCIAL: ["debt", "loss", "bankruptcy", "insolvency", "liquidity", "cash flow"],
    RiskType.LEGAL: ["litigation", "lawsuit", "breach", "violation", "penalty", "fine"],
    RiskType.OPERATIONAL: ["downtime", "failure", "outage", "disruption", "shortage"],
    RiskType.MARKET: ["competition", "decline", "recession", "volatility", "uncertainty"],
    RiskType.COMPLIANCE: ["regulation", "audit", "violation", "non-compliance", "regulatory"],
    RiskType.REPUTATIONAL: ["scandal", "negative", "publicity", "reputation", "brand damage"],
}

COMPLIANCE_AREAS: List[Tuple[str, List[str]]] = [
    ("GDPR", ["data protection", "privacy"]),
    ("SOX", ["financial reporting", "internal controls"]),
    ("HIPAA", ["health information", "patient data"]),
    ("PCI DSS", ["payment card", "credit card"]),
]

ACTION_PATTERNS = [
    re.compile(r"action\s+item[:\s]+([^.\n]+)", re.IGNORECASE),
    re.compile(r"todo[:\s]+([^.\n]+)", re.IGNORECASE),
    re.compile(r"next\s+step[:\s]+([^.\n]+)", re.IGNORECASE),
    re.compile(r"follow\s+up[:\s]+([^.\n]+)", re.IGNORECASE),
]


def kpi_status(value: float) -> KPIStatus:
    if value > 80:
        return KPIStatus.ON_TRACK
    if value > 60:
        return KPIStatus.BEHIND
    return KPIStatus.CRITICAL


def extract_business_metrics(text: str) -> BusinessMetrics:
    kpis = []
    for name, pattern in KPI_PATTERNS:
        for match in pattern.finditer(text):
            value = float(match.group(1))
            kpis.append(KPI(
                name=name,
                value=value,
                target=None,
                unit="%",
                status=kpi_status(value),
            ))
    return BusinessMetrics(kpis=kpis)


def identify_risks(text: str) -> List[RiskIndicator]:
    """One indicator per risk keyword present, grouped by risk type."""
    lowered = text.lower()
    return [
        RiskIndicator(
            risk_type=risk_type,
            description=f"Identified {keyword} risk",
            severity=RiskSeverity.MEDIUM,
            probability=0.5,
            impact="Potential business impact",
            mitigation="Review and address",
        )
        for risk_type, keywords in RISK_KEYWORDS.items()
        for keyword in keywords
        if keyword in lowered
    ]


def check_compliance(text: str) -> List[ComplianceCheck]:
    lowered = text.lower()
    return [
        ComplianceCheck(
            regulation=regulation,
            requirement="Review compliance requirements",
            status=ComplianceStatus.PENDING,
            notes="Document contains relevant keywords",
        )
        for regulation, keywords in COMPLIANCE_AREAS
        if any(keyword in lowered for keyword in keywords)
    ]


def extract_action_items(text: str) -> List[ActionItem]:
    items = []
    for pattern in ACTION_PATTERNS:
        for match in pattern.finditer(text):
            items.append(ActionItem(
                title="Action Item",
                description=match.group(1).strip(),
                priority=ActionPriority.MEDIUM,
                status=ActionStatus.PENDING,
            ))
    return items
