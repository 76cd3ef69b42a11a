"""Business document analysis models for the document text analytics system."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from .enums import (
    ActionPriority,
    ActionStatus,
    BenchmarkPerformance,
    ComplianceStatus,
    DocumentType,
    FinancialCategory,
    KPIStatus,
    ObligationStatus,
    PenaltySeverity,
    RatioStatus,
    RiskSeverity,
    RiskType,
    TermImportance,
    TrendDirection,
)


@dataclass(frozen=True)
class FinancialAmount:
    """A monetary amount found in a document."""
    value: float
    currency: str
    description: str
    category: FinancialCategory = FinancialCategory.OTHER
    amount_date: Optional[date] = None


@dataclass(frozen=True)
class FinancialRatio:
    name: str
    value: float
    benchmark: Optional[float]
    status: RatioStatus


@dataclass
class FinancialData:
    """
    Monetary figures extracted from a financial-style document.

    Revenue and expense totals only sum amounts tagged with the matching
    category; they are None when that sum is not positive.
    """
    amounts: List[FinancialAmount] = field(default_factory=list)
    currencies: List[str] = field(default_factory=list)
    total_revenue: Optional[float] = None
    total_expenses: Optional[float] = None
    profit_margin: Optional[float] = None
    cash_flow: Optional[float] = None
    key_financial_ratios: List[FinancialRatio] = field(default_factory=list)


@dataclass(frozen=True)
class ContractTerm:
    term: str
    description: str
    importance: TermImportance


@dataclass(frozen=True)
class Obligation:
    party: str
    obligation: str
    deadline: Optional[date]
    status: ObligationStatus


@dataclass(frozen=True)
class Penalty:
    description: str
    amount: Optional[float]
    trigger: str
    severity: PenaltySeverity


@dataclass
class ContractTerms:
    """Parties and key clauses found in a contract-style document."""
    parties: List[str] = field(default_factory=list)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    contract_value: Optional[float] = None
    currency: Optional[str] = None
    key_terms: List[ContractTerm] = field(default_factory=list)
    obligations: List[Obligation] = field(default_factory=list)
    penalties: List[Penalty] = field(default_factory=list)


@dataclass(frozen=True)
class KPI:
    name: str
    value: float
    target: Optional[float]
    unit: str
    status: KPIStatus


@dataclass(frozen=True)
class Trend:
    metric: str
    direction: TrendDirection
    magnitude: float
    period: str


@dataclass(frozen=True)
class Benchmark:
    metric: str
    industry_average: float
    company_value: float
    performance: BenchmarkPerformance


@dataclass
class BusinessMetrics:
    kpis: List[KPI] = field(default_factory=list)
    trends: List[Trend] = field(default_factory=list)
    benchmarks: List[Benchmark] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.kpis or self.trends or self.benchmarks)


@dataclass(frozen=True)
class RiskIndicator:
    risk_type: RiskType
    description: str
    severity: RiskSeverity
    probability: float
    impact: str
    mitigation: Optional[str] = None


@dataclass(frozen=True)
class ComplianceCheck:
    regulation: str
    requirement: str
    status: ComplianceStatus
    deadline: Optional[date] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class ActionItem:
    title: str
    description: str
    priority: ActionPriority
    assignee: Optional[str] = None
    deadline: Optional[date] = None
    status: ActionStatus = ActionStatus.PENDING


@dataclass
class BusinessDocumentAnalysis:
    """
    Structured business reading of a text.

    Populated in one pass by the classifier; never persisted.
    """
    document_type: DocumentType = DocumentType.UNKNOWN
    financial_data: Optional[FinancialData] = None
    contract_terms: Optional[ContractTerms] = None
    business_metrics: BusinessMetrics = field(default_factory=BusinessMetrics)
    risk_indicators: List[RiskIndicator] = field(default_factory=list)
    compliance_checks: List[ComplianceCheck] = field(default_factory=list)
    action_items: List[ActionItem] = field(default_factory=list)
