"""Data models and enums for the document text analytics system."""

from .enums import (
    ActionPriority,
    ActionStatus,
    BenchmarkPerformance,
    ComplianceStatus,
    DocumentType,
    EntityType,
    FileType,
    FinancialCategory,
    KPIStatus,
    ObligationStatus,
    PenaltySeverity,
    RatioStatus,
    RiskSeverity,
    RiskType,
    SentimentLabel,
    TermImportance,
    TrendDirection,
)
from .conversion import ConversionResult
from .analysis import (
    DataPoint,
    Entity,
    ExtractedData,
    Keyword,
    SentimentAnalysis,
    TextStatistics,
)
from .business import (
    KPI,
    ActionItem,
    Benchmark,
    BusinessDocumentAnalysis,
    BusinessMetrics,
    ComplianceCheck,
    ContractTerm,
    ContractTerms,
    FinancialAmount,
    FinancialData,
    FinancialRatio,
    Obligation,
    Penalty,
    RiskIndicator,
    Trend,
)

__all__ = [
    # Enums
    "ActionPriority",
    "ActionStatus",
    "BenchmarkPerformance",
    "ComplianceStatus",
    "DocumentType",
    "EntityType",
    "FileType",
    "FinancialCategory",
    "KPIStatus",
    "ObligationStatus",
    "PenaltySeverity",
    "RatioStatus",
    "RiskSeverity",
    "RiskType",
    "SentimentLabel",
    "TermImportance",
    "TrendDirection",
    # Conversion models
    "ConversionResult",
    # Analytics models
    "DataPoint",
    "Entity",
    "ExtractedData",
    "Keyword",
    "SentimentAnalysis",
    "TextStatistics",
    # Business models
    "KPI",
    "ActionItem",
    "Benchmark",
    "BusinessDocumentAnalysis",
    "BusinessMetrics",
    "ComplianceCheck",
    "ContractTerm",
    "ContractTerms",
    "FinancialAmount",
    "FinancialData",
    "FinancialRatio",
    "Obligation",
    "Penalty",
    "RiskIndicator",
    "Trend",
]
