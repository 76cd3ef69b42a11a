"""Enumerations for the document text analytics system."""

from enum import Enum
from typing import Optional


class FileType(Enum):
    """Document formats with a dedicated conversion strategy."""
    DOCX = "docx"
    PDF = "pdf"
    MARKDOWN = "md"

    @property
    def display_name(self) -> str:
        return {
            FileType.DOCX: "Word Document",
            FileType.PDF: "PDF Document",
            FileType.MARKDOWN: "Markdown File",
        }[self]

    @classmethod
    def from_extension(cls, extension: str) -> Optional["FileType"]:
        """Return the FileType for an extension hint, or None if unrecognized."""
        normalized = extension.strip().lower().lstrip(".")
        if normalized == "markdown":
            normalized = "md"
        for file_type in cls:
            if file_type.value == normalized:
                return file_type
        return None


class EntityType(Enum):
    """Categories of extracted entities."""
    PERSON = "Person"
    ORGANIZATION = "Organization"
    LOCATION = "Location"
    DATE = "Date"
    NUMBER = "Number"
    EMAIL = "Email"
    URL = "URL"


class SentimentLabel(Enum):
    """Polarity labels for lexicon-based sentiment."""
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class DocumentType(Enum):
    """Business document classes."""
    FINANCIAL_REPORT = "Financial Report"
    CONTRACT = "Contract"
    INVOICE = "Invoice"
    BUSINESS_PLAN = "Business Plan"
    PROPOSAL = "Proposal"
    MEETING_MINUTES = "Meeting Minutes"
    MARKET_RESEARCH = "Market Research"
    LEGAL_DOCUMENT = "Legal Document"
    RECEIPT = "Receipt"
    UNKNOWN = "Unknown"


class FinancialCategory(Enum):
    REVENUE = "Revenue"
    EXPENSE = "Expense"
    PROFIT = "Profit"
    LOSS = "Loss"
    INVESTMENT = "Investment"
    TAX = "Tax"
    OTHER = "Other"


class RatioStatus(Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"
    CRITICAL = "Critical"


class TermImportance(Enum):
    CRITICAL = "Critical"
    IMPORTANT = "Important"
    STANDARD = "Standard"
    MINOR = "Minor"


class ObligationStatus(Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    OVERDUE = "Overdue"
    WAIVED = "Waived"


class PenaltySeverity(Enum):
    MINOR = "Minor"
    MODERATE = "Moderate"
    SEVERE = "Severe"
    CRITICAL = "Critical"


class KPIStatus(Enum):
    ON_TRACK = "On Track"
    BEHIND = "Behind"
    AHEAD = "Ahead"
    CRITICAL = "Critical"


class TrendDirection(Enum):
    INCREASING = "Increasing"
    DECREASING = "Decreasing"
    STABLE = "Stable"
    FLUCTUATING = "Fluctuating"


class BenchmarkPerformance(Enum):
    ABOVE_AVERAGE = "Above Average"
    AVERAGE = "Average"
    BELOW_AVERAGE = "Below Average"
    TOP_PERFORMER = "Top Performer"


class RiskType(Enum):
    FINANCIAL = "Financial"
    LEGAL = "Legal"
    OPERATIONAL = "Operational"
    MARKET = "Market"
    COMPLIANCE = "Compliance"
    REPUTATIONAL = "Reputational"


class RiskSeverity(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class ComplianceStatus(Enum):
    COMPLIANT = "Compliant"
    NON_COMPLIANT = "Non-Compliant"
    PENDING = "Pending"
    EXEMPT = "Exempt"


class ActionPriority(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class ActionStatus(Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
