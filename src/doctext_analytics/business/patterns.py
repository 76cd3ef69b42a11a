"""Keyword dictionaries for business document classification.

Each category carries the phrases whose presence (substring containment
in the lowercased text) votes for it.
"""

from dataclasses import dataclass
from typing import List

from ..models.enums import DocumentType


@dataclass(frozen=True)
class CategoryPattern:
    """Keyword dictionary for one document type."""
    document_type: DocumentType
    keywords: List[str]

    def score(self, lowered_text: str) -> int:
        """Number of dictionary phrases contained in an already lowercased text."""
        return sum(1 for keyword in self.keywords if keyword in lowered_text)


# Order is the tie-break order: the first category with the top score wins.
CATEGORY_PATTERNS: List[CategoryPattern] = [
    CategoryPattern(
        document_type=DocumentType.FINANCIAL_REPORT,
        keywords=[
            "revenue", "profit", "loss", "income", "expense", "balance sheet",
            "cash flow", "financial statement", "quarterly report",
            "annual report", "earnings", "margin", "roi", "ebitda",
        ],
    ),
    CategoryPattern(
        document_type=DocumentType.CONTRACT,
        keywords=[
            "agreement", "contract", "terms", "conditions", "party",
            "obligation", "liability", "indemnification", "termination",
            "breach", "clause", "section", "whereas", "hereby",
        ],
    ),
    CategoryPattern(
        document_type=DocumentType.INVOICE,
        keywords=[
            "invoice", "bill", "amount due", "payment terms", "due date", "tax",
            "subtotal", "total", "item", "quantity", "unit price",
            "invoice number",
        ],
    ),
    CategoryPattern(
        document_type=DocumentType.BUSINESS_PLAN,
        keywords=[
            "business plan", "strategy", "market", "competition", "target",
            "goal", "objective", "mission", "vision", "executive summary",
            "market analysis", "financial projection",
        ],
    ),
    CategoryPattern(
        document_type=DocumentType.MEETING_MINUTES,
        keywords=[
            "meeting", "minutes", "attendees", "agenda", "action items",
            "decisions", "discussion", "next steps", "date", "time",
            "location", "participants",
        ],
    ),
    CategoryPattern(
        document_type=DocumentType.LEGAL_DOCUMENT,
        keywords=[
            "legal", "law", "statute", "regulation", "compliance",
            "legal counsel", "attorney", "lawyer", "jurisdiction",
            "governing law", "legal notice",
        ],
    ),
]

FINANCIAL_DOCUMENT_TYPES = frozenset([
    DocumentType.FINANCIAL_REPORT,
    DocumentType.INVOICE,
    DocumentType.RECEIPT,
])

CONTRACT_DOCUMENT_TYPES = frozenset([
    DocumentType.CONTRACT,
    DocumentType.LEGAL_DOCUMENT,
])
