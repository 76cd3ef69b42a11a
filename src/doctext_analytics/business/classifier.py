"""Business document classification and structured extraction."""

import logging
from typing import List, Optional, Tuple

from ..models.business import BusinessDocumentAnalysis
from ..models.enums import DocumentType
from .contracts import extract_contract_terms
from .financial import extract_financial_data
from .patterns import (
    CATEGORY_PATTERNS,
    CONTRACT_DOCUMENT_TYPES,
    FINANCIAL_DOCUMENT_TYPES,
    CategoryPattern,
)
from .signals import (
    check_compliance,
    extract_action_items,
    extract_business_metrics,
    identify_risks,
)

logger = logging.getLogger(__name__)


class BusinessDocumentClassifier:
    """
    Keyword-scored document classifier.

    Each category scores the number of its dictionary phrases found in the
    lowercased text. The highest score wins; equal scores resolve to the
    earlier category in the dictionary order, and a text that scores zero
    everywhere is UNKNOWN.
    """

    def __init__(self, patterns: Optional[List[CategoryPattern]] = None):
        self._patterns = patterns if patterns is not None else CATEGORY_PATTERNS

    def score(self, text: str) -> List[Tuple[DocumentType, int]]:
        """Per-category scores in tie-break order."""
        lowered = text.lower()
        return [(p.document_type, p.score(lowered)) for p in self._patterns]

    def classify(self, text: str) -> DocumentType:
        best_type, best_score = DocumentType.UNKNOWN, 0
        for document_type, score in self.score(text):
            if score > best_score:
                best_type, best_score = document_type, score
        return best_type

    def analyze(self, text: str) -> BusinessDocumentAnalysis:
        """
        Classify a text and run the extraction for its type.

        Financial figures are extracted for financial reports, invoices and
        receipts; contract terms for contracts and legal documents. Metrics,
        risks, compliance checks and action items are scanned for every text.
        """
        document_type = self.classify(text)

        financial_data = None
        contract_terms = None
        if document_type in FINANCIAL_DOCUMENT_TYPES:
            financial_data = extract_financial_data(text)
        elif document_type in CONTRACT_DOCUMENT_TYPES:
            contract_terms = extract_contract_terms(text)

        analysis = BusinessDocumentAnalysis(
            document_type=document_type,
            financial_data=financial_data,
            contract_terms=contract_terms,
            business_metrics=extract_business_metrics(text),
            risk_indicators=identify_risks(text),
            compliance_checks=check_compliance(text),
            action_items=extract_action_items(text),
        )

        logger.debug(
            f"Classified document as {document_type.value} with "
            f"{len(analysis.risk_indicators)} risk indicators"
        )
        return analysis
