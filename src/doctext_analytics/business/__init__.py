"""Business document classification for the document text analytics system."""

from .classifier import BusinessDocumentClassifier
from .contracts import extract_contract_terms
from .financial import extract_financial_data, parse_amount
from .patterns import CATEGORY_PATTERNS, CategoryPattern
from .signals import (
    check_compliance,
    extract_action_items,
    extract_business_metrics,
    identify_risks,
)

__all__ = [
    "BusinessDocumentClassifier",
    "extract_contract_terms",
    "extract_financial_data",
    "parse_amount",
    "CATEGORY_PATTERNS",
    "CategoryPattern",
    "check_compliance",
    "extract_action_items",
    "extract_business_metrics",
    "identify_risks",
]
