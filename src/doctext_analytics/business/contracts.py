"""Contract party and key-term extraction."""

import re
from typing import List

from ..models.business import ContractTerm, ContractTerms
from ..models.enums import TermImportance

_PARTY_NAME = r"([A-Z][a-z]+\s+[A-Z][a-z]+(?:\s+Inc\.|\s+LLC|\s+Ltd\.)?)"

PARTY_PATTERNS = [
    re.compile(r"between\s+" + _PARTY_NAME),
    re.compile(r"party\s+" + _PARTY_NAME),
]

KEY_TERM_KEYWORDS = [
    "confidentiality", "non-compete", "termination", "liability",
    "indemnification", "governing law", "dispute resolution", "force majeure",
]


def find_parties(text: str) -> List[str]:
    """Distinct capitalized two-word names following "between" or "party"."""
    parties: List[str] = []
    for pattern in PARTY_PATTERNS:
        for match in pattern.finditer(text):
            party = match.group(1)
            if party not in parties:
                parties.append(party)
    return parties


def find_key_terms(text: str) -> List[ContractTerm]:
    lowered = text.lower()
    return [
        ContractTerm(
            term=keyword.title(),
            description="Found in contract",
            importance=TermImportance.IMPORTANT,
        )
        for keyword in KEY_TERM_KEYWORDS
        if keyword in lowered
    ]


def extract_contract_terms(text: str) -> ContractTerms:
    """
    Build ContractTerms from parties and key-term keywords.

    Dates, value, obligations and penalties are left empty.
    """
    return ContractTerms(
        parties=find_parties(text),
        key_terms=find_key_terms(text),
    )
