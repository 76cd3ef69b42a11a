"""Entity extraction from tagged words and pattern scans."""

import re
from typing import Dict, List, Optional

from ..interfaces.tagger import NamedEntityTagger
from ..models.analysis import Entity
from ..models.enums import EntityType
from .taggers import SpacyEntityTagger

NUMBER_PATTERN = re.compile(r"\b\d+(?:\.\d+)?\b")
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
URL_PATTERN = re.compile(r"https?://[^\s]+")

TAG_TYPE_MAP: Dict[str, EntityType] = {
    "PERSON": EntityType.PERSON,
    "PER": EntityType.PERSON,
    "ORG": EntityType.ORGANIZATION,
    "GPE": EntityType.LOCATION,
    "LOC": EntityType.LOCATION,
}

TAGGED_CONFIDENCE = 0.8
NUMBER_CONFIDENCE = 0.9
EMAIL_CONFIDENCE = 0.95
URL_CONFIDENCE = 0.95


def count_occurrences(substring: str, text: str) -> int:
    """Case-insensitive count of non-overlapping occurrences."""
    if not substring:
        return 0
    return len(re.findall(re.escape(substring), text, flags=re.IGNORECASE))


def map_tag(label: str) -> EntityType:
    """Map a tagger label to an entity type; unknown labels become PERSON."""
    return TAG_TYPE_MAP.get(label.upper(), EntityType.PERSON)


class EntityExtractor:
    """
    Collects entities from four independent sources.

    Tagged names come first, then numbers, emails and URLs. The same span
    may be reported by more than one source; results are not merged.
    """

    def __init__(self, tagger: Optional[NamedEntityTagger] = None):
        self.tagger = tagger or SpacyEntityTagger()

    def extract(self, text: str) -> List[Entity]:
        entities = self._extract_tagged(text)
        entities.extend(self._scan(text, NUMBER_PATTERN, EntityType.NUMBER, NUMBER_CONFIDENCE))
        entities.extend(self._scan(text, EMAIL_PATTERN, EntityType.EMAIL, EMAIL_CONFIDENCE))
        entities.extend(self._scan(text, URL_PATTERN, EntityType.URL, URL_CONFIDENCE))
        return entities

    def _extract_tagged(self, text: str) -> List[Entity]:
        return [
            Entity(
                name=token.text,
                type=map_tag(token.label),
                confidence=TAGGED_CONFIDENCE,
                occurrences=count_occurrences(token.text, text),
            )
            for token in self.tagger.tag(text)
        ]

    @staticmethod
    def _scan(
        text: str,
        pattern: "re.Pattern[str]",
        entity_type: EntityType,
        confidence: float,
    ) -> List[Entity]:
        return [
            Entity(
                name=match.group(0),
                type=entity_type,
                confidence=confidence,
                occurrences=count_occurrences(match.group(0), text),
            )
            for match in pattern.finditer(text)
        ]
