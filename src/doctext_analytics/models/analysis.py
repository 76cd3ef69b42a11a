"""Text analytics data models for the document text analytics system."""

from dataclasses import dataclass, field
from typing import List, Optional

from .enums import EntityType, SentimentLabel


@dataclass(frozen=True)
class TextStatistics:
    """
    Basic counts derived from a text.

    Recomputed on every call; has no lifecycle of its own.
    """
    word_count: int = 0
    character_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    average_word_length: float = 0.0
    reading_time: float = 0.0  # minutes


@dataclass(frozen=True)
class Entity:
    """
    A named or pattern-matched span found in a text.

    ``occurrences`` is the case-insensitive count of ``name`` in the
    whole source text.
    """
    name: str
    type: EntityType
    confidence: float
    occurrences: int


@dataclass(frozen=True)
class SentimentAnalysis:
    """Lexicon-based polarity of a text."""
    score: float = 0.0  # -1.0 to 1.0
    label: SentimentLabel = SentimentLabel.NEUTRAL
    confidence: float = 0.0


@dataclass(frozen=True)
class Keyword:
    """A frequent non-stop-word with importance relative to the top keyword."""
    word: str
    frequency: int
    importance: float


@dataclass(frozen=True)
class DataPoint:
    """Labelled numeric value consumed by chart renderers."""
    label: str
    value: float
    category: Optional[str] = None


@dataclass
class ExtractedData:
    """
    Result of the analytics pass over a converted text.

    Statistics, entities, sentiment and keywords are computed
    independently from the same text.
    """
    text: str
    statistics: TextStatistics = field(default_factory=TextStatistics)
    entities: List[Entity] = field(default_factory=list)
    sentiment: SentimentAnalysis = field(default_factory=SentimentAnalysis)
    keywords: List[Keyword] = field(default_factory=list)
    data_points: List[DataPoint] = field(default_factory=list)

    def entities_of_type(self, entity_type: EntityType) -> List[Entity]:
        """Return the entities of a single type, in extraction order."""
        return [e for e in self.entities if e.type == entity_type]
