"""Text analytics components for the document text analytics system."""

from .data_points import extract_data_points
from .entities import EntityExtractor, count_occurrences
from .keywords import KeywordExtractor
from .sentiment import SentimentScorer
from .serialization import AnalysisSerializer, to_jsonable
from .statistics import calculate_statistics
from .taggers import SpacyEntityTagger

__all__ = [
    "extract_data_points",
    "EntityExtractor",
    "count_occurrences",
    "KeywordExtractor",
    "SentimentScorer",
    "AnalysisSerializer",
    "to_jsonable",
    "calculate_statistics",
    "SpacyEntityTagger",
]
