"""Text analytics engine.

Runs the statistics, entity, sentiment and keyword passes over one text
and, on request, the business document classifier.
"""

import logging
from typing import Optional

from .analytics.data_points import extract_data_points
from .analytics.entities import EntityExtractor
from .analytics.keywords import KeywordExtractor
from .analytics.sentiment import SentimentScorer
from .analytics.statistics import calculate_statistics
from .analytics.taggers import SpacyEntityTagger
from .business.classifier import BusinessDocumentClassifier
from .config.models import AnalyticsConfiguration
from .interfaces.tagger import NamedEntityTagger
from .models.analysis import ExtractedData
from .models.business import BusinessDocumentAnalysis
from .performance import timed_operation

logger = logging.getLogger(__name__)


class TextAnalyticsEngine:
    """
    Analytics over converted text.

    Holds only its configured components; every call is a pure function
    of the input text, so one engine can serve concurrent callers.
    """

    def __init__(
        self,
        configuration: Optional[AnalyticsConfiguration] = None,
        tagger: Optional[NamedEntityTagger] = None,
        classifier: Optional[BusinessDocumentClassifier] = None,
    ):
        self.configuration = configuration or AnalyticsConfiguration()
        cfg = self.configuration
        self.entity_extractor = EntityExtractor(
            tagger or SpacyEntityTagger(model_name=cfg.spacy_model)
        )
        self.sentiment_scorer = SentimentScorer(
            positive_words=cfg.positive_words,
            negative_words=cfg.negative_words,
            threshold=cfg.sentiment_threshold,
        )
        self.keyword_extractor = KeywordExtractor(
            stop_words=cfg.stop_words,
            limit=cfg.keyword_limit,
        )
        self.classifier = classifier or BusinessDocumentClassifier()

    @timed_operation("extract_data")
    def extract_data(self, text: str) -> ExtractedData:
        """Run statistics, entity, sentiment and keyword extraction."""
        data = ExtractedData(
            text=text,
            statistics=calculate_statistics(text, self.configuration.words_per_minute),
            entities=self.entity_extractor.extract(text),
            sentiment=self.sentiment_scorer.score(text),
            keywords=self.keyword_extractor.extract(text),
            data_points=extract_data_points(text),
        )
        logger.debug(
            f"Extracted {len(data.entities)} entities and "
            f"{len(data.keywords)} keywords from {data.statistics.word_count} words"
        )
        return data

    @timed_operation("analyze_business_document")
    def analyze_business_document(self, text: str) -> BusinessDocumentAnalysis:
        """Classify the text and run the per-type business extraction."""
        return self.classifier.analyze(text)
