"""Lexicon-based sentiment scoring."""

from typing import AbstractSet, Optional

from ..models.analysis import SentimentAnalysis
from ..models.enums import SentimentLabel
from .lexicons import NEGATIVE_WORDS, POSITIVE_WORDS
from .text_utils import normalized_words


class SentimentScorer:
    """
    Scores polarity by counting positive and negative lexicon words.

    The score is ``(positive - negative) / (positive + negative)``, or 0.0
    when the text has no lexicon words.
    """

    def __init__(
        self,
        positive_words: Optional[AbstractSet[str]] = None,
        negative_words: Optional[AbstractSet[str]] = None,
        threshold: float = 0.3,
    ):
        self.positive_words = frozenset(positive_words) if positive_words is not None else POSITIVE_WORDS
        self.negative_words = frozenset(negative_words) if negative_words is not None else NEGATIVE_WORDS
        self.threshold = threshold

    def score(self, text: str) -> SentimentAnalysis:
        positive = 0
        negative = 0
        for word in normalized_words(text):
            if word in self.positive_words:
                positive += 1
            elif word in self.negative_words:
                negative += 1

        total = positive + negative
        score = (positive - negative) / total if total else 0.0
        return SentimentAnalysis(
            score=score,
            label=self.label_for(score),
            confidence=min(abs(score) * 2, 1.0),
        )

    def label_for(self, score: float) -> SentimentLabel:
        if score > self.threshold:
            return SentimentLabel.POSITIVE
        if score < -self.threshold:
            return SentimentLabel.NEGATIVE
        return SentimentLabel.NEUTRAL
