"""Chart-ready data points derived from a text."""

from typing import Dict, List

from ..models.analysis import DataPoint
from .statistics import SENTENCE_DELIMITERS
from .text_utils import split_words

WORD_FREQUENCY_CATEGORY = "Word Frequency"
SENTENCE_LENGTH_CATEGORY = "Sentence Length"
MAX_POINTS = 10


def word_frequency_points(text: str, limit: int = MAX_POINTS) -> List[DataPoint]:
    """Most frequent raw words, grouped case-insensitively, no stop-word filter."""
    counts: Dict[str, int] = {}
    for word in split_words(text):
        key = word.lower()
        counts[key] = counts.get(key, 0) + 1
    ranked = sorted(counts.items(), key=lambda item: -item[1])[:limit]
    return [
        DataPoint(label=word, value=float(count), category=WORD_FREQUENCY_CATEGORY)
        for word, count in ranked
    ]


def sentence_length_points(text: str, limit: int = MAX_POINTS) -> List[DataPoint]:
    """Word counts of the first sentence segments."""
    segments = SENTENCE_DELIMITERS.split(text)[:limit] if text else []
    return [
        DataPoint(
            label=f"Sentence {index}",
            value=float(len(split_words(segment))),
            category=SENTENCE_LENGTH_CATEGORY,
        )
        for index, segment in enumerate(segments, start=1)
    ]


def extract_data_points(text: str) -> List[DataPoint]:
    return word_frequency_points(text) + sentence_length_points(text)
