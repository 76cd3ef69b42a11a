"""Stop-word filtered keyword ranking."""

from typing import AbstractSet, Dict, List, Optional

from ..models.analysis import Keyword
from .lexicons import STOP_WORDS
from .text_utils import split_words, strip_punctuation

MIN_KEYWORD_LENGTH = 3


class KeywordExtractor:
    """
    Ranks words by frequency after dropping short words and stop words.

    Ties keep the order in which words were first seen.
    """

    def __init__(self, stop_words: Optional[AbstractSet[str]] = None, limit: int = 20):
        self.stop_words = frozenset(stop_words) if stop_words is not None else STOP_WORDS
        self.limit = limit

    def extract(self, text: str) -> List[Keyword]:
        frequency: Dict[str, int] = {}
        for word in split_words(text.lower()):
            if len(word) < MIN_KEYWORD_LENGTH:
                continue
            word = strip_punctuation(word)
            if len(word) < MIN_KEYWORD_LENGTH or word in self.stop_words:
                continue
            frequency[word] = frequency.get(word, 0) + 1

        ranked = sorted(frequency.items(), key=lambda item: -item[1])
        if not ranked:
            return []

        top_frequency = ranked[0][1]
        return [
            Keyword(word=word, frequency=count, importance=count / top_frequency)
            for word, count in ranked[:self.limit]
        ]
