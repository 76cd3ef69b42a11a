"""Text statistics calculation."""

import re

from ..models.analysis import TextStatistics
from .text_utils import split_words

SENTENCE_DELIMITERS = re.compile(r"[.!?]")
PARAGRAPH_SEPARATOR = "\n\n"
DEFAULT_WORDS_PER_MINUTE = 200.0


def count_sentences(text: str) -> int:
    """
    Count the segments between sentence delimiters.

    Every ``.``, ``!`` and ``?`` is its own split point, so ``"Wait!!"``
    holds an empty segment between the two marks and it is counted. The
    segment after a final terminal mark is not a sentence and is dropped.
    """
    segments = SENTENCE_DELIMITERS.split(text)
    if not segments[-1].strip():
        segments.pop()
    return len(segments)


def count_paragraphs(text: str) -> int:
    if not text:
        return 0
    return len(text.split(PARAGRAPH_SEPARATOR))


def calculate_statistics(
    text: str,
    words_per_minute: float = DEFAULT_WORDS_PER_MINUTE,
) -> TextStatistics:
    """
    Compute word, character, sentence and paragraph counts for a text.

    Average word length is characters per word (whitespace included), and
    reading time is words divided by ``words_per_minute``.
    """
    words = split_words(text)
    word_count = len(words)
    character_count = len(text)
    return TextStatistics(
        word_count=word_count,
        character_count=character_count,
        sentence_count=count_sentences(text),
        paragraph_count=count_paragraphs(text),
        average_word_length=character_count / word_count if word_count else 0.0,
        reading_time=word_count / words_per_minute,
    )
