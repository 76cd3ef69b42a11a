"""Token helpers shared by the analytics components."""

import unicodedata
from typing import List


def split_words(text: str) -> List[str]:
    """Split on any run of whitespace, dropping empty tokens."""
    return text.split()


def strip_punctuation(token: str) -> str:
    """Trim Unicode punctuation characters from both ends of a token."""
    start, end = 0, len(token)
    while start < end and unicodedata.category(token[start]).startswith("P"):
        start += 1
    while end > start and unicodedata.category(token[end - 1]).startswith("P"):
        end -= 1
    return token[start:end]


def normalized_words(text: str) -> List[str]:
    """Lowercased whitespace tokens with surrounding punctuation removed."""
    return [strip_punctuation(word) for word in split_words(text.lower())]
