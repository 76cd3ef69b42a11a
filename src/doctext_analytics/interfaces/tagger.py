"""Named-entity tagger interface for the document text analytics system."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class TaggedToken:
    """A word-level span labelled with a name-type category (e.g. "PERSON")."""
    text: str
    label: str


class NamedEntityTagger(ABC):
    """
    Abstract interface for word-level named-entity tagging.

    Implementations return only the words that carry a name-type label,
    in text order.
    """

    @abstractmethod
    def tag(self, text: str) -> List[TaggedToken]:
        """
        Tag the words of a text.

        Args:
            text: The text to tag.

        Returns:
            Tagged words in the order they appear.
        """
        pass
