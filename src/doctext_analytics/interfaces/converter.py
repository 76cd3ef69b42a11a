"""Converter interface for the document text analytics system."""

from abc import ABC, abstractmethod


class IDocumentConverter(ABC):
    """
    Abstract interface for a single conversion strategy.

    Implementations turn the raw bytes of one document format into
    plain text.
    """

    @abstractmethod
    def convert(self, data: bytes) -> str:
        """
        Convert raw document bytes to plain text.

        Args:
            data: The document content.

        Returns:
            The extracted text.

        Raises:
            ConverterError: If the strategy cannot produce text.
        """
        pass
