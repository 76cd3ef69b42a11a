"""Paginated document interface for the document text analytics system."""

from abc import ABC, abstractmethod
from typing import Optional


class DocumentPage(ABC):
    """A single page of a paginated document."""

    @property
    @abstractmethod
    def text(self) -> Optional[str]:
        """Extracted page text, or None if the page carries no text layer."""
        pass


class PagedDocument(ABC):
    """
    Abstract interface over a page renderer.

    Documents are context managers; ``close`` releases the renderer.
    """

    @property
    @abstractmethod
    def page_count(self) -> int:
        pass

    @abstractmethod
    def page(self, index: int) -> Optional[DocumentPage]:
        """Return the page at a zero-based index, or None if unavailable."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> "PagedDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
