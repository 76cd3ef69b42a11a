"""Archive reader interface for the document text analytics system."""

from abc import ABC, abstractmethod
from typing import List, Optional


class ArchiveReader(ABC):
    """
    Abstract interface over a ZIP-structured container.

    Readers are context managers; ``close`` releases the underlying file.
    """

    @abstractmethod
    def names(self) -> List[str]:
        """Return the internal paths of every entry in the archive."""
        pass

    @abstractmethod
    def read(self, name: str) -> Optional[bytes]:
        """
        Read the full content of an entry.

        Args:
            name: Internal path of the entry.

        Returns:
            The entry bytes, or None if the archive has no such entry.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> "ArchiveReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
