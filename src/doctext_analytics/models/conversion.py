"""Conversion result model for the document text analytics system."""

from dataclasses import dataclass
from typing import Optional

from .enums import FileType


@dataclass(frozen=True)
class ConversionResult:
    """
    Plain text produced by a single conversion call.

    Immutable and owned by the caller. ``file_type`` is None when the
    input was routed to the generic byte decoder.
    """
    text: str
    file_type: Optional[FileType] = None
    source_name: Optional[str] = None
    byte_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()
