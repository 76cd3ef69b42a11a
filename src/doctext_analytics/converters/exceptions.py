"""Custom exceptions for document conversion."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ConverterError(Exception):
    """
    Base exception for document conversion errors.

    Carries the file path, a location inside the document and additional
    context for logging and user feedback.

    Attributes:
        message: Human-readable error description.
        file_path: Path or name of the source that caused the error.
        location: Specific location within the source (archive entry, page).
        details: Additional error details.
    """
    message: str
    file_path: Optional[str] = None
    location: Optional[str] = None
    details: Optional[dict] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message]
        if self.file_path:
            parts.append(f"File: {self.file_path}")
        if self.location:
            parts.append(f"Location: {self.location}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "file_path": self.file_path,
            "location": self.location,
            "details": self.details,
        }


@dataclass
class UnsupportedFileTypeError(ConverterError):
    """
    Raised when an extension is outside the recognized set.

    Only enforced by callers that opt into strict file types; the
    dispatcher itself routes unknown extensions to the generic decoder.
    """

    def get_supported_formats(self) -> list[str]:
        """Return list of supported formats."""
        return self.details.get("supported_formats", [".docx", ".pdf", ".md"])


@dataclass
class FileReadError(ConverterError):
    """Raised when the underlying byte source cannot be read."""


@dataclass
class ConversionError(ConverterError):
    """
    Raised when a container document cannot be opened or walked.

    Covers unreadable archives, a missing internal part, inner XML that is
    not UTF-8, and PDFs the renderer cannot open.
    """

    def get_recovery_suggestions(self) -> list[str]:
        """Return suggestions for recovering from this error."""
        suggestions = [
            "Try opening the file in its native application to verify it's not corrupted",
            "Check if the file is password-protected or encrypted",
            "Try re-downloading or re-exporting the file",
        ]
        if self.file_path and self.file_path.endswith(".pdf"):
            suggestions.append("For PDFs, try using a PDF repair tool")
        elif self.file_path and self.file_path.endswith(".docx"):
            suggestions.append("For Word documents, try opening in recovery mode")
        return suggestions


@dataclass
class EncodingError(ConverterError):
    """Raised when a text-only source fails every candidate encoding."""
    message: str = "Could not read file with any supported encoding"
