"""Conversion dispatcher that routes bytes to a format-specific strategy."""

import logging
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from ..interfaces.converter import IDocumentConverter
from ..models.conversion import ConversionResult
from ..models.enums import FileType
from .archive_xml import ArchiveXmlTextExtractor
from .encoding import EncodingFallbackDecoder
from .exceptions import FileReadError, UnsupportedFileTypeError
from .markup import MarkupPassthroughDecoder
from .paged_document import PagedDocumentTextExtractor

logger = logging.getLogger(__name__)


class ConversionDispatcher:
    """
    Main converter that delegates to format-specific strategies.

    Word packages, PDFs and Markdown each have a dedicated strategy;
    every other extension goes to the generic encoding-fallback decoder,
    so unknown inputs always produce some text.
    """

    def __init__(
        self,
        encodings: Optional[Sequence[str]] = None,
        archive_extractor: Optional[IDocumentConverter] = None,
        paged_extractor: Optional[IDocumentConverter] = None,
        markup_decoder: Optional[IDocumentConverter] = None,
        generic_decoder: Optional[IDocumentConverter] = None,
        temp_dir: Optional[Union[str, Path]] = None,
    ):
        self._strategies: Dict[FileType, IDocumentConverter] = {
            FileType.DOCX: archive_extractor or ArchiveXmlTextExtractor(temp_dir=temp_dir),
            FileType.PDF: paged_extractor or PagedDocumentTextExtractor(temp_dir=temp_dir),
            FileType.MARKDOWN: markup_decoder or MarkupPassthroughDecoder(encodings),
        }
        self._generic_decoder = generic_decoder or EncodingFallbackDecoder(encodings)

    def convert(self, data: bytes, extension: str) -> str:
        """
        Convert document bytes to plain text.

        Args:
            data: The document content.
            extension: File-extension hint, with or without a leading dot.

        Returns:
            The extracted text.

        Raises:
            ConversionError: If a Word or PDF container cannot be walked.
            EncodingError: If a Markdown source fails every encoding.
        """
        file_type = FileType.from_extension(extension)
        if file_type is None:
            logger.info(f"Unrecognized extension '{extension}', trying text conversion")
            return self._generic_decoder.convert(data)

        logger.info(f"Detected {file_type.display_name}, size: {len(data)} bytes")
        return self._strategies[file_type].convert(data)

    def convert_bytes(
        self,
        data: bytes,
        extension: str,
        source_name: Optional[str] = None,
    ) -> ConversionResult:
        """Convert bytes and wrap the text in a ConversionResult."""
        text = self.convert(data, extension)
        return ConversionResult(
            text=text,
            file_type=FileType.from_extension(extension),
            source_name=source_name,
            byte_count=len(data),
        )

    def convert_file(self, file_path: Union[str, Path]) -> ConversionResult:
        """
        Read a file and convert it according to its suffix.

        Raises:
            FileReadError: If the file cannot be read.
        """
        path = Path(file_path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FileReadError(
                message=f"Error reading file: {e.strerror or str(e)}",
                file_path=str(file_path),
                details={"original_error": str(e)},
            )
        logger.debug(f"File data loaded, size: {len(data)} bytes")
        return self.convert_bytes(data, path.suffix, source_name=path.name)

    @staticmethod
    def is_supported(extension: str) -> bool:
        """Check whether an extension has a dedicated strategy."""
        return FileType.from_extension(extension) is not None

    @staticmethod
    def get_supported_formats() -> list[str]:
        """Return list of extensions with a dedicated strategy."""
        return [f".{file_type.value}" for file_type in FileType]

    def require_supported(self, extension: str, file_path: Optional[str] = None) -> FileType:
        """
        Return the FileType for an extension or reject it.

        Raises:
            UnsupportedFileTypeError: If the extension is not recognized.
        """
        file_type = FileType.from_extension(extension)
        if file_type is None:
            raise UnsupportedFileTypeError(
                message=f"Unsupported file format: {extension}",
                file_path=file_path,
                location="file extension",
                details={"supported_formats": self.get_supported_formats()},
            )
        return file_type
