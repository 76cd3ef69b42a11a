"""Document converters for the document text analytics system."""

from .archive_xml import ArchiveXmlTextExtractor, ZipArchiveReader
from .dispatcher import ConversionDispatcher
from .encoding import DEFAULT_ENCODINGS, EncodingFallbackDecoder, to_hex
from .exceptions import (
    ConversionError,
    ConverterError,
    EncodingError,
    FileReadError,
    UnsupportedFileTypeError,
)
from .markup import MarkupPassthroughDecoder
from .paged_document import (
    NO_TEXT_MESSAGE,
    PDF_BACKENDS,
    PagedDocumentTextExtractor,
    PdfPlumberDocument,
    PyPDF2Document,
)
from .temp_files import scoped_temp_file

__all__ = [
    "ArchiveXmlTextExtractor",
    "ZipArchiveReader",
    "ConversionDispatcher",
    "DEFAULT_ENCODINGS",
    "EncodingFallbackDecoder",
    "to_hex",
    "ConversionError",
    "ConverterError",
    "EncodingError",
    "FileReadError",
    "UnsupportedFileTypeError",
    "MarkupPassthroughDecoder",
    "NO_TEXT_MESSAGE",
    "PDF_BACKENDS",
    "PagedDocumentTextExtractor",
    "PdfPlumberDocument",
    "PyPDF2Document",
    "scoped_temp_file",
]
