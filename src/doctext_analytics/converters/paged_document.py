"""PDF text extraction through a page renderer."""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

import pdfplumber
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from ..interfaces.converter import IDocumentConverter
from ..interfaces.paged_document import DocumentPage, PagedDocument
from .exceptions import ConversionError
from .temp_files import scoped_temp_file

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = (
    "No text content found in PDF. "
    "The PDF might contain only images or scanned content."
)


class _TextPage(DocumentPage):
    """Page whose text is produced lazily by an extraction callable."""

    def __init__(self, extract: Callable[[], Optional[str]]):
        self._extract = extract

    @property
    def text(self) -> Optional[str]:
        return self._extract()


def _validate_pdf(path: Union[str, Path]) -> PdfReader:
    """Open the file with PyPDF2 to reject corrupted or encrypted PDFs early."""
    try:
        reader = PdfReader(str(path))
        if reader.is_encrypted:
            raise PdfReadError("file has not been decrypted")
        len(reader.pages)
        return reader
    except PdfReadError as e:
        raise ConversionError(
            message="Could not open PDF document",
            file_path=str(path),
            location="file header",
            details={"original_error": str(e)},
        )
    except Exception as e:
        raise ConversionError(
            message=f"Failed to open PDF: {str(e)}",
            file_path=str(path),
            details={"original_error": str(e)},
        )


class PdfPlumberDocument(PagedDocument):
    """
    PagedDocument backed by pdfplumber.

    The file is validated with PyPDF2 first; pdfplumber then provides the
    layout-aware text of each page.
    """

    def __init__(self, path: Union[str, Path]):
        _validate_pdf(path)
        try:
            self._pdf = pdfplumber.open(str(path))
        except Exception as e:
            raise ConversionError(
                message="Could not open PDF document",
                file_path=str(path),
                details={"original_error": str(e)},
            )

    @property
    def page_count(self) -> int:
        return len(self._pdf.pages)

    def page(self, index: int) -> Optional[DocumentPage]:
        if not 0 <= index < self.page_count:
            return None
        return _TextPage(self._pdf.pages[index].extract_text)

    def close(self) -> None:
        self._pdf.close()


class PyPDF2Document(PagedDocument):
    """PagedDocument backed by PyPDF2 alone."""

    def __init__(self, path: Union[str, Path]):
        self._reader = _validate_pdf(path)

    @property
    def page_count(self) -> int:
        return len(self._reader.pages)

    def page(self, index: int) -> Optional[DocumentPage]:
        if not 0 <= index < self.page_count:
            return None
        return _TextPage(self._reader.pages[index].extract_text)

    def close(self) -> None:
        pass


PDF_BACKENDS: dict[str, Callable[[Path], PagedDocument]] = {
    "pdfplumber": PdfPlumberDocument,
    "pypdf2": PyPDF2Document,
}


class PagedDocumentTextExtractor(IDocumentConverter):
    """
    Concatenates the text of every page of a PDF.

    Each page that has a text layer contributes its text followed by a
    blank line. A document without any text yields NO_TEXT_MESSAGE rather
    than an empty string.
    """

    def __init__(
        self,
        document_opener: Optional[Callable[[Path], PagedDocument]] = None,
        temp_dir: Optional[Union[str, Path]] = None,
    ):
        self._open_document = document_opener or PdfPlumberDocument
        self._temp_dir = temp_dir

    def convert(self, data: bytes) -> str:
        """
        Extract plain text from the bytes of a PDF.

        Raises:
            ConversionError: If the renderer cannot open the document.
        """
        try:
            with scoped_temp_file(data, "document.pdf", self._temp_dir) as path:
                with self._open_document(path) as document:
                    text = self._extract_pages(document)
        except ConversionError:
            raise
        except Exception as e:
            raise ConversionError(
                message=f"Failed to extract PDF text: {str(e)}",
                details={"original_error": str(e)},
            )

        result = text.strip()
        logger.info(f"PDF text extraction completed, result length: {len(result)}")
        if not result:
            return NO_TEXT_MESSAGE
        return result

    def _extract_pages(self, document: PagedDocument) -> str:
        parts = []
        page_count = document.page_count
        logger.debug(f"PDF has {page_count} pages")
        for index in range(page_count):
            page = document.page(index)
            if page is None:
                continue
            page_text = page.text
            if page_text is not None:
                parts.append(page_text + "\n\n")
            else:
                logger.debug(f"No text found on page {index + 1}")
        return "".join(parts)
