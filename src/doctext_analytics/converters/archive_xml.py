"""Word document (.docx) text extraction over the raw package XML."""

import logging
import re
import zipfile
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..interfaces.archive import ArchiveReader
from ..interfaces.converter import IDocumentConverter
from .exceptions import ConversionError
from .temp_files import scoped_temp_file

logger = logging.getLogger(__name__)


class ZipArchiveReader(ArchiveReader):
    """ArchiveReader backed by the standard library zipfile module."""

    def __init__(self, path: Union[str, Path]):
        try:
            self._zip = zipfile.ZipFile(path)
        except (zipfile.BadZipFile, OSError) as e:
            raise ConversionError(
                message="Could not open Word document archive",
                file_path=str(path),
                location="file header",
                details={"original_error": str(e)},
            )

    def names(self) -> List[str]:
        return self._zip.namelist()

    def read(self, name: str) -> Optional[bytes]:
        try:
            info = self._zip.getinfo(name)
        except KeyError:
            return None
        return self._zip.read(info)

    def close(self) -> None:
        self._zip.close()


class ArchiveXmlTextExtractor(IDocumentConverter):
    """
    Extracts the body text of a Word document.

    Reads ``word/document.xml`` from the package and pulls the text runs
    out of it with regular expressions rather than an XML parser, so a
    malformed body still yields whatever text it carries.
    """

    DOCUMENT_PART = "word/document.xml"

    NAMESPACE_PATTERNS = [
        re.compile(rf'xmlns:{prefix}="[^"]*"')
        for prefix in (
            "w", "r", "wp", "a", "pic", "wp14", "w14", "w15", "w16",
            "w16cex", "w16cid", "w16se", "w16sdtdh", "w16dt",
        )
    ]

    TEXT_RUN_PATTERN = re.compile(r"<w:t[^>]*>([^<]*)</w:t>")

    # Only used when the document has no <w:t> runs at all.
    FALLBACK_PATTERNS = [
        re.compile(r">([^<]{3,})<"),
        re.compile(r'"([^"]{5,})"'),
        re.compile(r"'([^']{5,})'"),
    ]

    FALLBACK_MIN_LENGTH = 5

    FALLBACK_DENYLIST = (
        "xmlns", "<?xml", "image", "drawing", "picture", "graphic", "shape",
        "chart", "object", "embed", "oleObject", "binData", "base64", "rId",
        "http://", "https://", ".jpg", ".jpeg", ".png", ".gif", ".bmp",
        ".tiff", ".svg",
    )

    XML_ENTITIES = [
        ("&amp;", "&"),
        ("&lt;", "<"),
        ("&gt;", ">"),
        ("&quot;", '"'),
        ("&apos;", "'"),
    ]

    WHITESPACE_PATTERN = re.compile(r"\s+")

    def __init__(
        self,
        archive_opener: Optional[Callable[[Path], ArchiveReader]] = None,
        temp_dir: Optional[Union[str, Path]] = None,
    ):
        self._open_archive = archive_opener or ZipArchiveReader
        self._temp_dir = temp_dir

    def convert(self, data: bytes) -> str:
        """
        Extract plain text from the bytes of a .docx package.

        Raises:
            ConversionError: If the archive cannot be opened, has no
                document part, or the part is not valid UTF-8.
        """
        try:
            with scoped_temp_file(data, "document.docx", self._temp_dir) as path:
                with self._open_archive(path) as archive:
                    xml_data = archive.read(self.DOCUMENT_PART)
                    available_parts = archive.names() if xml_data is None else []
        except ConversionError:
            raise
        except Exception as e:
            raise ConversionError(
                message=f"Failed to read Word document: {str(e)}",
                details={"original_error": str(e)},
            )

        if xml_data is None:
            raise ConversionError(
                message="Could not find document.xml in Word document",
                location=self.DOCUMENT_PART,
                details={"available_parts": available_parts},
            )
        logger.debug(f"Extracted XML data, size: {len(xml_data)} bytes")

        try:
            xml_string = xml_data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConversionError(
                message="Could not read document.xml as UTF-8",
                location=self.DOCUMENT_PART,
                details={"original_error": str(e)},
            )

        return self.extract_text(xml_string)

    def extract_text(self, xml_string: str) -> str:
        """Turn the document XML into normalized plain text."""
        clean_xml = self.strip_namespaces(xml_string)

        extracted = self._extract_text_runs(clean_xml)
        if not extracted.strip():
            logger.debug("No <w:t> runs found, trying alternative patterns")
            extracted = self._extract_fallback_text(clean_xml)

        result = extracted.strip()
        for entity, literal in self.XML_ENTITIES:
            result = result.replace(entity, literal)
        result = self.WHITESPACE_PATTERN.sub(" ", result).strip()

        logger.info(f"XML parsing completed, result length: {len(result)}")
        return result

    @classmethod
    def strip_namespaces(cls, xml_string: str) -> str:
        """Remove the namespace declarations of the known Word prefixes."""
        for pattern in cls.NAMESPACE_PATTERNS:
            xml_string = pattern.sub("", xml_string)
        return xml_string

    def _extract_text_runs(self, xml_string: str) -> str:
        parts = []
        for match in self.TEXT_RUN_PATTERN.finditer(xml_string):
            text = match.group(1)
            if text.strip():
                parts.append(text + " ")
        return "".join(parts)

    def _extract_fallback_text(self, xml_string: str) -> str:
        parts = []
        for pattern in self.FALLBACK_PATTERNS:
            for match in pattern.finditer(xml_string):
                text = match.group(1).strip()
                if len(text) > self.FALLBACK_MIN_LENGTH and not self._is_denied(text):
                    parts.append(text + " ")
        return "".join(parts)

    def _is_denied(self, text: str) -> bool:
        return any(token in text for token in self.FALLBACK_DENYLIST)
