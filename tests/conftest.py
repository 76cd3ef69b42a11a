"""Shared fixtures for the document text analytics tests."""

import io
import zipfile
from typing import List, Optional

import pytest

from doctext_analytics.interfaces.tagger import NamedEntityTagger, TaggedToken


class StubTagger(NamedEntityTagger):
    """Tagger that reports a fixed set of words wherever they appear."""

    def __init__(self, labels: Optional[dict] = None):
        self.labels = labels or {}
        self.calls: List[str] = []

    def tag(self, text: str) -> List[TaggedToken]:
        self.calls.append(text)
        return [
            TaggedToken(text=word, label=self.labels[word])
            for word in text.split()
            if word in self.labels
        ]


def build_docx(runs: List[str], part_name: str = "word/document.xml") -> bytes:
    """Build a minimal Word package holding a single paragraph of text runs."""
    body = "".join(f'<w:r><w:t xml:space="preserve">{run}</w:t></w:r>' for run in runs)
    xml = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main" '
        'xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships">'
        f"<w:body><w:p>{body}</w:p></w:body></w:document>"
    )
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr(part_name, xml)
    return buffer.getvalue()


def build_blank_pdf(pages: int = 1) -> bytes:
    """Build a PDF whose pages carry no text layer."""
    from PyPDF2 import PdfWriter

    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def build_text_pdf(pages: List[str]) -> bytes:
    """Build a PDF with one line of Helvetica text per page."""
    font_id = 3
    page_ids = [4 + 2 * index for index in range(len(pages))]
    objects = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        2: (
            "<< /Type /Pages /Kids [" + " ".join(f"{pid} 0 R" for pid in page_ids)
            + f"] /Count {len(pages)} >>"
        ).encode("latin-1"),
        font_id: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    for page_id, line in zip(page_ids, pages):
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        stream = f"BT /F1 12 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1")
        objects[page_id] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 {font_id} 0 R >> >> /Contents {page_id + 1} 0 R >>"
        ).encode("latin-1")
        objects[page_id + 1] = (
            f"<< /Length {len(stream)} >>\nstream\n".encode("latin-1")
            + stream + b"\nendstream"
        )

    buffer = io.BytesIO()
    buffer.write(b"%PDF-1.4\n")
    offsets = {}
    for object_id in sorted(objects):
        offsets[object_id] = buffer.tell()
        buffer.write(f"{object_id} 0 obj\n".encode("latin-1"))
        buffer.write(objects[object_id])
        buffer.write(b"\nendobj\n")
    xref_offset = buffer.tell()
    size = max(objects) + 1
    buffer.write(f"xref\n0 {size}\n0000000000 65535 f \n".encode("latin-1"))
    for object_id in range(1, size):
        buffer.write(f"{offsets[object_id]:010d} 00000 n \n".encode("latin-1"))
    buffer.write(
        f"trailer\n<< /Size {size} /Root 1 0 R >>\nstartxref\n{xref_offset}\n%%EOF\n"
        .encode("latin-1")
    )
    return buffer.getvalue()


@pytest.fixture
def stub_tagger():
    """Tagger that knows a handful of names."""
    return StubTagger({
        "Tim": "PERSON",
        "Cook": "PERSON",
        "Apple": "ORG",
        "Cupertino": "GPE",
        "Lakers": "NORP",
    })


@pytest.fixture
def docx_bytes():
    """Word package with the runs "Hello " and "World"."""
    return build_docx(["Hello ", "World"])
