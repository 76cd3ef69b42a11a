"""Interfaces for the document text analytics system."""

from .archive import ArchiveReader
from .converter import IDocumentConverter
from .paged_document import DocumentPage, PagedDocument
from .tagger import NamedEntityTagger, TaggedToken

__all__ = [
    "ArchiveReader",
    "IDocumentConverter",
    "DocumentPage",
    "PagedDocument",
    "NamedEntityTagger",
    "TaggedToken",
]
