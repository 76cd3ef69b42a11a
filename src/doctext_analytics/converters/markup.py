"""Lightweight markup decoder."""

import logging
from typing import Optional, Sequence

from ..interfaces.converter import IDocumentConverter
from .encoding import DEFAULT_ENCODINGS, try_decode
from .exceptions import EncodingError

logger = logging.getLogger(__name__)


class MarkupPassthroughDecoder(IDocumentConverter):
    """
    Decoder for Markdown sources.

    Returns the markup text unchanged. Unlike the generic decoder there is
    no hex fallback: a markup source that fails every encoding raises
    EncodingError.
    """

    def __init__(self, encodings: Optional[Sequence[str]] = None):
        self.encodings = tuple(encodings) if encodings is not None else DEFAULT_ENCODINGS

    def convert(self, data: bytes) -> str:
        decoded = try_decode(data, self.encodings)
        if decoded is None:
            raise EncodingError(
                location="markup body",
                details={"encodings": list(self.encodings)},
            )
        text, encoding = decoded
        logger.debug(f"Markdown text decoded with {encoding}, length: {len(text)}")
        return text
