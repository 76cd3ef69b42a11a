"""Byte decoding with an ordered list of candidate encodings."""

import logging
from typing import Optional, Sequence, Tuple

from ..interfaces.converter import IDocumentConverter

logger = logging.getLogger(__name__)

# UTF-8 first, then the legacy single-byte encodings. latin-1 maps every
# byte, so with this list the hex fallback is only reachable through a
# custom encoding list.
DEFAULT_ENCODINGS: Tuple[str, ...] = (
    "utf-8",
    "ascii",
    "latin-1",
    "iso8859-2",
    "cp1252",
    "mac-roman",
)


def try_decode(data: bytes, encodings: Sequence[str]) -> Optional[Tuple[str, str]]:
    """
    Decode with the first encoding that accepts every byte.

    Returns:
        A ``(text, encoding)`` tuple, or None if every encoding fails.
    """
    for encoding in encodings:
        try:
            return data.decode(encoding), encoding
        except UnicodeDecodeError:
            continue
    return None


def to_hex(data: bytes) -> str:
    """Render bytes as space-separated lowercase two-digit hex pairs."""
    return " ".join(f"{byte:02x}" for byte in data)


class EncodingFallbackDecoder(IDocumentConverter):
    """
    Generic decoder for unclassified bytes.

    Tries each configured encoding in order and falls back to a lossless
    hexadecimal rendering, so ``convert`` never fails.
    """

    def __init__(self, encodings: Optional[Sequence[str]] = None):
        self.encodings = tuple(encodings) if encodings is not None else DEFAULT_ENCODINGS

    def convert(self, data: bytes) -> str:
        decoded = try_decode(data, self.encodings)
        if decoded is not None:
            text, encoding = decoded
            logger.debug(f"Successfully converted using encoding: {encoding}")
            return text

        logger.warning("All text encodings failed, converting to hex")
        return to_hex(data)
