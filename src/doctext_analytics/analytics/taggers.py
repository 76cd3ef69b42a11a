"""spaCy-backed named-entity tagging."""

import logging
from typing import Any, Iterator, List, Optional

import spacy

from ..interfaces.tagger import NamedEntityTagger, TaggedToken

logger = logging.getLogger(__name__)

DEFAULT_SPACY_MODEL = "en_core_web_sm"

# Name-type labels; numeric and temporal spaCy labels are left to the
# regex scans of the entity extractor.
NAME_LABELS = frozenset(["PERSON", "ORG", "GPE", "LOC", "FAC", "NORP"])

# Longest slice of text handed to the pipeline in one call.
DEFAULT_CHUNK_SIZE = 100000


class SpacyEntityTagger(NamedEntityTagger):
    """
    Word-level tagger over a spaCy pipeline.

    Each token inside a name-type entity is reported on its own, so
    "Tim Cook" yields two PERSON tokens. The pipeline is loaded on first
    use; if the model is not installed a blank English pipeline is used
    and nothing is tagged.
    """

    def __init__(
        self,
        model_name: str = DEFAULT_SPACY_MODEL,
        nlp: Optional[Any] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.model_name = model_name
        self.chunk_size = chunk_size
        self._nlp = nlp

    @property
    def nlp(self) -> Any:
        if self._nlp is None:
            self._nlp = self._load_model()
        return self._nlp

    def _load_model(self) -> Any:
        try:
            nlp = spacy.load(self.model_name)
            logger.info(f"Loaded spaCy model: {self.model_name}")
            return nlp
        except OSError as e:
            logger.warning(
                f"spaCy model '{self.model_name}' not available ({e}); "
                "named-entity tagging disabled"
            )
            return spacy.blank("en")

    def tag(self, text: str) -> List[TaggedToken]:
        if not text.strip():
            return []
        limit = min(self.chunk_size, self.nlp.max_length)
        chunks = list(split_into_chunks(text, limit))
        if len(chunks) > 1:
            logger.debug(f"Tagging {len(text)} characters in {len(chunks)} chunks")
        return [
            TaggedToken(text=token.text, label=token.ent_type_)
            for doc in self.nlp.pipe(chunks)
            for token in doc
            if token.ent_type_ in NAME_LABELS and not token.is_space and not token.is_punct
        ]


def split_into_chunks(text: str, limit: int) -> Iterator[str]:
    """
    Yield consecutive slices of ``text`` no longer than ``limit``.

    Cuts prefer the last paragraph break inside the window, then the last
    whitespace, so words are never split unless a single run of
    non-whitespace exceeds the limit. Joining the slices gives back the
    original text.
    """
    remaining = text
    while len(remaining) > limit:
        window = remaining[:limit]
        cut = window.rfind("\n\n")
        if cut <= 0:
            cut = max(window.rfind(" "), window.rfind("\n"), window.rfind("\t"))
        if cut <= 0:
            cut = limit
        yield remaining[:cut]
        remaining = remaining[cut:]
    if remaining:
        yield remaining
