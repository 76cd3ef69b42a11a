"""Data models for configuration management."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from ..analytics.lexicons import NEGATIVE_WORDS, POSITIVE_WORDS, STOP_WORDS
from ..converters.encoding import DEFAULT_ENCODINGS

DEFAULT_SPACY_MODEL = "en_core_web_sm"
SPACY_MODEL_ENV = "DOCTEXT_SPACY_MODEL"


def default_spacy_model() -> str:
    """Model name from the environment, or the small English pipeline."""
    return os.environ.get(SPACY_MODEL_ENV) or DEFAULT_SPACY_MODEL


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result


@dataclass
class AnalyticsConfiguration:
    """
    Tunable settings for conversion and text analytics.

    The defaults reproduce the fixed lexicons and constants; loading an
    ``analytics.json`` through the ConfigurationManager overrides them.
    """
    positive_words: frozenset = POSITIVE_WORDS
    negative_words: frozenset = NEGATIVE_WORDS
    stop_words: frozenset = STOP_WORDS
    keyword_limit: int = 20
    words_per_minute: float = 200.0
    sentiment_threshold: float = 0.3
    encodings: List[str] = field(default_factory=lambda: list(DEFAULT_ENCODINGS))
    spacy_model: str = field(default_factory=default_spacy_model)
    version: int = 1
