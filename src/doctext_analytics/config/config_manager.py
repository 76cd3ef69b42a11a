"""Configuration Manager implementation for the document text analytics system.

This module loads, validates, and persists the tunable analytics settings:
sentiment and stop-word lexicons, keyword limit, reading speed, sentiment
threshold, candidate text encodings and the spaCy model name.
"""

import codecs
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .models import AnalyticsConfiguration, ConfigurationError, ValidationResult

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "analytics.json"

WORD_LIST_FIELDS = ("positive_words", "negative_words", "stop_words")


class ConfigurationManager:
    """
    Manager for analytics configuration.

    Handles loading, validation, and access to the settings consumed by
    the converters and the TextAnalyticsEngine.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Optional directory path for configuration files.
        """
        self._config_dir = Path(config_dir) if config_dir else None
        self._configuration = AnalyticsConfiguration()
        self._is_loaded = False

    @property
    def configuration(self) -> AnalyticsConfiguration:
        """Get the current analytics configuration."""
        return self._configuration

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._is_loaded

    def load_configuration(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> ValidationResult:
        """
        Load and validate analytics settings.

        Only the keys present in the source override the defaults.

        Args:
            source: JSON file path or dictionary of settings.

        Returns:
            ValidationResult with any warnings (unknown keys).

        Raises:
            ConfigurationError: If validation fails; the current
                configuration is left unchanged.
        """
        raw_data = self._parse_source(source)
        if not isinstance(raw_data, dict):
            raise ConfigurationError("Analytics configuration must be a JSON object")

        result, values = self._validate_settings(raw_data)
        if not result.is_valid:
            raise ConfigurationError(
                "Analytics configuration validation failed",
                validation_result=result
            )

        base = self._configuration
        self._configuration = AnalyticsConfiguration(
            positive_words=values.get("positive_words", base.positive_words),
            negative_words=values.get("negative_words", base.negative_words),
            stop_words=values.get("stop_words", base.stop_words),
            keyword_limit=values.get("keyword_limit", base.keyword_limit),
            words_per_minute=values.get("words_per_minute", base.words_per_minute),
            sentiment_threshold=values.get("sentiment_threshold", base.sentiment_threshold),
            encodings=values.get("encodings", list(base.encodings)),
            spacy_model=values.get("spacy_model", base.spacy_model),
            version=values.get("version", base.version),
        )
        self._is_loaded = True
        logger.info(f"Loaded analytics configuration with {len(values)} overrides")
        for warning in result.warnings:
            logger.warning(warning)

        return result

    def _validate_settings(
        self,
        data: Dict[str, Any]
    ) -> Tuple[ValidationResult, Dict[str, Any]]:
        """Validate a settings dictionary and normalize its values."""
        result = ValidationResult(is_valid=True)
        values: Dict[str, Any] = {}
        known = set(WORD_LIST_FIELDS) | {
            "keyword_limit", "words_per_minute", "sentiment_threshold",
            "encodings", "spacy_model", "version",
        }

        for key in data:
            if key not in known:
                result.add_warning(f"Unknown configuration key '{key}' ignored")

        for name in WORD_LIST_FIELDS:
            if name not in data:
                continue
            words = data[name]
            if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                result.add_error(f"'{name}' must be a list of strings")
                continue
            cleaned = frozenset(w.strip().lower() for w in words if w.strip())
            if not cleaned and name != "stop_words":
                result.add_error(f"'{name}' must contain at least one word")
                continue
            values[name] = cleaned

        if "keyword_limit" in data:
            limit = data["keyword_limit"]
            if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
                result.add_error("'keyword_limit' must be a positive integer")
            else:
                values["keyword_limit"] = limit

        if "words_per_minute" in data:
            wpm = data["words_per_minute"]
            if isinstance(wpm, bool) or not isinstance(wpm, (int, float)) or wpm <= 0:
                result.add_error("'words_per_minute' must be a positive number")
            else:
                values["words_per_minute"] = float(wpm)

        if "sentiment_threshold" in data:
            threshold = data["sentiment_threshold"]
            if (
                isinstance(threshold, bool)
                or not isinstance(threshold, (int, float))
                or not 0.0 <= threshold <= 1.0
            ):
                result.add_error("'sentiment_threshold' must be a number between 0 and 1")
            else:
                values["sentiment_threshold"] = float(threshold)

        if "encodings" in data:
            encodings = data["encodings"]
            if not isinstance(encodings, list) or not encodings:
                result.add_error("'encodings' must be a non-empty list")
            else:
                valid_encodings = self._validate_encodings(encodings, result)
                if valid_encodings is not None:
                    values["encodings"] = valid_encodings

        if "spacy_model" in data:
            model = data["spacy_model"]
            if not isinstance(model, str) or not model.strip():
                result.add_error("'spacy_model' must be a non-empty string")
            else:
                values["spacy_model"] = model.strip()

        if "version" in data:
            if isinstance(data["version"], bool) or not isinstance(data["version"], int):
                result.add_error("'version' must be an integer")
            else:
                values["version"] = data["version"]

        return result, values

    def _validate_encodings(
        self,
        encodings: List[Any],
        result: ValidationResult
    ) -> Optional[List[str]]:
        """Check every entry names a codec Python knows about."""
        valid: List[str] = []
        for i, encoding in enumerate(encodings):
            if not isinstance(encoding, str):
                result.add_error(f"Encoding [{i}] must be a string")
                continue
            try:
                codecs.lookup(encoding)
            except LookupError:
                result.add_error(f"Encoding [{i}]: unknown codec '{encoding}'")
                continue
            valid.append(encoding)

        if len(set(valid)) != len(valid):
            result.add_warning("Duplicate encodings found; later entries are never tried")

        return valid if len(valid) == len(encodings) else None

    def validate(self) -> ValidationResult:
        """Validate the currently active configuration."""
        config = self._configuration
        result, _ = self._validate_settings(self._to_raw(config))
        overlap = config.positive_words & config.negative_words
        if overlap:
            result.add_warning(
                f"Words listed as both positive and negative: {sorted(overlap)}"
            )
        return result

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _parse_source(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> Any:
        """Parse configuration source to raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")

            try:
                with open(path, "r", encoding="utf-8") as f:
                    return json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

        return source

    def load_from_directory(self, config_dir: Union[str, Path]) -> ValidationResult:
        """
        Load configuration from a directory.

        Expects a file named ``analytics.json``; a directory without one
        keeps the defaults.

        Args:
            config_dir: Directory containing configuration files.

        Returns:
            ValidationResult for the loaded configuration.
        """
        config_dir = Path(config_dir)
        result = ValidationResult(is_valid=True)

        config_file = config_dir / CONFIG_FILE_NAME
        if config_file.exists():
            try:
                result = result.merge(self.load_configuration(config_file))
            except ConfigurationError as e:
                result.add_error(f"Analytics configuration loading failed: {e.message}")
                if e.validation_result:
                    result = result.merge(e.validation_result)
        else:
            logger.debug(f"No {CONFIG_FILE_NAME} in {config_dir}, using defaults")

        self._config_dir = config_dir
        return result

    def save_to_directory(
        self,
        config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        """
        Save current configuration to a directory.

        Args:
            config_dir: Directory to save to. Uses current config_dir if None.
        """
        config_dir = Path(config_dir) if config_dir else self._config_dir
        if not config_dir:
            raise ConfigurationError("No configuration directory specified")

        config_dir.mkdir(parents=True, exist_ok=True)

        with open(config_dir / CONFIG_FILE_NAME, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def reset(self) -> None:
        """Reset configuration to the defaults."""
        self._configuration = AnalyticsConfiguration()
        self._is_loaded = False

    def to_dict(self) -> Dict[str, Any]:
        """Export current configuration as a dictionary."""
        return self._to_raw(self._configuration)

    @staticmethod
    def _to_raw(config: AnalyticsConfiguration) -> Dict[str, Any]:
        return {
            "version": config.version,
            "positive_words": sorted(config.positive_words),
            "negative_words": sorted(config.negative_words),
            "stop_words": sorted(config.stop_words),
            "keyword_limit": config.keyword_limit,
            "words_per_minute": config.words_per_minute,
            "sentiment_threshold": config.sentiment_threshold,
            "encodings": list(config.encodings),
            "spacy_model": config.spacy_model,
        }
