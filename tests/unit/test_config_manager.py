"""Unit tests for the Configuration Manager."""

import json

import pytest

from doctext_analytics.config import (
    AnalyticsConfiguration,
    ConfigurationError,
    ConfigurationManager,
    ValidationResult,
)
from doctext_analytics.converters.encoding import DEFAULT_ENCODINGS


class TestDefaults:
    """Tests for the default analytics configuration."""

    def test_default_values(self):
        config = AnalyticsConfiguration()

        assert config.keyword_limit == 20
        assert config.words_per_minute == 200.0
        assert config.sentiment_threshold == 0.3
        assert config.encodings == list(DEFAULT_ENCODINGS)
        assert "excellent" in config.positive_words
        assert "terrible" in config.negative_words
        assert "the" in config.stop_words

    def test_spacy_model_default(self, monkeypatch):
        monkeypatch.delenv("DOCTEXT_SPACY_MODEL", raising=False)
        assert AnalyticsConfiguration().spacy_model == "en_core_web_sm"

    def test_spacy_model_from_environment(self, monkeypatch):
        monkeypatch.setenv("DOCTEXT_SPACY_MODEL", "en_core_web_md")
        assert AnalyticsConfiguration().spacy_model == "en_core_web_md"

    def test_manager_starts_with_defaults(self):
        manager = ConfigurationManager()
        assert not manager.is_loaded
        assert manager.configuration.keyword_limit == 20


class TestLoadConfiguration:
    """Tests for loading overrides."""

    def test_load_from_dict(self):
        manager = ConfigurationManager()

        result = manager.load_configuration({
            "keyword_limit": 5,
            "encodings": ["utf-8", "cp1252"],
            "positive_words": ["Stellar", " robust "],
        })

        assert result.is_valid
        assert manager.is_loaded
        config = manager.configuration
        assert config.keyword_limit == 5
        assert config.encodings == ["utf-8", "cp1252"]
        assert config.positive_words == frozenset({"stellar", "robust"})
        assert config.sentiment_threshold == 0.3

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"words_per_minute": 250}), encoding="utf-8")

        manager = ConfigurationManager()
        manager.load_configuration(path)

        assert manager.configuration.words_per_minute == 250.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager().load_configuration(tmp_path / "absent.json")
        assert "not found" in exc_info.value.message

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_configuration(path)

    def test_unknown_codec(self):
        manager = ConfigurationManager()

        with pytest.raises(ConfigurationError) as exc_info:
            manager.load_configuration({"encodings": ["utf-8", "klingon-8"]})

        errors = exc_info.value.validation_result.errors
        assert any("klingon-8" in e for e in errors)
        assert manager.configuration.encodings == list(DEFAULT_ENCODINGS)

    @pytest.mark.parametrize("settings", [
        {"keyword_limit": 0},
        {"keyword_limit": True},
        {"words_per_minute": -1},
        {"sentiment_threshold": 1.5},
        {"encodings": []},
        {"positive_words": "good"},
        {"negative_words": []},
        {"spacy_model": ""},
    ])
    def test_invalid_values(self, settings):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager().load_configuration(settings)
        assert not exc_info.value.validation_result.is_valid

    def test_unknown_key_is_a_warning(self):
        result = ConfigurationManager().load_configuration({"colour": "blue"})

        assert result.is_valid
        assert result.warnings == ["Unknown configuration key 'colour' ignored"]

    def test_non_object_rejected(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_configuration(["utf-8"])

    def test_empty_stop_words_allowed(self):
        manager = ConfigurationManager()
        manager.load_configuration({"stop_words": []})
        assert manager.configuration.stop_words == frozenset()


class TestDirectoryPersistence:
    """Tests for directory loading and saving."""

    def test_save_and_load_round_trip(self, tmp_path):
        manager = ConfigurationManager()
        manager.load_configuration({"keyword_limit": 7, "spacy_model": "en_core_web_lg"})
        manager.save_to_directory(tmp_path)

        assert (tmp_path / "analytics.json").exists()

        other = ConfigurationManager()
        result = other.load_from_directory(tmp_path)

        assert result.is_valid
        assert other.configuration.keyword_limit == 7
        assert other.configuration.spacy_model == "en_core_web_lg"
        assert other.configuration.positive_words == manager.configuration.positive_words

    def test_directory_without_file_keeps_defaults(self, tmp_path):
        manager = ConfigurationManager()
        result = manager.load_from_directory(tmp_path)

        assert result.is_valid
        assert not manager.is_loaded

    def test_invalid_file_reported_not_raised(self, tmp_path):
        (tmp_path / "analytics.json").write_text(
            json.dumps({"keyword_limit": -3}), encoding="utf-8"
        )

        result = ConfigurationManager().load_from_directory(tmp_path)

        assert not result.is_valid
        assert any("keyword_limit" in e for e in result.errors)

    def test_save_without_directory(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().save_to_directory()

    def test_reset(self):
        manager = ConfigurationManager()
        manager.load_configuration({"keyword_limit": 3})
        manager.reset()

        assert not manager.is_loaded
        assert manager.configuration.keyword_limit == 20

    def test_to_dict(self):
        data = ConfigurationManager().to_dict()

        assert data["keyword_limit"] == 20
        assert data["encodings"] == list(DEFAULT_ENCODINGS)
        assert data["positive_words"] == sorted(data["positive_words"])


class TestValidation:
    """Tests for validating the active configuration."""

    def test_overlapping_lexicons_warn(self):
        manager = ConfigurationManager()
        manager.load_configuration({
            "positive_words": ["fine", "good"],
            "negative_words": ["fine", "bad"],
        })

        result = manager.validate()

        assert result.is_valid
        assert any("fine" in w for w in result.warnings)

    def test_validation_result_merge(self):
        first = ValidationResult(is_valid=True, warnings=["w"])
        second = ValidationResult(is_valid=True)
        second.add_error("e")

        merged = first.merge(second)

        assert not merged.is_valid
        assert merged.errors == ["e"]
        assert merged.warnings == ["w"]
