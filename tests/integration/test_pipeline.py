"""Integration tests for the end-to-end processing pipeline."""

import json

import pytest

from conftest import build_blank_pdf, build_docx, build_text_pdf
from doctext_analytics.config import ConfigurationError
from doctext_analytics.converters import NO_TEXT_MESSAGE
from doctext_analytics.models.enums import DocumentType, EntityType, FileType
from doctext_analytics.pipeline import (
    PipelineConfig,
    PipelineResult,
    ProcessingPipeline,
)


@pytest.fixture
def pipeline(stub_tagger, tmp_path):
    """Pipeline with a stub tagger and a private temp directory."""
    config = PipelineConfig(temp_dir=str(tmp_path / "temp"))
    return ProcessingPipeline(config=config, tagger=stub_tagger)


class TestProcessBytes:
    """Tests for in-memory documents."""

    def test_word_document(self, pipeline):
        data = build_docx(["Tim Cook signed the agreement ", "between John Smith and Apple."])

        result = pipeline.process_bytes(data, ".docx", source_name="deal.docx")

        assert isinstance(result, PipelineResult)
        assert result.success
        assert result.errors == []
        assert result.conversion.file_type == FileType.DOCX
        assert result.conversion.text == (
            "Tim Cook signed the agreement between John Smith and Apple."
        )
        assert result.extracted_data.statistics.word_count == 10
        persons = [e.name for e in result.extracted_data.entities_of_type(EntityType.PERSON)]
        assert persons == ["Tim", "Cook"]
        assert result.business_analysis.document_type == DocumentType.CONTRACT
        assert result.business_analysis.contract_terms.parties == ["John Smith"]

    def test_markdown(self, pipeline):
        text = "# Q3\n\nRevenue growth 25% this quarter.\n\nGreat results!"

        result = pipeline.process_bytes(text.encode("utf-8"), "md")

        assert result.success
        assert result.conversion.text == text
        assert result.extracted_data.statistics.paragraph_count == 3
        assert result.business_analysis.document_type == DocumentType.FINANCIAL_REPORT
        assert result.business_analysis.business_metrics.kpis[0].value == 25.0

    def test_blank_pdf_warns(self, pipeline):
        result = pipeline.process_bytes(build_blank_pdf(), "pdf")

        assert result.success
        assert result.conversion.text == NO_TEXT_MESSAGE
        assert result.warnings == ["PDF has no text layer"]

    def test_pdf_with_text(self, pipeline):
        data = build_text_pdf(["Invoice number 4: amount due $10.00, due date Friday."])

        result = pipeline.process_bytes(data, "pdf", source_name="invoice.pdf")

        assert result.success
        assert result.warnings == []
        assert "Invoice number 4" in result.conversion.text
        assert result.business_analysis.document_type == DocumentType.INVOICE

    def test_unknown_extension_is_decoded(self, pipeline):
        result = pipeline.process_bytes(b"plain notes", "txt")

        assert result.success
        assert result.conversion.file_type is None
        assert result.conversion.text == "plain notes"

    def test_business_analysis_can_be_skipped(self, pipeline):
        result = pipeline.process_bytes(b"revenue", "txt", include_business=False)

        assert result.success
        assert result.business_analysis is None

    def test_business_analysis_disabled_by_config(self, stub_tagger):
        pipeline = ProcessingPipeline(
            config=PipelineConfig(enable_business_analysis=False),
            tagger=stub_tagger,
        )
        assert pipeline.process_bytes(b"revenue", "txt").business_analysis is None


class TestErrorCapture:
    """Converter errors are recorded on the result, never raised."""

    def test_corrupted_word_document(self, pipeline):
        result = pipeline.process_bytes(b"not a zip", "docx", source_name="bad.docx")

        assert not result.success
        assert result.conversion is None
        assert result.extracted_data is None
        assert result.errors[0].startswith("ConversionError: Could not open Word document archive")
        assert result.metadata["error"]["error_type"] == "ConversionError"

    def test_markdown_encoding_failure(self, stub_tagger, tmp_path):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "analytics.json").write_text(
            json.dumps({"encodings": ["ascii"]}), encoding="utf-8"
        )
        pipeline = ProcessingPipeline(
            config=PipelineConfig(config_dir=str(config_dir)),
            tagger=stub_tagger,
        )

        result = pipeline.process_bytes("naïve".encode("utf-8"), "md")

        assert not result.success
        assert result.metadata["error"]["error_type"] == "EncodingError"

    def test_strict_file_types(self, stub_tagger):
        pipeline = ProcessingPipeline(
            config=PipelineConfig(strict_file_types=True),
            tagger=stub_tagger,
        )

        result = pipeline.process_bytes(b"MZ", ".exe", source_name="setup.exe")

        assert not result.success
        assert result.metadata["error"]["error_type"] == "UnsupportedFileTypeError"

    def test_missing_file(self, pipeline, tmp_path):
        result = pipeline.process_file(tmp_path / "missing.pdf")

        assert not result.success
        assert result.metadata["error"]["error_type"] == "FileReadError"

    def test_stats_track_failures(self, pipeline):
        pipeline.process_bytes(b"ok", "txt")
        pipeline.process_bytes(b"broken", "docx")

        stats = pipeline.get_stats()
        assert stats.total_executions == 2
        assert stats.successful_executions == 1
        assert stats.failed_executions == 1

        performance = pipeline.get_performance_stats()
        assert performance["convert_document"]["count"] == 2
        assert performance["convert_document"]["success_rate"] == 0.5

    def test_conversion_stats_by_format(self, pipeline):
        pipeline.process_bytes(b"ok", "txt")
        pipeline.process_bytes(b"# Title", "md")
        pipeline.process_bytes(b"broken", "docx")

        stats = pipeline.get_conversion_stats()

        assert stats["text"]["count"] == 1
        assert stats["md"]["success_rate"] == 1.0
        assert stats["docx"]["success_rate"] == 0.0

    def test_performance_history_is_bounded(self, stub_tagger):
        """A long-lived pipeline keeps a fixed number of timings."""
        pipeline = ProcessingPipeline(
            config=PipelineConfig(metrics_history_size=5),
            tagger=stub_tagger,
        )

        for _ in range(20):
            result = pipeline.analyze_text("hello world")

        assert result.metadata["performance_stats"]["extract_data"]["count"] == 5
        assert len(pipeline.performance_monitor.history["pipeline_execution"]) == 5
        assert pipeline.get_stats().total_executions == 20


class TestProcessFile:
    """Tests for documents on disk."""

    def test_word_document_on_disk(self, pipeline, tmp_path):
        path = tmp_path / "hello.docx"
        path.write_bytes(build_docx(["Hello ", "World"]))

        result = pipeline.process_file(path)

        assert result.success
        assert result.conversion.text == "Hello World"
        assert result.conversion.source_name == "hello.docx"
        assert "pipeline_execution" not in result.metadata["performance_stats"]
        assert "convert_document" in result.metadata["performance_stats"]

    def test_temporary_files_removed(self, pipeline, tmp_path):
        path = tmp_path / "hello.docx"
        path.write_bytes(build_docx(["Hello"]))

        pipeline.process_file(path)

        assert list((tmp_path / "temp").iterdir()) == []


class TestConfiguration:
    """Tests for pipeline configuration."""

    def test_analytics_configuration_from_directory(self, stub_tagger, tmp_path):
        (tmp_path / "analytics.json").write_text(
            json.dumps({"keyword_limit": 1}), encoding="utf-8"
        )
        pipeline = ProcessingPipeline(
            config=PipelineConfig(config_dir=str(tmp_path)),
            tagger=stub_tagger,
        )

        result = pipeline.analyze_text("alpha beta gamma delta")

        assert len(result.extracted_data.keywords) == 1

    def test_pypdf2_backend(self, stub_tagger):
        pipeline = ProcessingPipeline(
            config=PipelineConfig(pdf_backend="pypdf2"),
            tagger=stub_tagger,
        )
        result = pipeline.process_bytes(build_blank_pdf(), "pdf")
        assert result.conversion.text == NO_TEXT_MESSAGE

    def test_unknown_pdf_backend(self, stub_tagger):
        with pytest.raises(ConfigurationError):
            ProcessingPipeline(config=PipelineConfig(pdf_backend="ghostscript"), tagger=stub_tagger)

    def test_analyze_text(self, pipeline):
        result = pipeline.analyze_text("Invoice number 9: amount due $120.00, due date Friday.")

        assert result.success
        assert result.conversion.file_type is None
        assert result.business_analysis.document_type == DocumentType.INVOICE
        assert result.business_analysis.financial_data.amounts[0].value == 120.0
