"""End-to-end processing pipeline for the document text analytics system.

This module wires conversion and analytics together: a document goes in
as a path or bytes, and comes out as plain text, extracted data and an
optional business document analysis.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .config.config_manager import ConfigurationManager
from .config.models import ConfigurationError
from .converters.dispatcher import ConversionDispatcher
from .converters.exceptions import ConverterError
from .converters.paged_document import (
    NO_TEXT_MESSAGE,
    PDF_BACKENDS,
    PagedDocumentTextExtractor,
)
from .engine import TextAnalyticsEngine
from .interfaces.tagger import NamedEntityTagger
from .models.analysis import ExtractedData
from .models.business import BusinessDocumentAnalysis
from .models.conversion import ConversionResult
from .models.enums import FileType
from .performance import CONVERSION_OPERATION, DEFAULT_HISTORY_SIZE, PerformanceMonitor

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Configuration for the processing pipeline."""

    # Scoped temporary files are created under this directory
    temp_dir: Optional[str] = None

    # Feature flags
    enable_business_analysis: bool = True
    strict_file_types: bool = False

    # "pdfplumber" or "pypdf2"
    pdf_backend: str = "pdfplumber"

    # Performance configuration
    max_processing_time: float = 60  # seconds
    metrics_history_size: int = DEFAULT_HISTORY_SIZE

    # Directory holding analytics.json
    config_dir: Optional[str] = None


@dataclass
class PipelineResult:
    """Result of a complete pipeline execution."""

    success: bool
    conversion: Optional[ConversionResult] = None
    extracted_data: Optional[ExtractedData] = None
    business_analysis: Optional[BusinessDocumentAnalysis] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    processing_time: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PipelineStats:
    """Statistics about pipeline execution."""

    total_executions: int = 0
    successful_executions: int = 0
    failed_executions: int = 0
    average_processing_time: float = 0.0
    total_processing_time: float = 0.0


class ProcessingPipeline:
    """
    Main processing pipeline for document conversion and text analytics.

    Converter errors never escape ``process_file`` or ``process_bytes``;
    they are recorded on the returned PipelineResult.
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        dispatcher: Optional[ConversionDispatcher] = None,
        engine: Optional[TextAnalyticsEngine] = None,
        tagger: Optional[NamedEntityTagger] = None,
        config_manager: Optional[ConfigurationManager] = None,
    ):
        """
        Initialize the processing pipeline.

        Args:
            config: Pipeline configuration.
            dispatcher: Optional conversion dispatcher (created if not provided).
            engine: Optional analytics engine (created if not provided).
            tagger: Optional named-entity tagger for the created engine.
            config_manager: Optional configuration manager (created if not provided).

        Raises:
            ConfigurationError: If the PDF backend is unknown.
        """
        self.config = config or PipelineConfig()
        self.stats = PipelineStats()
        self.performance_monitor = PerformanceMonitor(
            max_processing_time=self.config.max_processing_time,
            history_size=self.config.metrics_history_size,
        )

        self._config_manager = config_manager or ConfigurationManager(
            config_dir=self.config.config_dir
        )
        if self.config.config_dir:
            load_result = self._config_manager.load_from_directory(self.config.config_dir)
            if load_result.is_valid:
                logger.info(f"Loaded configuration from {self.config.config_dir}")
            else:
                logger.warning(
                    f"Failed to load configuration: {'; '.join(load_result.errors)}"
                )
        analytics_config = self._config_manager.configuration

        if self.config.pdf_backend not in PDF_BACKENDS:
            raise ConfigurationError(
                f"Unknown PDF backend '{self.config.pdf_backend}', "
                f"expected one of {sorted(PDF_BACKENDS)}"
            )

        if self.config.temp_dir:
            Path(self.config.temp_dir).mkdir(parents=True, exist_ok=True)

        self._dispatcher = dispatcher or ConversionDispatcher(
            encodings=analytics_config.encodings,
            paged_extractor=PagedDocumentTextExtractor(
                document_opener=PDF_BACKENDS[self.config.pdf_backend],
                temp_dir=self.config.temp_dir,
            ),
            temp_dir=self.config.temp_dir,
        )
        self._engine = engine or TextAnalyticsEngine(
            configuration=analytics_config,
            tagger=tagger,
        )

        logger.info("Processing pipeline initialized")

    @property
    def dispatcher(self) -> ConversionDispatcher:
        return self._dispatcher

    @property
    def engine(self) -> TextAnalyticsEngine:
        return self._engine

    def process_file(
        self,
        file_path: Union[str, Path],
        include_business: Optional[bool] = None,
    ) -> PipelineResult:
        """
        Convert and analyze a document on disk.

        Args:
            file_path: Path to the document; its suffix selects the strategy.
            include_business: Run the business classifier. Defaults to
                ``enable_business_analysis``.

        Returns:
            PipelineResult with conversion, analytics and any errors.
        """
        path = Path(file_path)
        return self._run(
            lambda: self._convert_file(path),
            include_business,
            source=str(path),
            extension=path.suffix,
        )

    def process_bytes(
        self,
        data: bytes,
        extension: str,
        source_name: Optional[str] = None,
        include_business: Optional[bool] = None,
    ) -> PipelineResult:
        """
        Convert and analyze in-memory document bytes.

        Args:
            data: The document content.
            extension: File-extension hint, with or without a leading dot.
            source_name: Optional name recorded on the ConversionResult.
            include_business: Run the business classifier. Defaults to
                ``enable_business_analysis``.

        Returns:
            PipelineResult with conversion, analytics and any errors.
        """
        def convert() -> ConversionResult:
            return self.convert_bytes(data, extension, source_name=source_name)

        return self._run(
            convert,
            include_business,
            source=source_name or f"<{extension}>",
            extension=extension,
        )

    def convert_bytes(
        self,
        data: bytes,
        extension: str,
        source_name: Optional[str] = None,
    ) -> ConversionResult:
        """
        Convert bytes without running analytics.

        Raises:
            UnsupportedFileTypeError: If strict file types are on and the
                extension is not recognized.
            ConversionError: If a Word or PDF container cannot be walked.
            EncodingError: If a Markdown source fails every encoding.
        """
        if self.config.strict_file_types:
            self._dispatcher.require_supported(extension, file_path=source_name)
        return self._dispatcher.convert_bytes(data, extension, source_name=source_name)

    def analyze_text(
        self,
        text: str,
        include_business: Optional[bool] = None,
    ) -> PipelineResult:
        """Run analytics over text that needs no conversion."""
        return self._run(
            lambda: ConversionResult(text=text, byte_count=len(text.encode("utf-8"))),
            include_business,
            source="<text>",
        )

    def _convert_file(self, path: Path) -> ConversionResult:
        if self.config.strict_file_types:
            self._dispatcher.require_supported(path.suffix, file_path=str(path))
        return self._dispatcher.convert_file(path)

    def _run(
        self,
        convert,
        include_business: Optional[bool],
        source: str,
        extension: str = "",
    ) -> PipelineResult:
        if include_business is None:
            include_business = self.config.enable_business_analysis

        file_type = FileType.from_extension(extension) if extension else None
        monitor = self.performance_monitor
        start_time = time.time()
        result = PipelineResult(success=False)

        try:
            logger.info(f"Starting pipeline execution for {source}")

            with monitor.track("pipeline_execution", source=source):
                # Step 1: Convert to plain text
                with monitor.track(
                    CONVERSION_OPERATION,
                    file_type=file_type.value if file_type else "text",
                ):
                    conversion = convert()
                result.conversion = conversion
                if conversion.text == NO_TEXT_MESSAGE:
                    result.warnings.append("PDF has no text layer")

                # Step 2: Text analytics
                with monitor.track("extract_data"):
                    result.extracted_data = self._engine.extract_data(conversion.text)

                # Step 3: Business document analysis
                if include_business:
                    with monitor.track("analyze_business_document"):
                        result.business_analysis = self._engine.analyze_business_document(
                            conversion.text
                        )

                result.success = True
                result.metadata["performance_stats"] = monitor.get_all_stats()

            result.processing_time = time.time() - start_time
            logger.info(
                f"Pipeline execution completed successfully in {result.processing_time:.2f}s"
            )

            if result.processing_time > self.config.max_processing_time:
                warning = (
                    f"Processing time ({result.processing_time:.2f}s) exceeded "
                    f"target ({self.config.max_processing_time}s)"
                )
                result.warnings.append(warning)
                logger.warning(warning)

        except ConverterError as e:
            error_msg = f"{e.__class__.__name__}: {e}"
            result.errors.append(error_msg)
            result.metadata["error"] = e.to_dict()
            logger.error(error_msg)

        finally:
            result.processing_time = time.time() - start_time
            self._update_stats(result)

        return result

    def _update_stats(self, result: PipelineResult) -> None:
        """Update pipeline statistics."""
        self.stats.total_executions += 1

        if result.success:
            self.stats.successful_executions += 1
        else:
            self.stats.failed_executions += 1

        self.stats.total_processing_time += result.processing_time
        self.stats.average_processing_time = (
            self.stats.total_processing_time / self.stats.total_executions
        )

    def get_stats(self) -> PipelineStats:
        """Get pipeline execution statistics."""
        return self.stats

    def get_performance_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get detailed performance statistics for all operations."""
        return self.performance_monitor.get_all_stats()

    def get_conversion_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get conversion timings grouped by document format."""
        return self.performance_monitor.get_conversion_stats()
