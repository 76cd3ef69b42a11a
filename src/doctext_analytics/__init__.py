"""
Document Text Analytics

Converts Word, PDF and Markdown documents to plain text and runs
lexicon-based text analytics and business document classification on it.
"""

__version__ = "0.1.0"

# Export main components
from .models.enums import (
    DocumentType,
    EntityType,
    FileType,
    SentimentLabel,
)
from .models.conversion import ConversionResult
from .models.analysis import (
    DataPoint,
    Entity,
    ExtractedData,
    Keyword,
    SentimentAnalysis,
    TextStatistics,
)
from .models.business import BusinessDocumentAnalysis
from .converters import (
    ArchiveXmlTextExtractor,
    ConversionDispatcher,
    ConversionError,
    ConverterError,
    EncodingError,
    EncodingFallbackDecoder,
    FileReadError,
    MarkupPassthroughDecoder,
    PagedDocumentTextExtractor,
    UnsupportedFileTypeError,
)
from .business import BusinessDocumentClassifier
from .config import (
    AnalyticsConfiguration,
    ConfigurationError,
    ConfigurationManager,
    ValidationResult,
)
from .engine import TextAnalyticsEngine
from .pipeline import PipelineConfig, PipelineResult, ProcessingPipeline

__all__ = [
    "DocumentType",
    "EntityType",
    "FileType",
    "SentimentLabel",
    "ConversionResult",
    "DataPoint",
    "Entity",
    "ExtractedData",
    "Keyword",
    "SentimentAnalysis",
    "TextStatistics",
    "BusinessDocumentAnalysis",
    "ArchiveXmlTextExtractor",
    "ConversionDispatcher",
    "ConversionError",
    "ConverterError",
    "EncodingError",
    "EncodingFallbackDecoder",
    "FileReadError",
    "MarkupPassthroughDecoder",
    "PagedDocumentTextExtractor",
    "UnsupportedFileTypeError",
    "BusinessDocumentClassifier",
    "AnalyticsConfiguration",
    "ConfigurationError",
    "ConfigurationManager",
    "ValidationResult",
    "TextAnalyticsEngine",
    "PipelineConfig",
    "PipelineResult",
    "ProcessingPipeline",
]
