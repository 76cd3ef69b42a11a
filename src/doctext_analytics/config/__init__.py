"""Configuration management for the document text analytics system."""

from .config_manager import ConfigurationManager
from .models import (
    AnalyticsConfiguration,
    ConfigurationError,
    ValidationResult,
)

__all__ = [
    "ConfigurationManager",
    "AnalyticsConfiguration",
    "ConfigurationError",
    "ValidationResult",
]
