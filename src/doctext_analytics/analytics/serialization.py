"""JSON serialization for conversion and analytics results."""

import json
from dataclasses import fields, is_dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional

from ..models.analysis import ExtractedData
from ..models.business import BusinessDocumentAnalysis
from ..models.conversion import ConversionResult


def to_jsonable(value: Any) -> Any:
    """
    Recursively convert result dataclasses to JSON-ready values.

    Enums become their values, dates ISO strings; dataclass field names
    are kept as dictionary keys.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    return value


class AnalysisSerializer:
    """Serializes results for export and for the HTTP API."""

    @staticmethod
    def conversion_to_dict(result: ConversionResult) -> dict[str, Any]:
        data = to_jsonable(result)
        data["display_type"] = result.file_type.display_name if result.file_type else None
        return data

    @staticmethod
    def extracted_data_to_dict(
        data: ExtractedData,
        include_text: bool = False,
    ) -> dict[str, Any]:
        """Convert ExtractedData to a dictionary, optionally without the source text."""
        result = to_jsonable(data)
        if not include_text:
            result.pop("text", None)
        return result

    @staticmethod
    def business_analysis_to_dict(analysis: BusinessDocumentAnalysis) -> dict[str, Any]:
        return to_jsonable(analysis)

    @staticmethod
    def serialize(
        data: ExtractedData,
        business_analysis: Optional[BusinessDocumentAnalysis] = None,
    ) -> str:
        """
        Serialize analytics results to a JSON string.

        Args:
            data: The extracted data.
            business_analysis: Optional business analysis to embed.

        Returns:
            JSON string with ``extracted_data`` and ``business_analysis`` keys.
        """
        payload = {
            "extracted_data": AnalysisSerializer.extracted_data_to_dict(data, include_text=True),
            "business_analysis": (
                AnalysisSerializer.business_analysis_to_dict(business_analysis)
                if business_analysis is not None
                else None
            ),
        }
        return json.dumps(payload, ensure_ascii=False, indent=2)
