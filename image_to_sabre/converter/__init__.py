"""
Converter package: turns a flight screenshot into Sabre air segment lines.
"""

from .errors import ConversionError
from .service import ConversionService
from .types import ConversionRequest, ConversionResponse, InferenceClient

__all__ = [
    "ConversionError",
    "ConversionRequest",
    "ConversionResponse",
    "ConversionService",
    "InferenceClient",
]
