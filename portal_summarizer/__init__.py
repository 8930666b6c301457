"""
portal_summarizer - 업로드 문서/텍스트 요약 (Azure OpenAI)
"""

from .config.config import Config
from .exceptions import (
    SummarizerError,
    ConfigurationError,
    UpstreamError,
    EmptyResponseError,
    ExtractionError,
)
from .models.data_models import (
    DocumentKind,
    UploadedDocument,
    ExtractionResult,
    SummaryResponse,
    SummaryRecord,
    EndpointConfig,
)
from .summarizer import DocumentSummarizer

__version__ = "0.1.0"

__all__ = [
    'Config',
    'DocumentSummarizer',
    'SummarizerError',
    'ConfigurationError',
    'UpstreamError',
    'EmptyResponseError',
    'ExtractionError',
    'DocumentKind',
    'UploadedDocument',
    'ExtractionResult',
    'SummaryResponse',
    'SummaryRecord',
    'EndpointConfig',
]
