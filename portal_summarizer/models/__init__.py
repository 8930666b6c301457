"""
Models 패키지 - 데이터 모델
"""

from .data_models import (
    DocumentKind,
    UploadedDocument,
    ExtractionResult,
    SummaryResponse,
    SummaryRecord,
    EndpointConfig,
)

__all__ = [
    'DocumentKind',
    'UploadedDocument',
    'ExtractionResult',
    'SummaryResponse',
    'SummaryRecord',
    'EndpointConfig',
]
