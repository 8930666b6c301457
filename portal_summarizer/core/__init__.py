"""
Core 패키지 - 핵심 파이프라인 클래스
"""

from .file_classifier import classify
from .document_processor import DocumentProcessingPipeline
from .summary_pipeline import SummarizationClient
from .history_manager import HistoryStore

__all__ = [
    'classify',
    'DocumentProcessingPipeline',
    'SummarizationClient',
    'HistoryStore',
]
