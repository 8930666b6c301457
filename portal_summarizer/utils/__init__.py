"""
Utils 패키지 - 유틸리티 함수
"""

from .logging_config import setup_logger, get_logger
from .formatting import format_file_size, format_timestamp

__all__ = [
    'setup_logger',
    'get_logger',
    'format_file_size',
    'format_timestamp',
]
