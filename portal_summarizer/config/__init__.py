"""
Config 패키지 - 설정
"""

from .config import Config

__all__ = [
    'Config',
]
