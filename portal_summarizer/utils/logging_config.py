"""
로깅 설정 모듈
"""

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL_ENV = 'PORTAL_SUMMARIZER_LOG_LEVEL'


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    """
    로깅 레벨 결정 (인자 > 환경변수 > DEBUG)

    Args:
        level: 로깅 레벨 (정수 또는 'INFO' 같은 이름)

    Returns:
        int: logging 모듈 레벨 값
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, 'DEBUG')
    if isinstance(level, str):
        level_value = logging.getLevelName(level.upper())
        return level_value if isinstance(level_value, int) else logging.DEBUG
    return level


def setup_logger(
    name: str = 'portal_summarizer',
    level: Optional[Union[int, str]] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    로거 설정 및 반환

    Args:
        name: 로거 이름
        level: 로깅 레벨 (None이면 PORTAL_SUMMARIZER_LOG_LEVEL 환경변수)
        format_string: 로그 포맷 문자열

    Returns:
        logging.Logger: 설정된 로거
    """
    resolved_level = _resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(resolved_level)

    # 기존 핸들러 제거 (중복 방지)
    if logger.handlers:
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = 'portal_summarizer') -> logging.Logger:
    """
    기존 로거 반환 (없으면 기본 설정으로 생성)

    Args:
        name: 로거 이름

    Returns:
        logging.Logger: 로거 인스턴스
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        return setup_logger(name)

    return logger
