"""
표시용 포맷 함수
"""

from datetime import datetime
from typing import Optional

SIZE_UNITS = ['Bytes', 'KB', 'MB', 'GB']


def format_file_size(size: int) -> str:
    """
    바이트 크기를 사람이 읽기 쉬운 문자열로 변환

    1024 단위, 소수점 둘째 자리까지 표시하고 뒤쪽 0은 제거합니다.
    (예: 0 → '0 Bytes', 1536 → '1.5 KB')

    Args:
        size: 바이트 크기

    Returns:
        str: 크기 라벨
    """
    if size <= 0:
        return '0 Bytes'

    exponent = 0
    while size >= 1024 ** (exponent + 1) and exponent < len(SIZE_UNITS) - 1:
        exponent += 1
    value = round(size / 1024 ** exponent, 2)

    # 1.50 → 1.5, 2.00 → 2
    value_str = f"{value:.2f}".rstrip('0').rstrip('.')
    return f"{value_str} {SIZE_UNITS[exponent]}"


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """히스토리 표시용 타임스탬프 (YYYY-MM-DD HH:MM:SS)"""
    moment = moment or datetime.now()
    return moment.strftime('%Y-%m-%d %H:%M:%S')
