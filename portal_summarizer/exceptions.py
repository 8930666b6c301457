"""
예외 정의 - 요약 요청 실패 유형
"""

from typing import Any, Dict, Optional


class SummarizerError(Exception):
    """
    요약 처리 기본 예외

    Attributes:
        message: 사용자 표시용 메시지
        details: 진단용 부가 정보
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} :: {self.details}"
        return self.message


class ConfigurationError(SummarizerError):
    """엔드포인트 설정이 누락되었거나 기본값(placeholder)인 경우"""


class UpstreamError(SummarizerError):
    """
    원격 API가 2xx 이외의 응답을 반환한 경우

    Attributes:
        status_code: HTTP 상태 코드
        body: 응답 본문 (원문 그대로)
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"Azure OpenAI API Error: {status_code} - {body}",
            details={'status_code': status_code},
        )
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return self.message


class EmptyResponseError(SummarizerError):
    """모델 응답에 내용이 없는 경우"""


class ExtractionError(SummarizerError):
    """
    문서 텍스트 추출 실패

    Attributes:
        file_name: 실패한 파일명
        reason: 실패 원인
    """

    def __init__(self, file_name: str, reason: str):
        super().__init__(
            f"{file_name}: 텍스트 추출 실패 ({reason})",
            details={'file_name': file_name},
        )
        self.file_name = file_name
        self.reason = reason

    def __str__(self) -> str:
        return self.message
