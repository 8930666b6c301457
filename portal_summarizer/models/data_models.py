"""
데이터 모델 정의
"""

import mimetypes
import uuid
from dataclasses import dataclass, field, replace, asdict
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

PLACEHOLDER_ENDPOINT = "your-endpoint"
PLACEHOLDER_DEPLOYMENT = "your-deployment-name"
MIN_API_KEY_LENGTH = 10


class DocumentKind(str, Enum):
    """분류기가 선택하는 추출 전략"""
    TEXT = 'text'
    PDF = 'pdf'
    WORD = 'word'
    SPREADSHEET = 'spreadsheet'
    CSV = 'csv'
    IMAGE = 'image'
    UNSUPPORTED = 'unsupported'


@dataclass(frozen=True)
class UploadedDocument:
    """
    업로드된 문서 (선택 후 불변)

    Attributes:
        file_name: 파일명
        mime_type: 선언된 MIME 타입 (없으면 빈 문자열)
        content: 파일 전체 바이트
        size: 바이트 크기 (미지정 시 len(content))
    """
    file_name: str
    mime_type: str
    content: bytes
    size: Optional[int] = None

    def __post_init__(self):
        if self.size is None:
            object.__setattr__(self, 'size', len(self.content))
        if self.mime_type is None:
            object.__setattr__(self, 'mime_type', '')

    @property
    def extension(self) -> str:
        """소문자 확장자 ('.pdf' 형태, 없으면 빈 문자열)"""
        return Path(self.file_name).suffix.lower()

    @classmethod
    def from_path(cls, file_path: str, mime_type: Optional[str] = None) -> 'UploadedDocument':
        """
        로컬 파일에서 문서 생성

        Args:
            file_path: 파일 경로
            mime_type: MIME 타입 (None이면 확장자로 추정)

        Returns:
            UploadedDocument: 파일 전체를 읽은 문서
        """
        path = Path(file_path)
        if mime_type is None:
            mime_type = mimetypes.guess_type(path.name)[0] or ''
        return cls(file_name=path.name, mime_type=mime_type, content=path.read_bytes())


@dataclass(frozen=True)
class ExtractionResult:
    """
    텍스트 추출 결과

    Attributes:
        text: 추출된 텍스트 (또는 안내문)
        file_name: 원본 파일명
        kind: 적용된 추출 전략
        degraded: text가 실제 내용이 아닌 안내문이면 True
    """
    text: str
    file_name: str
    kind: DocumentKind
    degraded: bool = False


@dataclass(frozen=True)
class SummaryResponse:
    """
    요약 응답

    Attributes:
        summary: 요약 텍스트
        confidence: 근사 신뢰도 (고정값)
        processing_time_ms: 소요 시간 (ms)
    """
    summary: str
    confidence: float
    processing_time_ms: int


@dataclass(frozen=True)
class SummaryRecord:
    """
    요약 히스토리 항목

    Attributes:
        id: 항목 식별자
        kind: 'document' or 'image'
        file_name: 파일명 (텍스트 요약은 'Text Summary')
        summary: 요약 텍스트
        timestamp: 생성 시각
        size_label: 크기 라벨 ('1.5 KB', '120 characters')
    """
    kind: str
    file_name: str
    summary: str
    timestamp: str
    size_label: str = ''
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SummaryRecord':
        return cls(
            id=str(data['id']),
            kind=data.get('kind', 'document'),
            file_name=data.get('file_name', ''),
            summary=data.get('summary', ''),
            timestamp=data.get('timestamp', ''),
            size_label=data.get('size_label', ''),
        )


@dataclass(frozen=True)
class EndpointConfig:
    """
    Azure OpenAI 엔드포인트 설정

    전역 상태가 아닌 값으로 전달되며, update()는 새 인스턴스를 반환합니다.

    Attributes:
        endpoint: 리소스 엔드포인트 (스킴 생략 가능)
        api_key: API 키
        deployment_name: 모델 배포 이름
        api_version: API 버전
    """
    endpoint: str
    api_key: str
    deployment_name: str
    api_version: str

    def update(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        deployment_name: Optional[str] = None,
        api_version: Optional[str] = None
    ) -> 'EndpointConfig':
        """
        설정 갱신 (빈 값은 기존 값 유지)

        Returns:
            EndpointConfig: 갱신된 새 설정
        """
        changes = {
            name: value.strip()
            for name, value in (
                ('endpoint', endpoint),
                ('api_key', api_key),
                ('deployment_name', deployment_name),
                ('api_version', api_version),
            )
            if value and value.strip()
        }
        return replace(self, **changes)

    def is_valid(self) -> bool:
        """필수 3개 필드가 모두 채워져 있고 기본값(placeholder)이 아닌지 확인"""
        return (
            bool(self.api_key)
            and len(self.api_key) > MIN_API_KEY_LENGTH
            and bool(self.endpoint)
            and PLACEHOLDER_ENDPOINT not in self.endpoint
            and bool(self.deployment_name)
            and self.deployment_name != PLACEHOLDER_DEPLOYMENT
        )

    @property
    def base_url(self) -> str:
        """스킴이 보정된 엔드포인트 (끝의 '/' 제거)"""
        endpoint = self.endpoint.strip().rstrip('/')
        if not endpoint.startswith(('https://', 'http://')):
            endpoint = f"https://{endpoint}"
        return endpoint

    @property
    def chat_completions_url(self) -> str:
        return (
            f"{self.base_url}/openai/deployments/{self.deployment_name}"
            f"/chat/completions?api-version={self.api_version}"
        )

    def masked_api_key(self) -> str:
        """로그 출력용 마스킹된 키"""
        if len(self.api_key) <= 8:
            return '****'
        return f"{self.api_key[:4]}****{self.api_key[-4:]}"
