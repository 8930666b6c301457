"""
DocumentSummarizer - 문서 요약 통합 인터페이스
"""

from typing import Any, Callable, Dict, Optional

import httpx

from .config.config import Config
from .core.document_processor import DocumentProcessingPipeline
from .core.file_classifier import classify
from .core.history_manager import HistoryStore
from .core.summary_pipeline import SummarizationClient
from .models.data_models import (
    DocumentKind,
    EndpointConfig,
    SummaryRecord,
    UploadedDocument,
)
from .utils.formatting import format_file_size, format_timestamp
from .utils.logging_config import get_logger

logger = get_logger(__name__)


class DocumentSummarizer:
    """
    DocumentSummarizer - 문서 요약 통합 인터페이스

    Features:
    - 파일 업로드 → 텍스트 추출 → 요약 → 히스토리 기록
    - 붙여넣은 텍스트 직접 요약
    - 엔드포인트 설정 갱신

    요청 중 어느 단계든 예외가 발생하면 히스토리에는 기록하지 않습니다.

    Attributes:
        config: 현재 엔드포인트 설정
        doc_pipeline: DocumentProcessingPipeline 인스턴스
        history: HistoryStore 인스턴스
        llm_factory: 채팅 모델 생성 함수 (테스트용 주입)
        http_client: openai SDK에 전달할 httpx 클라이언트
    """

    def __init__(
        self,
        config: EndpointConfig,
        history_path: str = Config.DEFAULT_HISTORY_PATH,
        pdf_progress_callback: Optional[Callable[[Dict[str, Any]], None]] = None,
        llm_factory: Optional[Callable[[EndpointConfig], Any]] = None,
        http_client: Optional[httpx.Client] = None,
        show_progress: bool = True
    ):
        """
        Args:
            config: 엔드포인트 설정
            history_path: 히스토리 저장 경로
            pdf_progress_callback: PDF 변환 진행 콜백
            llm_factory: 채팅 모델 생성 함수
            http_client: httpx 클라이언트
            show_progress: tqdm 진행 바 표시 여부
        """
        self.config = config
        self.llm_factory = llm_factory
        self.http_client = http_client
        self.doc_pipeline = DocumentProcessingPipeline(
            progress_callback=pdf_progress_callback,
            show_progress=show_progress
        )
        self.history = HistoryStore(history_path)

    @property
    def is_configured(self) -> bool:
        return self.config.is_valid()

    def update_config(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        deployment_name: Optional[str] = None,
        api_version: Optional[str] = None
    ) -> EndpointConfig:
        """
        엔드포인트 설정 갱신 (빈 값은 기존 값 유지)

        Returns:
            EndpointConfig: 갱신된 설정
        """
        self.config = self.config.update(
            endpoint=endpoint,
            api_key=api_key,
            deployment_name=deployment_name,
            api_version=api_version,
        )
        if self.config.is_valid():
            logger.info("Azure OpenAI 설정 갱신 완료")
        else:
            logger.warning("설정은 저장되었지만 아직 불완전합니다")
        return self.config

    def restore_config(self, saved: Dict[str, Optional[str]]) -> bool:
        """
        저장된 설정(쿠키 등) 복원

        아직 유효한 설정이 없을 때만 적용하므로, 저장소가 늦게 준비되는
        경우에도 매 실행마다 호출할 수 있습니다.

        Args:
            saved: update_config 인자 이름 → 저장된 값 (없으면 None)

        Returns:
            bool: 복원 후 설정이 유효하면 True
        """
        if self.is_configured:
            return True
        if not any(saved.values()):
            return False

        self.config = self.config.update(**saved)
        if self.config.is_valid():
            logger.info("저장된 Azure OpenAI 설정 복원 완료")
        return self.config.is_valid()

    def _client(self) -> SummarizationClient:
        return SummarizationClient(self.config, llm_factory=self.llm_factory, http_client=self.http_client)

    def summarize_document(self, document: UploadedDocument) -> SummaryRecord:
        """
        파일 요약 전체 처리

        Args:
            document: 업로드 문서

        Returns:
            SummaryRecord: 히스토리에 추가된 기록
        """
        logger.debug(f"문서 요약 시작: {document.file_name}")

        extraction = self.doc_pipeline.extract(document)
        if extraction.degraded:
            logger.warning(f"안내문으로 요약 요청: {document.file_name} ({extraction.kind.value})")

        result = self._client().summarize(extraction.text)

        record = SummaryRecord(
            kind='image' if classify(document) == DocumentKind.IMAGE else 'document',
            file_name=document.file_name,
            summary=result.summary,
            timestamp=format_timestamp(),
            size_label=format_file_size(document.size),
        )
        return self.history.add(record)

    def summarize_text(self, text: str, label: str = Config.TEXT_SUMMARY_LABEL) -> SummaryRecord:
        """
        붙여넣은 텍스트 요약

        Args:
            text: 요약할 텍스트
            label: 히스토리에 표시할 이름

        Returns:
            SummaryRecord: 히스토리에 추가된 기록
        """
        logger.debug(f"텍스트 요약 시작: {len(text)}자")

        result = self._client().summarize(text)

        record = SummaryRecord(
            kind='document',
            file_name=label,
            summary=result.summary,
            timestamp=format_timestamp(),
            size_label=f"{len(text)} characters",
        )
        return self.history.add(record)

    def delete_history_item(self, record_id: str) -> bool:
        return self.history.delete(record_id)
