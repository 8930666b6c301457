"""
요약 파이프라인 - Azure OpenAI 채팅 완성 호출
"""

import time
from typing import Any, Callable, Optional

import httpx
import openai
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import AzureChatOpenAI

from ..config.config import Config
from ..exceptions import ConfigurationError, EmptyResponseError, UpstreamError
from ..models.data_models import EndpointConfig, SummaryResponse
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class SummarizationClient:
    """
    요약 클라이언트 (요청당 1회 호출, 재시도 없음)

    Attributes:
        config: 엔드포인트 설정
        llm_factory: 설정 → LangChain 채팅 모델 생성 함수
        http_client: 사용할 httpx 클라이언트 (None이면 openai 기본값)
    """

    def __init__(
        self,
        config: EndpointConfig,
        llm_factory: Optional[Callable[[EndpointConfig], Any]] = None,
        http_client: Optional[httpx.Client] = None
    ):
        """
        Args:
            config: 엔드포인트 설정
            llm_factory: 채팅 모델 생성 함수 (기본값: AzureChatOpenAI)
            http_client: openai SDK에 전달할 httpx 클라이언트
        """
        self.config = config
        self.http_client = http_client
        self.llm_factory = llm_factory or self.build_llm

    def build_llm(self, config: EndpointConfig) -> AzureChatOpenAI:
        """
        설정으로 AzureChatOpenAI 인스턴스 생성

        Args:
            config: 엔드포인트 설정

        Returns:
            AzureChatOpenAI: 재시도가 비활성화된 채팅 모델
        """
        return AzureChatOpenAI(
            azure_endpoint=config.base_url,
            azure_deployment=config.deployment_name,
            api_version=config.api_version,
            api_key=config.api_key,
            max_tokens=Config.SUMMARY_MAX_TOKENS,
            temperature=Config.SUMMARY_TEMPERATURE,
            top_p=Config.SUMMARY_TOP_P,
            frequency_penalty=Config.SUMMARY_FREQUENCY_PENALTY,
            presence_penalty=Config.SUMMARY_PRESENCE_PENALTY,
            max_retries=0,
            http_client=self.http_client,
        )

    def summarize(self, content: str) -> SummaryResponse:
        """
        텍스트 요약

        Args:
            content: 요약할 텍스트 (빈 문자열도 그대로 전송)

        Returns:
            SummaryResponse: 요약, 근사 신뢰도, 소요 시간

        Raises:
            ConfigurationError: 설정 누락 또는 기본값(placeholder)
            UpstreamError: 2xx 이외의 응답
            EmptyResponseError: 모델 응답이 비어 있음
        """
        if not self.config.is_valid():
            raise ConfigurationError(
                "Azure OpenAI 설정이 완료되지 않았습니다 (endpoint, API key, deployment 확인)",
                details={'endpoint': self.config.endpoint, 'deployment': self.config.deployment_name},
            )

        start_time = time.perf_counter()
        logger.debug(
            f"요약 요청: {self.config.chat_completions_url} "
            f"(key={self.config.masked_api_key()}, {len(content)}자)"
        )

        llm = self.llm_factory(self.config)
        messages = [
            SystemMessage(content=Config.SYSTEM_PROMPT),
            HumanMessage(content=content),
        ]

        try:
            response = llm.invoke(messages)
        except openai.APIStatusError as e:
            logger.error(f"Azure OpenAI 오류 응답: {e.status_code}")
            raise UpstreamError(e.status_code, e.response.text) from e

        summary = response.content if isinstance(response.content, str) else ''
        summary = summary.strip()
        if not summary:
            raise EmptyResponseError("모델 응답에 요약 내용이 없습니다")

        processing_time_ms = int((time.perf_counter() - start_time) * 1000)
        logger.debug(f"요약 완료: {len(summary)}자, {processing_time_ms}ms")

        return SummaryResponse(
            summary=summary,
            confidence=Config.SUMMARY_CONFIDENCE,
            processing_time_ms=processing_time_ms,
        )
