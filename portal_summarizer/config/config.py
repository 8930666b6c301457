"""
설정 모듈 - 환경변수 및 기본값 중앙화
"""

import os
from pathlib import Path
from typing import Optional

from ..models.data_models import EndpointConfig


class Config:
    """
    애플리케이션 설정 클래스

    이 클래스는 요약 서비스에서 사용되는 설정 값을 중앙에서 관리합니다.
    엔드포인트 기본값, 요청 파라미터, 프롬프트, 히스토리 저장 경로 등을 포함합니다.
    """

    # Azure OpenAI 엔드포인트 기본값 (UI 또는 환경 변수로 설정)
    DEFAULT_ENDPOINT: str = "your-endpoint.openai.azure.com"
    DEFAULT_API_KEY: str = ""  # API 키는 코드에 두지 않음
    DEFAULT_DEPLOYMENT_NAME: str = "gpt-35-turbo"
    DEFAULT_API_VERSION: str = "2024-02-15-preview"

    # 환경 변수 이름
    ENV_ENDPOINT: str = "AZURE_OPENAI_ENDPOINT"
    ENV_API_KEY: str = "AZURE_OPENAI_API_KEY"
    ENV_DEPLOYMENT_NAME: str = "AZURE_OPENAI_DEPLOYMENT"
    ENV_API_VERSION: str = "AZURE_OPENAI_API_VERSION"

    # 요청 파라미터
    SUMMARY_MAX_TOKENS: int = 500
    SUMMARY_TEMPERATURE: float = 0.3
    SUMMARY_TOP_P: float = 1.0
    SUMMARY_FREQUENCY_PENALTY: float = 0.0
    SUMMARY_PRESENCE_PENALTY: float = 0.0

    # Azure OpenAI는 신뢰도를 제공하지 않으므로 근사 고정값 사용
    SUMMARY_CONFIDENCE: float = 0.95

    SYSTEM_PROMPT: str = (
        "Please provide a comprehensive summary of the following content. "
        "Extract the key points, main ideas, and important details. "
        "Format your response in clear, readable paragraphs."
    )

    # 업로드 설정
    MAX_RECOMMENDED_FILE_SIZE: int = 10 * 1024 * 1024  # 10MB 초과 시 경고만
    ACCEPTED_FILE_TYPES: list = ["pdf", "doc", "docx", "txt", "csv", "xlsx", "xls",
                                 "png", "jpg", "jpeg", "gif"]

    # 히스토리 설정
    DEFAULT_HISTORY_PATH: str = "./data/history"
    HISTORY_KEY: str = "summary-history"
    TEXT_SUMMARY_LABEL: str = "Text Summary"

    @classmethod
    def load_endpoint_config(cls, env_file: Optional[str] = None) -> EndpointConfig:
        """
        .env 파일과 환경 변수에서 엔드포인트 설정 로드

        값이 없는 항목은 기본값(placeholder)을 사용하므로,
        반환된 설정은 is_valid()가 False일 수 있습니다.

        Args:
            env_file: .env 파일 경로 (None이면 기본 탐색)

        Returns:
            EndpointConfig: 로드된 설정
        """
        from dotenv import load_dotenv
        from ..utils.logging_config import get_logger
        logger = get_logger(__name__)

        load_dotenv(env_file)

        config = EndpointConfig(
            endpoint=(os.getenv(cls.ENV_ENDPOINT) or cls.DEFAULT_ENDPOINT).strip(),
            api_key=(os.getenv(cls.ENV_API_KEY) or cls.DEFAULT_API_KEY).strip(),
            deployment_name=(os.getenv(cls.ENV_DEPLOYMENT_NAME) or cls.DEFAULT_DEPLOYMENT_NAME).strip(),
            api_version=(os.getenv(cls.ENV_API_VERSION) or cls.DEFAULT_API_VERSION).strip(),
        )

        if config.api_key:
            logger.debug(f"{cls.ENV_API_KEY} [{config.masked_api_key()}] 환경변수 로드 완료")
        else:
            logger.warning(f"{cls.ENV_API_KEY}가 설정되지 않아 요약 기능은 설정 후 사용 가능")

        return config

    @classmethod
    def get_history_path(cls, custom_path: Optional[str] = None) -> Path:
        """
        히스토리 저장 경로 반환

        Args:
            custom_path (Optional[str]): 사용자 지정 경로 (기본값: None)

        Returns:
            Path: 저장 경로 (사용자 지정 경로가 없으면 기본 경로 반환)
        """
        path = custom_path or cls.DEFAULT_HISTORY_PATH
        return Path(path)
