"""
히스토리 관리자 - 요약 기록 저장/로드/삭제
"""

import json
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ..config.config import Config
from ..models.data_models import SummaryRecord
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class HistoryStore:
    """
    요약 히스토리 저장소 - 최신 항목이 앞에 오는 순서 유지

    Attributes:
        db_path: 저장 디렉토리
        key: 저장 키 (파일명)
        records: 메모리상의 기록 리스트 (최신순)
    """

    def __init__(self, db_path: str = Config.DEFAULT_HISTORY_PATH, key: str = Config.HISTORY_KEY):
        """
        Args:
            db_path: 저장 디렉토리
            key: 저장 키
        """
        self.db_path = Path(db_path)
        self.db_path.mkdir(parents=True, exist_ok=True)
        self.key = key
        self.records: List[SummaryRecord] = self.load()

    @property
    def file_path(self) -> Path:
        return self.db_path / f"{self.key}.json"

    def load(self) -> List[SummaryRecord]:
        """
        저장된 히스토리 로드

        파일이 손상되어 읽을 수 없으면 경고 후 빈 히스토리로 시작합니다.

        Returns:
            List[SummaryRecord]: 기록 리스트 (파일이 없으면 빈 리스트)
        """
        if not self.file_path.exists():
            logger.debug(f"히스토리 미존재, 빈 히스토리 사용: {self.file_path}")
            return []

        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            records = [SummaryRecord.from_dict(item) for item in data]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"히스토리 파일 손상, 빈 히스토리로 시작: {self.file_path} ({e})")
            return []

        logger.debug(f"히스토리 로드 완료: {len(records)}건")
        return records

    def save(self) -> None:
        """히스토리를 JSON 파일로 저장"""
        self._write(self.records)

    def _write(self, records: List[SummaryRecord]) -> None:
        with open(self.file_path, 'w', encoding='utf-8') as f:
            json.dump([record.to_dict() for record in records], f, ensure_ascii=False, indent=2)

    def add(self, record: SummaryRecord) -> SummaryRecord:
        """
        기록 추가 (맨 앞에 삽입)

        파일 저장에 성공한 뒤에만 메모리상의 기록을 교체합니다.

        Args:
            record: 요약 기록

        Returns:
            SummaryRecord: 추가된 기록
        """
        records = [record] + self.records
        self._write(records)
        self.records = records
        logger.debug(f"히스토리 추가: {record.file_name} (id={record.id})")
        return record

    def delete(self, record_id: str) -> bool:
        """
        기록 삭제

        Args:
            record_id: 삭제할 기록 ID

        Returns:
            bool: 삭제했으면 True, 해당 ID가 없으면 False
        """
        for idx, record in enumerate(self.records):
            if record.id == record_id:
                records = self.records[:idx] + self.records[idx + 1:]
                self._write(records)
                self.records = records
                logger.debug(f"히스토리 삭제: id={record_id}")
                return True

        logger.warning(f"삭제할 히스토리 없음: id={record_id}")
        return False

    def get(self, record_id: str) -> Optional[SummaryRecord]:
        return next((record for record in self.records if record.id == record_id), None)

    def list(self) -> List[SummaryRecord]:
        """최신순 기록 리스트 (복사본)"""
        return list(self.records)

    def clear(self) -> None:
        self._write([])
        self.records = []

    def __len__(self) -> int:
        return len(self.records)

    def to_dataframe(self) -> pd.DataFrame:
        """
        히스토리 표시용 DataFrame

        Returns:
            pd.DataFrame: 기록별 한 행 (최신순)
        """
        columns = ['id', 'kind', 'file_name', 'timestamp', 'size_label', 'summary']
        return pd.DataFrame([record.to_dict() for record in self.records], columns=columns)
