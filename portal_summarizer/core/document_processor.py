"""
문서 처리 파이프라인 - 업로드 파일 → 요약용 텍스트
"""

import io
import re
from typing import List, Dict, Optional, Callable, Any

import fitz
import pymupdf4llm
import pandas as pd
from docx import Document as DocxDocument
from tqdm import tqdm

from ..config.config import Config
from ..exceptions import ExtractionError
from ..models.data_models import DocumentKind, ExtractionResult, UploadedDocument
from ..utils.logging_config import get_logger
from .file_classifier import classify

logger = get_logger(__name__)


class DocumentProcessingPipeline:
    """
    업로드 문서 → 텍스트 추출 파이프라인 (콜백 지원)

    파일 종류는 file_classifier.classify()로 결정하고,
    종류별 추출 메서드로 전체 내용을 메모리에서 처리합니다.

    Attributes:
        progress_callback: PDF 변환 진행 상황 콜백 함수
        show_progress: tqdm 진행 바 표시 여부
    """

    def __init__(
        self,
        progress_callback: Optional[Callable[[Dict[str, Any]], None]] = None,
        show_progress: bool = True
    ):
        """
        Args:
            progress_callback: PDF 변환 진행 상황 콜백 함수
                호출 시 전달되는 딕셔너리:
                {
                    'file_name': str,
                    'current_page': int,
                    'total_pages': int,
                    'page_content_length': int,
                    'status': str,  # 'processing', 'empty', 'failed'
                    'error': str
                }
            show_progress: tqdm 진행 바 표시 여부
        """
        self.progress_callback = progress_callback
        self.show_progress = show_progress

    def extract(self, document: UploadedDocument) -> ExtractionResult:
        """
        문서 텍스트 추출

        Args:
            document: 업로드 문서

        Returns:
            ExtractionResult: 추출 결과 (안내문이면 degraded=True)

        Raises:
            ExtractionError: 파서가 문서를 읽지 못한 경우
        """
        kind = classify(document)
        logger.debug(f"텍스트 추출 중: {document.file_name} ({kind.value}, {document.size} bytes)")

        if document.size > Config.MAX_RECOMMENDED_FILE_SIZE:
            logger.warning(f"권장 크기(10MB) 초과 파일: {document.file_name} ({document.size} bytes)")

        if kind in (DocumentKind.TEXT, DocumentKind.CSV):
            return ExtractionResult(self.decode_text(document), document.file_name, kind)

        if kind == DocumentKind.IMAGE:
            return ExtractionResult(self.describe_image(document), document.file_name, kind, degraded=True)

        if kind == DocumentKind.UNSUPPORTED:
            logger.warning(f"지원하지 않는 파일 형식: {document.file_name} ({document.mime_type or 'unknown'})")
            return ExtractionResult(
                self.describe_unsupported(document), document.file_name, kind, degraded=True
            )

        extractors = {
            DocumentKind.PDF: self.pdf_to_text,
            DocumentKind.WORD: self.word_to_text,
            DocumentKind.SPREADSHEET: self.spreadsheet_to_text,
        }

        try:
            text = extractors[kind](document)
        except ExtractionError:
            raise
        except Exception as e:
            # Windows 브라우저는 .csv를 application/vnd.ms-excel로 보고함
            if kind == DocumentKind.SPREADSHEET and document.extension == '.csv':
                logger.debug(f"엑셀 파싱 실패, CSV로 처리: {document.file_name}")
                return ExtractionResult(self.decode_text(document), document.file_name, DocumentKind.CSV)
            logger.warning(f"추출 실패: {document.file_name} - {e}")
            raise ExtractionError(document.file_name, str(e)) from e

        if not text.strip():
            logger.warning(f"추출 결과가 비어 있음: {document.file_name}")
            return ExtractionResult(
                self.describe_empty(document, kind), document.file_name, kind, degraded=True
            )

        logger.debug(f"추출 완료: {document.file_name} ({len(text)}자)")
        return ExtractionResult(text, document.file_name, kind)

    def decode_text(self, document: UploadedDocument) -> str:
        """텍스트 파일 디코딩 (잘못된 바이트는 대체 문자로)"""
        return document.content.decode('utf-8-sig', errors='replace')

    def pdf_to_text(self, document: UploadedDocument) -> str:
        """
        PDF를 페이지별 Markdown으로 변환 후 결합 (진행 상황 콜백 지원)

        Args:
            document: PDF 문서

        Returns:
            str: 페이지 사이를 빈 줄로 구분한 텍스트
        """
        file_name = document.file_name
        pages: List[str] = []

        with fitz.open(stream=document.content, filetype="pdf") as doc:
            total_pages = len(doc)

            with tqdm(total=total_pages, desc="PDF to Markdown", unit="page",
                      disable=not self.show_progress) as pbar:
                for page_num in range(total_pages):
                    progress_info = {
                        'file_name': file_name,
                        'current_page': page_num + 1,
                        'total_pages': total_pages,
                        'page_content_length': 0,
                        'status': 'processing',
                        'error': ''
                    }
                    try:
                        markdown = pymupdf4llm.to_markdown(doc, pages=[page_num])
                        markdown = self.clean_markdown_text(markdown)

                        if markdown:
                            pages.append(markdown)
                            pbar.set_postfix_str(f"len={len(markdown)}")
                        else:
                            progress_info['status'] = 'empty'
                            pbar.set_postfix_str("empty")
                        progress_info['page_content_length'] = len(markdown)

                    except Exception as e:
                        progress_info.update({'status': 'failed', 'error': str(e)})
                        raise ExtractionError(file_name, f"page {page_num + 1}: {e}") from e

                    finally:
                        pbar.update(1)
                        if self.progress_callback:
                            self.progress_callback(progress_info)

        return '\n\n'.join(pages)

    def word_to_text(self, document: UploadedDocument) -> str:
        """
        Word 문서 텍스트 추출 (문단 + 표)

        Args:
            document: Word 문서

        Returns:
            str: 비어 있지 않은 문단과 표 행을 줄 단위로 결합한 텍스트
        """
        doc = DocxDocument(io.BytesIO(document.content))

        lines = [paragraph.text.strip() for paragraph in doc.paragraphs if paragraph.text.strip()]
        for table in doc.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                if any(cells):
                    lines.append(' | '.join(cells))

        return '\n'.join(lines)

    def spreadsheet_to_text(self, document: UploadedDocument) -> str:
        """
        스프레드시트의 모든 시트를 CSV 텍스트로 변환

        Args:
            document: 엑셀 문서

        Returns:
            str: 'Sheet: 이름' 헤더 + CSV 본문을 시트별로 결합한 텍스트
        """
        sheets = pd.read_excel(io.BytesIO(document.content), sheet_name=None, header=None)

        blocks = []
        for sheet_name, frame in sheets.items():
            frame = frame.dropna(how='all')
            if frame.empty:
                continue
            csv_text = frame.to_csv(index=False, header=False).strip()
            blocks.append(f"Sheet: {sheet_name}\n{csv_text}")

        return '\n\n'.join(blocks)

    def describe_image(self, document: UploadedDocument) -> str:
        """이미지 안내문 (텍스트 추출 대신 메타데이터 전달)"""
        return (
            f"Image file: {document.file_name}\n"
            f"Type: {document.mime_type or 'unknown'}\n"
            f"Size: {document.size} bytes\n\n"
            "No text was extracted from this image. "
            "Summarize what can be inferred from the file name and metadata."
        )

    def describe_unsupported(self, document: UploadedDocument) -> str:
        """지원하지 않는 형식 안내문"""
        return (
            f"Document: {document.file_name}\n\n"
            f"File type: {document.mime_type or 'unknown'}\n\n"
            "Text extraction is not available for this file type."
        )

    def describe_empty(self, document: UploadedDocument, kind: DocumentKind) -> str:
        """파싱은 성공했지만 텍스트가 없는 문서 안내문"""
        return (
            f"Document: {document.file_name}\n\n"
            f"File type: {document.mime_type or kind.value}\n"
            f"Size: {document.size} bytes\n\n"
            "The document was read successfully but contains no extractable text."
        )

    def clean_markdown_text(self, text: str) -> str:
        """
        Markdown 텍스트 전처리

        Args:
            text: 원본 텍스트

        Returns:
            str: 전처리된 텍스트
        """
        # 연속 공백 → 단일 공백
        text = re.sub(r'[ \t]+', ' ', text)

        # 연속 개행(3개 이상) → 2개
        text = re.sub(r'\n{3,}', '\n\n', text)

        # 각 줄 앞뒤 공백 제거
        lines = [line.strip() for line in text.split('\n')]
        text = '\n'.join(lines)

        return text.strip()
