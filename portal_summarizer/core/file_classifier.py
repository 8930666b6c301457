"""
파일 분류기 - MIME 타입/확장자로 추출 전략 선택
"""

from typing import Callable, List, Tuple

from ..models.data_models import DocumentKind, UploadedDocument

TEXT_EXTENSIONS = {'.txt', '.text', '.md', '.log'}
PDF_EXTENSIONS = {'.pdf'}
WORD_EXTENSIONS = {'.doc', '.docx'}
SPREADSHEET_EXTENSIONS = {'.xlsx', '.xls'}
CSV_EXTENSIONS = {'.csv'}
IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.gif', '.bmp', '.webp'}

SPREADSHEET_MIME_TYPES = {
    'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    'application/vnd.ms-excel',
}
CSV_MIME_TYPES = {'text/csv', 'application/csv'}


def _is_word_mime(mime_type: str) -> bool:
    return 'word' in mime_type or 'docx' in mime_type


# 우선순위: 일반 텍스트 → PDF → Word → 스프레드시트/CSV → 이미지
MIME_RULES: List[Tuple[DocumentKind, Callable[[str], bool]]] = [
    (DocumentKind.TEXT, lambda mime: mime == 'text/plain'),
    (DocumentKind.PDF, lambda mime: mime == 'application/pdf'),
    (DocumentKind.WORD, _is_word_mime),
    (DocumentKind.SPREADSHEET, lambda mime: mime in SPREADSHEET_MIME_TYPES),
    (DocumentKind.CSV, lambda mime: mime in CSV_MIME_TYPES),
    (DocumentKind.IMAGE, lambda mime: mime.startswith('image/')),
]

EXTENSION_RULES: List[Tuple[DocumentKind, set]] = [
    (DocumentKind.TEXT, TEXT_EXTENSIONS),
    (DocumentKind.PDF, PDF_EXTENSIONS),
    (DocumentKind.WORD, WORD_EXTENSIONS),
    (DocumentKind.SPREADSHEET, SPREADSHEET_EXTENSIONS),
    (DocumentKind.CSV, CSV_EXTENSIONS),
    (DocumentKind.IMAGE, IMAGE_EXTENSIONS),
]


def classify(document: UploadedDocument) -> DocumentKind:
    """
    문서 분류

    선언된 MIME 타입을 먼저 우선순위대로 확인하고,
    일치하는 규칙이 없으면 확장자로 같은 우선순위를 다시 확인합니다.

    Args:
        document: 업로드 문서

    Returns:
        DocumentKind: 선택된 추출 전략 (해당 없으면 UNSUPPORTED)
    """
    mime_type = (document.mime_type or '').split(';')[0].strip().lower()

    for kind, matches in MIME_RULES:
        if mime_type and matches(mime_type):
            return kind

    extension = document.extension
    for kind, extensions in EXTENSION_RULES:
        if extension in extensions:
            return kind

    return DocumentKind.UNSUPPORTED
