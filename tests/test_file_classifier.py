import pytest

from portal_summarizer.core.file_classifier import classify
from portal_summarizer.models.data_models import DocumentKind, UploadedDocument


def doc(file_name, mime_type=""):
    return UploadedDocument(file_name=file_name, mime_type=mime_type, content=b"")


@pytest.mark.parametrize(
    "mime_type, expected",
    [
        ("text/plain", DocumentKind.TEXT),
        ("text/plain; charset=utf-8", DocumentKind.TEXT),
        ("application/pdf", DocumentKind.PDF),
        ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", DocumentKind.WORD),
        ("application/msword", DocumentKind.WORD),
        ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", DocumentKind.SPREADSHEET),
        ("application/vnd.ms-excel", DocumentKind.SPREADSHEET),
        ("text/csv", DocumentKind.CSV),
        ("image/png", DocumentKind.IMAGE),
        ("image/jpeg", DocumentKind.IMAGE),
    ],
)
def test_classify_by_mime_type(mime_type, expected):
    assert classify(doc("upload.bin", mime_type)) == expected


@pytest.mark.parametrize(
    "file_name, expected",
    [
        ("notes.TXT", DocumentKind.TEXT),
        ("report.pdf", DocumentKind.PDF),
        ("contract.docx", DocumentKind.WORD),
        ("legacy.doc", DocumentKind.WORD),
        ("invoices.xlsx", DocumentKind.SPREADSHEET),
        ("invoices.xls", DocumentKind.SPREADSHEET),
        ("tickets.csv", DocumentKind.CSV),
        ("photo.jpeg", DocumentKind.IMAGE),
    ],
)
def test_classify_falls_back_to_extension(file_name, expected):
    assert classify(doc(file_name)) == expected
    assert classify(doc(file_name, "application/octet-stream")) == expected


def test_mime_type_takes_precedence_over_extension():
    assert classify(doc("report.pdf", "text/plain")) == DocumentKind.TEXT
    assert classify(doc("scan.png", "application/pdf")) == DocumentKind.PDF


def test_unknown_type_is_unsupported():
    assert classify(doc("archive.zip", "application/zip")) == DocumentKind.UNSUPPORTED
    assert classify(doc("no_extension")) == DocumentKind.UNSUPPORTED
