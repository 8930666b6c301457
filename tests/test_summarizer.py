from dataclasses import replace

import pytest

from portal_summarizer import (
    ConfigurationError,
    DocumentSummarizer,
    ExtractionError,
)
from portal_summarizer.config.config import Config
from tests.conftest import VALID_KEY


def test_empty_text_file_still_issues_one_call(summarizer, llm_factory, fake_model, make_document):
    record = summarizer.summarize_document(make_document("empty.txt", b"", "text/plain"))

    assert len(llm_factory.configs) == 1
    assert len(fake_model.calls) == 1
    assert fake_model.calls[0][1].content == ""
    assert record.size_label == "0 Bytes"
    assert summarizer.history.list() == [record]


def test_document_record_fields(summarizer, fake_model, make_document):
    content = b"x" * 1536
    record = summarizer.summarize_document(make_document("notes.txt", content, "text/plain"))

    assert record.kind == "document"
    assert record.file_name == "notes.txt"
    assert record.summary == "Short summary of the document."
    assert record.size_label == "1.5 KB"
    assert record.timestamp
    assert fake_model.calls[0][1].content == content.decode()


def test_image_upload_is_recorded_as_image(summarizer, fake_model, make_document):
    record = summarizer.summarize_document(make_document("receipt.jpg", b"\xff\xd8\xff", "image/jpeg"))

    assert record.kind == "image"
    assert "receipt.jpg" in fake_model.calls[0][1].content


def test_unsupported_upload_is_still_summarized(summarizer, fake_model, make_document):
    record = summarizer.summarize_document(make_document("data.bin", b"\x00\x01", "application/octet-stream"))

    assert record.kind == "document"
    assert "data.bin" in fake_model.calls[0][1].content


def test_text_summary_record(summarizer):
    text = "Customer asked about invoice INV-002."
    record = summarizer.summarize_text(text)

    assert record.file_name == Config.TEXT_SUMMARY_LABEL
    assert record.size_label == f"{len(text)} characters"
    assert record.kind == "document"


def test_history_is_most_recent_first_and_deletable(summarizer, make_document):
    first = summarizer.summarize_text("first")
    second = summarizer.summarize_document(make_document("b.txt", b"second", "text/plain"))
    third = summarizer.summarize_text("third")

    assert [item.id for item in summarizer.history.list()] == [third.id, second.id, first.id]

    assert summarizer.delete_history_item(second.id) is True
    assert [item.id for item in summarizer.history.list()] == [third.id, first.id]


def test_missing_api_key_writes_no_history(valid_config, llm_factory, tmp_path, make_document):
    summarizer = DocumentSummarizer(
        config=replace(valid_config, api_key=""),
        history_path=str(tmp_path / "history"),
        llm_factory=llm_factory,
        show_progress=False,
    )

    assert summarizer.is_configured is False
    with pytest.raises(ConfigurationError):
        summarizer.summarize_document(make_document("a.txt", b"hello", "text/plain"))

    assert llm_factory.configs == []
    assert summarizer.history.list() == []


def test_extraction_error_writes_no_history(summarizer, llm_factory, make_document):
    with pytest.raises(ExtractionError):
        summarizer.summarize_document(make_document("broken.pdf", b"garbage", "application/pdf"))

    assert llm_factory.configs == []
    assert summarizer.history.list() == []


def test_update_config_keeps_existing_values_for_blanks(summarizer):
    original_key = summarizer.config.api_key

    config = summarizer.update_config(endpoint="https://fabrikam.openai.azure.com", api_key="")

    assert config is summarizer.config
    assert config.endpoint == "https://fabrikam.openai.azure.com"
    assert config.api_key == original_key
    assert summarizer.is_configured is True


def test_new_config_is_used_for_next_request(summarizer, llm_factory):
    summarizer.update_config(deployment_name="gpt-4o")
    summarizer.summarize_text("hello")

    assert llm_factory.configs[-1].deployment_name == "gpt-4o"


def test_saved_config_is_restored_once_available(valid_config, llm_factory, tmp_path):
    summarizer = DocumentSummarizer(
        config=replace(valid_config, api_key=""),
        history_path=str(tmp_path / "history"),
        llm_factory=llm_factory,
        show_progress=False,
    )
    not_loaded = {"endpoint": None, "api_key": None, "deployment_name": None}
    saved = {"endpoint": "https://fabrikam.openai.azure.com", "api_key": VALID_KEY, "deployment_name": "gpt-4o"}

    # 쿠키 컴포넌트가 아직 값을 돌려주지 않는 첫 실행
    assert summarizer.restore_config(not_loaded) is False
    assert summarizer.is_configured is False

    assert summarizer.restore_config(saved) is True
    assert summarizer.config.endpoint == "https://fabrikam.openai.azure.com"
    assert summarizer.config.deployment_name == "gpt-4o"

    summarizer.summarize_text("hello")
    assert llm_factory.configs[-1].api_key == VALID_KEY


def test_saved_config_does_not_override_valid_config(summarizer, valid_config):
    saved = {"endpoint": "https://other.openai.azure.com", "api_key": "k" * 20, "deployment_name": "other"}

    assert summarizer.restore_config(saved) is True
    assert summarizer.config == valid_config
