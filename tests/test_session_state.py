from portal_summarizer.utils.session_state import (
    clear_upload,
    finish_request,
    is_busy,
    pending_request,
    pop_flash,
    start_request,
    uploader_key,
)


def test_request_stays_busy_until_finished():
    state = {}

    assert start_request(state, "file") is True
    assert is_busy(state) is True
    assert pending_request(state) == "file"

    # 진행 중에는 두 번째 요청을 시작하지 않음
    assert start_request(state, "text") is False
    assert pending_request(state) == "file"

    finish_request(state, "success", "요약 완료")
    assert is_busy(state) is False
    assert start_request(state, "text") is True


def test_flash_is_shown_once():
    state = {}
    start_request(state, "file")
    finish_request(state, "error", "요약 실패: HTTP 401", '{"error": "denied"}')

    assert pop_flash(state) == ("error", "요약 실패: HTTP 401", '{"error": "denied"}')
    assert pop_flash(state) is None


def test_clear_upload_resets_file_and_summary():
    state = {"current_summary": "old summary"}
    before = uploader_key(state)

    clear_upload(state)

    assert "current_summary" not in state
    assert uploader_key(state) != before

    clear_upload(state)
    assert uploader_key(state) == "uploader_2"
