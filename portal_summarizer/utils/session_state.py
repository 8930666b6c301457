"""
콘솔 세션 상태 헬퍼 - 요청 진행/알림/업로드 초기화

Streamlit의 st.session_state 같은 dict 형태 객체를 받아 동작하므로
스크립트 실행 없이도 상태 전이를 확인할 수 있습니다.
"""

from typing import Any, MutableMapping, Optional, Tuple

PENDING_KEY = 'pending_request'
FLASH_KEY = 'flash'
UPLOADER_KEY = 'uploader_key'
CURRENT_SUMMARY_KEY = 'current_summary'


def start_request(state: MutableMapping[str, Any], name: str) -> bool:
    """
    요청 시작 표시 (진행 중인 요청이 있으면 무시)

    호출 후 st.rerun()으로 다시 그리면 요약 버튼이 비활성화된 상태로 표시됩니다.

    Args:
        state: 세션 상태
        name: 요청 이름 ('file', 'text')

    Returns:
        bool: 새로 시작했으면 True
    """
    if is_busy(state):
        return False
    state[PENDING_KEY] = name
    return True


def pending_request(state: MutableMapping[str, Any]) -> Optional[str]:
    return state.get(PENDING_KEY)


def is_busy(state: MutableMapping[str, Any]) -> bool:
    return state.get(PENDING_KEY) is not None


def finish_request(
    state: MutableMapping[str, Any],
    level: str,
    message: str,
    detail: str = ''
) -> None:
    """
    요청 종료 및 다음 실행에서 표시할 알림 저장

    Args:
        state: 세션 상태
        level: 'success', 'error', 'warning'
        message: 알림 메시지
        detail: 펼쳐서 볼 부가 내용 (응답 본문 등)
    """
    state[PENDING_KEY] = None
    state[FLASH_KEY] = (level, message, detail)


def pop_flash(state: MutableMapping[str, Any]) -> Optional[Tuple[str, str, str]]:
    """저장된 알림을 꺼냄 (한 번만 표시)"""
    return state.pop(FLASH_KEY, None)


def uploader_key(state: MutableMapping[str, Any]) -> str:
    """파일 업로더 위젯 키 (초기화 시 바뀜)"""
    return f"uploader_{state.get(UPLOADER_KEY, 0)}"


def clear_upload(state: MutableMapping[str, Any]) -> None:
    """선택한 파일과 현재 요약 초기화"""
    state[UPLOADER_KEY] = state.get(UPLOADER_KEY, 0) + 1
    state.pop(CURRENT_SUMMARY_KEY, None)
