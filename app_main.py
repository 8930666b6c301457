"""
Streamlit 문서 요약 애플리케이션
Description: 업로드 문서/텍스트 요약 (Azure OpenAI) 웹 인터페이스
"""

import os
import warnings
import logging

# Streamlit secrets 경로 설정 (경고 방지)
os.environ['STREAMLIT_SECRETS_PATH'] = ''

warnings.filterwarnings('ignore', message='.*st.cache is deprecated.*')

# Streamlit 로깅 레벨 조정 (secrets 메시지 숨김)
logging.getLogger('streamlit').setLevel(logging.ERROR)

import streamlit as st

st.set_page_config(
    page_title="AI 문서 요약",
    page_icon="🤖",
    layout="wide",
    initial_sidebar_state="expanded"
)

from typing import Any, Callable, Dict, Optional, Tuple
import extra_streamlit_components as stx

from portal_summarizer import (
    Config,
    ConfigurationError,
    DocumentSummarizer,
    EndpointConfig,
    ExtractionError,
    SummarizerError,
    UpstreamError,
    UploadedDocument,
)
from portal_summarizer.utils.formatting import format_file_size
from portal_summarizer.utils.session_state import (
    clear_upload,
    finish_request,
    is_busy,
    pending_request,
    pop_flash,
    start_request,
    uploader_key,
)

# CookieManager 초기화
cookie_manager = stx.CookieManager()

COOKIE_KEYS = {
    'endpoint': 'azure_openai_endpoint',
    'api_key': 'azure_openai_api_key',
    'deployment_name': 'azure_openai_deployment',
}


def load_saved_config() -> Dict[str, Optional[str]]:
    """쿠키에 저장된 설정 (컴포넌트가 아직 로드되지 않았으면 None 값)"""
    return {field: cookie_manager.get(key) for field, key in COOKIE_KEYS.items()}


def save_config_to_cookie(config: EndpointConfig) -> None:
    """설정을 쿠키에 저장합니다."""
    for field, key in COOKIE_KEYS.items():
        cookie_manager.set(key, getattr(config, field), expires_at=None, key=f"set_{key}")


def get_summarizer() -> DocumentSummarizer:
    """
    세션별 DocumentSummarizer (최초 1회 생성)

    쿠키는 첫 실행에서 비어 있을 수 있으므로, 설정이 유효해질 때까지
    매 실행마다 쿠키 값을 다시 적용합니다. (우선순위: 쿠키 > 환경변수 > 기본값)
    """
    if 'summarizer' not in st.session_state:
        st.session_state.summarizer = DocumentSummarizer(
            config=Config.load_endpoint_config(),
            history_path=str(Config.get_history_path()),
            show_progress=False
        )
    summarizer = st.session_state.summarizer
    summarizer.restore_config(load_saved_config())
    return summarizer


def display_config_form(summarizer: DocumentSummarizer) -> None:
    """Azure OpenAI 설정 입력 UI"""
    config = summarizer.config

    with st.form("config_form"):
        st.markdown("### Azure OpenAI 설정")
        endpoint = st.text_input(
            "Azure OpenAI Endpoint",
            value=config.endpoint,
            placeholder="https://your-resource-name.openai.azure.com",
            help="Azure OpenAI 리소스의 엔드포인트 URL"
        )
        api_key = st.text_input(
            "API Key",
            value=config.api_key,
            type="password",
            help="Azure 포털에서 발급받은 API 키"
        )
        deployment_name = st.text_input(
            "Deployment Name",
            value=config.deployment_name,
            placeholder="gpt-35-turbo",
            help="모델 배포 이름"
        )

        if st.form_submit_button("설정 저장", use_container_width=True):
            new_config = summarizer.update_config(
                endpoint=endpoint,
                api_key=api_key,
                deployment_name=deployment_name
            )
            if new_config.is_valid():
                save_config_to_cookie(new_config)
                st.session_state.show_config = False
                st.success("설정 저장 완료")
            else:
                st.warning("설정은 저장되었지만 아직 불완전합니다")


def describe_error(error: SummarizerError) -> Tuple[str, str]:
    """예외 종류별 (메시지, 부가 내용)"""
    if isinstance(error, ConfigurationError):
        st.session_state.show_config = True
        return "Azure OpenAI 설정이 필요합니다", ""
    if isinstance(error, UpstreamError):
        return f"요약 실패: HTTP {error.status_code}", error.body
    if isinstance(error, ExtractionError):
        return f"텍스트 추출 실패: {error.file_name} ({error.reason})", ""
    return f"요약 실패: {error}", ""


def display_flash() -> None:
    """이전 실행에서 저장한 알림 표시"""
    flash = pop_flash(st.session_state)
    if flash is None:
        return
    level, message, detail = flash
    getattr(st, level)(message)
    if detail:
        with st.expander("응답 본문"):
            st.code(detail)


def run_request(work: Callable[[], None]) -> None:
    """
    진행 중인 요청 실행 후 결과 알림을 저장하고 다시 그림

    요청 중에는 start_request() 이후의 재실행에서 버튼이 비활성화되어 있습니다.
    """
    try:
        with st.spinner("처리 중..."):
            work()
        finish_request(st.session_state, 'success', "요약 완료")
    except SummarizerError as e:
        finish_request(st.session_state, 'error', *describe_error(e))
    finally:
        if is_busy(st.session_state):
            finish_request(st.session_state, 'error', "요약 실패")
    st.rerun()


def create_pdf_progress_callback() -> tuple:
    """PDF 변환용 progress callback"""
    progress_bar = st.progress(0)
    status_text = st.empty()

    def callback(info: Dict[str, Any]) -> None:
        current = info['current_page']
        total = info['total_pages']
        progress_bar.progress(current / total if total > 0 else 0)
        status_text.text(f"PDF 변환: {info['file_name']} ({current}/{total}) - {info['status']}")

    return callback, progress_bar, status_text


def upload_tab(summarizer: DocumentSummarizer) -> None:
    st.subheader("문서 또는 이미지 업로드")

    if not summarizer.is_configured:
        st.warning("Azure OpenAI가 설정되지 않았습니다. 사이드바에서 설정하세요.")
        return

    uploaded_file = st.file_uploader(
        "요약할 파일 선택",
        type=Config.ACCEPTED_FILE_TYPES,
        help="PDF, DOC, TXT, CSV, Excel, 이미지 파일",
        key=uploader_key(st.session_state)
    )
    if uploaded_file is None:
        return

    document = UploadedDocument(
        file_name=uploaded_file.name,
        mime_type=uploaded_file.type or '',
        content=uploaded_file.getvalue()
    )
    st.caption(f"{document.file_name} | {format_file_size(document.size)}")

    busy = is_busy(st.session_state)
    col1, col2, _ = st.columns([1, 1, 4])
    with col1:
        if st.button("초기화", disabled=busy, key="clear_upload", use_container_width=True):
            clear_upload(st.session_state)
            st.rerun()
    with col2:
        if st.button("요약", disabled=busy, key="summarize_file", use_container_width=True):
            start_request(st.session_state, 'file')
            st.rerun()

    if pending_request(st.session_state) == 'file':
        callback, progress_bar, status_text = create_pdf_progress_callback()
        summarizer.doc_pipeline.progress_callback = callback

        def work() -> None:
            record = summarizer.summarize_document(document)
            st.session_state.current_summary = record.summary

        try:
            run_request(work)
        finally:
            summarizer.doc_pipeline.progress_callback = None
            progress_bar.empty()
            status_text.empty()

    if st.session_state.get('current_summary'):
        st.text_area("AI 요약", st.session_state.current_summary, height=200, disabled=True)


def text_tab(summarizer: DocumentSummarizer) -> None:
    st.subheader("텍스트 요약")
    text = st.text_area(
        "요약할 텍스트",
        placeholder="요약할 텍스트를 붙여넣으세요...",
        height=200,
        key="text_to_summarize"
    )

    busy = is_busy(st.session_state)
    if st.button("요약", disabled=not text or busy, key="summarize_text"):
        if not text.strip():
            st.error("요약할 텍스트를 입력하세요")
            return
        start_request(st.session_state, 'text')
        st.rerun()

    if pending_request(st.session_state) == 'text':
        def work() -> None:
            record = summarizer.summarize_text(text)
            st.session_state.text_summary = record.summary

        run_request(work)

    if st.session_state.get('text_summary'):
        st.text_area("AI 요약", st.session_state.text_summary, height=150, disabled=True)


def history_tab(summarizer: DocumentSummarizer) -> None:
    st.subheader("요약 히스토리")
    records = summarizer.history.list()

    if not records:
        st.info("아직 요약 기록이 없습니다")
        return

    for record in records:
        icon = "🖼️" if record.kind == 'image' else "📄"
        with st.container(border=True):
            col1, col2 = st.columns([4, 1])
            with col1:
                st.markdown(f"{icon} **{record.file_name}**")
            with col2:
                st.caption(record.timestamp)
            st.write(record.summary)
            col1, col2 = st.columns([4, 1])
            with col1:
                st.caption(record.size_label)
            with col2:
                if st.button("삭제", key=f"delete_{record.id}"):
                    summarizer.delete_history_item(record.id)
                    st.rerun()


def main():
    """메인 애플리케이션"""

    st.title("AI 문서 요약")
    st.caption("문서 또는 이미지를 업로드하거나 텍스트를 붙여넣어 Azure OpenAI로 요약합니다.")

    summarizer = get_summarizer()
    display_flash()

    with st.sidebar:
        st.header("설정")
        if summarizer.is_configured:
            st.success("Azure OpenAI 설정됨")
            if st.button("설정 변경", use_container_width=True):
                st.session_state.show_config = True
        else:
            st.session_state.show_config = True

        if st.session_state.get('show_config'):
            display_config_form(summarizer)

        st.divider()
        st.subheader("시스템 정보")
        st.caption(f"**배포**: {summarizer.config.deployment_name}")
        st.caption(f"**API 버전**: {summarizer.config.api_version}")
        st.caption(f"**최대 토큰**: {Config.SUMMARY_MAX_TOKENS}")

    tab1, tab2, tab3 = st.tabs(["업로드 & 요약", "텍스트 요약", "요약 히스토리"])

    with tab1:
        upload_tab(summarizer)
    with tab2:
        text_tab(summarizer)
    with tab3:
        history_tab(summarizer)

    st.divider()
    st.caption("지원 형식: PDF, Word(.doc/.docx), Excel(.xlsx/.xls), CSV, TXT, 이미지 | 10MB 이하 권장")


if __name__ == "__main__":
    main()
