"""
DocumentSummarizer 사용 예제

로컬 파일과 텍스트를 요약하고 히스토리를 조회하는 기본 예제입니다.
.env 파일에 AZURE_OPENAI_ENDPOINT, AZURE_OPENAI_API_KEY,
AZURE_OPENAI_DEPLOYMENT 를 설정한 뒤 실행하세요.
"""

import sys
from pathlib import Path

from portal_summarizer import (
    Config,
    DocumentSummarizer,
    SummarizerError,
    UploadedDocument,
)


def main():
    project_root = Path(__file__).parent.parent
    data_path = project_root / 'data'

    config = Config.load_endpoint_config()
    summarizer = DocumentSummarizer(config=config, history_path=str(data_path / 'history'))

    if not summarizer.is_configured:
        print("Azure OpenAI 설정이 필요합니다 (.env 확인)")
        return 1

    # 1. 파일 요약
    print("=" * 60)
    print("1. 파일 요약")
    print("=" * 60)

    files = sys.argv[1:]  # 예: python examples/basic_usage.py report.pdf notes.txt
    for file_path in files:
        try:
            record = summarizer.summarize_document(UploadedDocument.from_path(file_path))
        except SummarizerError as e:
            print(f"[실패] {file_path}: {e}")
            continue
        print(f"\n{record.file_name} ({record.size_label})\n{record.summary}\n")

    # 2. 텍스트 요약
    print("=" * 60)
    print("2. 텍스트 요약")
    print("=" * 60)

    text = (
        "The quarterly report shows revenue growth of 12% driven by the new "
        "subscription tier, while support ticket volume fell after the portal redesign."
    )
    try:
        record = summarizer.summarize_text(text)
        print(f"\n{record.summary}\n")
    except SummarizerError as e:
        print(f"[실패] {e}")

    # 3. 히스토리
    print("=" * 60)
    print("3. 요약 히스토리")
    print("=" * 60)
    print(summarizer.history.to_dataframe()[['timestamp', 'kind', 'file_name', 'size_label']])
    return 0


if __name__ == "__main__":
    sys.exit(main())
