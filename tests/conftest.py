import pytest
from langchain_core.messages import AIMessage

from portal_summarizer import DocumentSummarizer, EndpointConfig, UploadedDocument

VALID_KEY = "0123456789abcdef0123456789abcdef"


class FakeChatModel:
    """요청을 기록하고 고정 응답을 돌려주는 채팅 모델"""

    def __init__(self, content="  Short summary of the document.  ", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.content)


class FakeLLMFactory:
    def __init__(self, model):
        self.model = model
        self.configs = []

    def __call__(self, config):
        self.configs.append(config)
        return self.model


@pytest.fixture
def valid_config():
    return EndpointConfig(
        endpoint="https://contoso.openai.azure.com",
        api_key=VALID_KEY,
        deployment_name="gpt-35-turbo",
        api_version="2024-02-15-preview",
    )


@pytest.fixture
def fake_model():
    return FakeChatModel()


@pytest.fixture
def llm_factory(fake_model):
    return FakeLLMFactory(fake_model)


@pytest.fixture
def summarizer(valid_config, llm_factory, tmp_path):
    return DocumentSummarizer(
        config=valid_config,
        history_path=str(tmp_path / "history"),
        llm_factory=llm_factory,
        show_progress=False,
    )


@pytest.fixture
def make_document():
    def _make(file_name, content=b"", mime_type=""):
        return UploadedDocument(file_name=file_name, mime_type=mime_type, content=content)
    return _make
