import pytest

from portal_summarizer.config.config import Config
from portal_summarizer.models.data_models import EndpointConfig
from tests.conftest import VALID_KEY

ENV_NAMES = (Config.ENV_ENDPOINT, Config.ENV_API_KEY, Config.ENV_DEPLOYMENT_NAME, Config.ENV_API_VERSION)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_are_placeholders(clean_env, tmp_path):
    config = Config.load_endpoint_config(str(tmp_path / "missing.env"))

    assert config.endpoint == Config.DEFAULT_ENDPOINT
    assert config.api_key == ""
    assert config.deployment_name == Config.DEFAULT_DEPLOYMENT_NAME
    assert config.api_version == Config.DEFAULT_API_VERSION
    assert config.is_valid() is False


def test_environment_values_are_loaded(clean_env, tmp_path):
    clean_env.setenv(Config.ENV_ENDPOINT, "contoso.openai.azure.com")
    clean_env.setenv(Config.ENV_API_KEY, f"  {VALID_KEY}  ")
    clean_env.setenv(Config.ENV_DEPLOYMENT_NAME, "gpt-4o")

    config = Config.load_endpoint_config(str(tmp_path / "missing.env"))

    assert config.api_key == VALID_KEY
    assert config.deployment_name == "gpt-4o"
    assert config.is_valid() is True


def test_dotenv_file_is_read(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        f"{Config.ENV_ENDPOINT}=https://fabrikam.openai.azure.com\n"
        f"{Config.ENV_API_KEY}={VALID_KEY}\n"
        f"{Config.ENV_API_VERSION}=2024-06-01\n"
    )

    config = Config.load_endpoint_config(str(env_file))

    assert config.endpoint == "https://fabrikam.openai.azure.com"
    assert config.api_version == "2024-06-01"
    assert config.is_valid() is True


def test_update_ignores_empty_values(valid_config):
    updated = valid_config.update(endpoint="", api_key=None, deployment_name="  gpt-4o  ")

    assert updated.endpoint == valid_config.endpoint
    assert updated.api_key == valid_config.api_key
    assert updated.deployment_name == "gpt-4o"
    assert valid_config.deployment_name == "gpt-35-turbo"


def test_is_valid_requires_long_key_and_real_values():
    config = EndpointConfig("contoso.openai.azure.com", "x" * 11, "gpt-35-turbo", "2024-02-15-preview")
    assert config.is_valid() is True
    assert config.update(api_key="x" * 10).is_valid() is False
    assert config.update(endpoint="https://your-endpoint.openai.azure.com").is_valid() is False
    assert config.update(deployment_name="your-deployment-name").is_valid() is False


@pytest.mark.parametrize(
    "endpoint",
    ["contoso.openai.azure.com", "https://contoso.openai.azure.com/", "https://contoso.openai.azure.com"],
)
def test_chat_completions_url(endpoint):
    config = EndpointConfig(endpoint, VALID_KEY, "gpt-35-turbo", "2024-02-15-preview")

    assert config.base_url == "https://contoso.openai.azure.com"
    assert config.chat_completions_url == (
        "https://contoso.openai.azure.com/openai/deployments/gpt-35-turbo"
        "/chat/completions?api-version=2024-02-15-preview"
    )


def test_masked_api_key_hides_the_middle(valid_config):
    masked = valid_config.masked_api_key()

    assert masked == f"{VALID_KEY[:4]}****{VALID_KEY[-4:]}"
    assert VALID_KEY not in masked
