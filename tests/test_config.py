import pytest

from micro_agent import ConfigError, load_config
from micro_agent.bash_tool import bash_tool
from micro_agent.config import DEFAULT_MAX_TOKENS, DEFAULT_MODEL


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ANTHROPIC_API_KEY", "MODEL_ID", "MAX_TOKENS", "ANTHROPIC_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")

    config = load_config([bash_tool], "prompt")

    assert config.api_key == "sk-test"
    assert config.model == DEFAULT_MODEL
    assert config.max_tokens == DEFAULT_MAX_TOKENS
    assert config.tools == [bash_tool]
    assert config.system_prompt == "prompt"
    assert config.base_url is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    monkeypatch.setenv("MODEL_ID", "claude-other")
    monkeypatch.setenv("MAX_TOKENS", "1024")
    monkeypatch.setenv("ANTHROPIC_BASE_URL", "http://localhost:8080")

    config = load_config([], "")

    assert config.model == "claude-other"
    assert config.max_tokens == 1024
    assert config.base_url == "http://localhost:8080"


def test_missing_api_key():
    with pytest.raises(ConfigError, match="ANTHROPIC_API_KEY"):
        load_config([], "")


@pytest.mark.parametrize("value", ["lots", "0", "-5"])
def test_invalid_max_tokens(monkeypatch, value):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    monkeypatch.setenv("MAX_TOKENS", value)

    with pytest.raises(ConfigError, match="MAX_TOKENS"):
        load_config([], "")
