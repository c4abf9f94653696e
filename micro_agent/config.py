"""Configuration: .env + environment variables."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .errors import ConfigError
from .tools import Tool

load_dotenv(override=True)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_MAX_TOKENS = 4096


@dataclass
class AgentConfig:
    """Everything an Agent needs. Values are opaque to the loop."""
    model: str
    max_tokens: int
    api_key: str
    tools: list[Tool] = field(default_factory=list)
    system_prompt: str = ""
    base_url: str | None = None


def _max_tokens_from_env() -> int:
    raw = os.getenv("MAX_TOKENS", str(DEFAULT_MAX_TOKENS))
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"MAX_TOKENS must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"MAX_TOKENS must be positive, got {value}")
    return value


def load_config(tools: list[Tool], system_prompt: str) -> AgentConfig:
    """Build an AgentConfig from the environment. Requires ANTHROPIC_API_KEY."""
    api_key = os.getenv("ANTHROPIC_API_KEY")
    if not api_key:
        raise ConfigError("ANTHROPIC_API_KEY environment variable is required.")

    return AgentConfig(
        model=os.getenv("MODEL_ID", DEFAULT_MODEL),
        max_tokens=_max_tokens_from_env(),
        api_key=api_key,
        tools=list(tools),
        system_prompt=system_prompt,
        base_url=os.getenv("ANTHROPIC_BASE_URL") or None,
    )
