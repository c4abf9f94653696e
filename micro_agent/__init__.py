"""micro_agent - a single-session tool-use agent loop on the Anthropic Messages API."""

from .agent import Agent
from .config import AgentConfig, load_config
from .errors import (
    AgentError,
    ConfigError,
    DuplicateToolError,
    ProviderError,
    ToolExecutionError,
)
from .tools import Tool, ToolContext, ToolDescriptor, ToolRegistry, tool

__all__ = [
    "Agent",
    "AgentConfig",
    "AgentError",
    "ConfigError",
    "DuplicateToolError",
    "ProviderError",
    "Tool",
    "ToolContext",
    "ToolDescriptor",
    "ToolExecutionError",
    "ToolRegistry",
    "load_config",
    "tool",
]
