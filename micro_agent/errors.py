"""Exception types raised by micro_agent."""


class AgentError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(AgentError):
    """Missing or invalid configuration."""


class DuplicateToolError(AgentError, ValueError):
    """Two tools were registered under the same name."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate tool name: {name!r}")
        self.name = name


class ProviderError(AgentError):
    """A call to the LLM provider failed (transport, status or payload)."""


class ToolExecutionError(AgentError):
    """Raised by a tool executor to signal that the call failed."""
