"""
Tool contract and registry.

A tool is anything the model can ask us to run: it self-describes with a
name, a description and a JSON schema, and executes with the structured
input the model produced.

    class EchoTool(Tool):
        name = "echo"
        ...
        def execute(self, context, text: str) -> str:
            return text

Tools are STATELESS. Per-session context (working directory etc.) is
passed to execute() on every call instead of being stored on the tool,
so one tool instance can serve any number of agents.

The registry is built once from a fixed list. Duplicate names fail at
construction; lookups never raise, so the agent loop can turn a miss
into an error result the model can see.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from .errors import DuplicateToolError


@dataclass
class ToolContext:
    """Context passed to tool execution - NOT stored in tool instances."""
    workdir: Path


@dataclass(frozen=True)
class ToolDescriptor:
    """What the model is told about a tool."""
    name: str
    description: str
    input_schema: dict


class Tool(ABC):
    """
    Abstract base class for all tools.

    Each tool must implement:
    - name: Tool identifier, unique within a registry
    - description: What the tool does (shown to the model)
    - input_schema: JSON schema for parameters
    - execute(context, **kwargs) -> str

    Expected failures (missing file, non-zero exit, ...) should be
    returned as ordinary text. Raising is reserved for real faults; the
    agent loop reports those to the model as error results.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name for function calling."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description for the model."""

    @property
    @abstractmethod
    def input_schema(self) -> dict:
        """JSON schema for tool parameters."""

    @abstractmethod
    def execute(self, context: ToolContext, **kwargs) -> str:
        """
        Execute the tool with given parameters.

        Args:
            context: Per-session context - passed, not stored
            **kwargs: Structured input from the model, unpacked

        Returns:
            String result to return to the model
        """

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(self.name, self.description, dict(self.input_schema))


class ToolRegistry:
    """
    Name-keyed, immutable collection of tools.

    Example:
        registry = ToolRegistry([bash_tool, EchoTool()])
        registry.get("bash")      # -> Tool
        registry.get("missing")   # -> None
    """

    def __init__(self, tools: Iterable[Tool] = ()):
        self._tools: dict[str, Tool] = {}
        for t in tools:
            if t.name in self._tools:
                raise DuplicateToolError(t.name)
            self._tools[t.name] = t

    def get(self, name: str) -> Tool | None:
        """Exact, case-sensitive lookup. Returns None when absent."""
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        return name in self._tools

    def list_names(self) -> list[str]:
        """Registered tool names, in registration order."""
        return list(self._tools.keys())

    def descriptors(self) -> list[ToolDescriptor]:
        return [t.descriptor() for t in self._tools.values()]

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self):
        return iter(self._tools.values())


def tool(name: str, description: str, schema: dict):
    """
    Decorator to create a Tool from a simple function.

    Example:
        @tool(
            name="pwd",
            description="Print the working directory",
            schema={"type": "object", "properties": {}},
        )
        def pwd_tool(context: ToolContext) -> str:
            return str(context.workdir)

    The decorated name is bound to a Tool instance that can be registered.
    """
    def decorator(func: Callable[..., str]) -> Tool:
        class FunctionTool(Tool):
            @property
            def name(self) -> str:
                return name

            @property
            def description(self) -> str:
                return description

            @property
            def input_schema(self) -> dict:
                return schema

            def execute(self, context: ToolContext, **kwargs) -> str:
                return func(context, **kwargs)

            def __repr__(self) -> str:
                return f"<tool {name}>"

        return FunctionTool()

    return decorator
