"""
The tool-use loop.

    user message -> provider -> tool calls? --no--> answer
                       ^             |
                       |            yes
                       |             v
                       +---- tool results (one per call, in order)

One Agent owns one transcript for its whole lifetime. Every assistant
reply is recorded before it is inspected, every tool call is answered by
exactly one result before the next provider call, and tool faults are
turned into error results for the model instead of aborting the turn.
Provider failures are not caught here: they propagate to the caller and
leave the transcript as it was before the failed call.
"""

from pathlib import Path
from typing import Callable

from .config import AgentConfig
from .llm import (
    AnthropicGateway,
    AssistantTurn,
    ProviderGateway,
    ToolCallSegment,
    ToolResultEntry,
    ToolResultTurn,
    Turn,
    UserTurn,
)
from .tools import ToolContext, ToolRegistry
from .tracing import score_trace, traced, update_span, update_trace


class Agent:
    def __init__(
        self,
        config: AgentConfig,
        gateway: ProviderGateway | None = None,
        context: ToolContext | None = None,
        on_tool_call: Callable[[ToolCallSegment], None] | None = None,
        session_id: str | None = None,
    ):
        self.system_prompt = config.system_prompt
        self.registry = ToolRegistry(config.tools)
        self._tool_descriptors = self.registry.descriptors()
        self.gateway = gateway if gateway is not None else AnthropicGateway.from_config(config)
        self.context = context if context is not None else ToolContext(workdir=Path.cwd())
        self.on_tool_call = on_tool_call
        self.session_id = session_id
        self._turns: list[Turn] = []

    @property
    def turns(self) -> tuple[Turn, ...]:
        """Snapshot of the transcript so far."""
        return tuple(self._turns)

    @traced("AgentLoop")
    def run(self, user_message: str) -> str:
        """Handle one user message and return the model's final answer."""
        if self.session_id:
            update_trace(session_id=self.session_id)

        self._turns.append(UserTurn(user_message))

        while True:
            try:
                response = self.gateway.send(
                    self.system_prompt, self.turns, self._tool_descriptors
                )
            except Exception as e:
                score_trace(name="completion", value=0, comment=str(e))
                raise

            # Recorded even when it ends the loop, so the next call sees it
            assistant = AssistantTurn(response.segments)
            self._turns.append(assistant)

            calls = assistant.tool_calls
            if not calls:
                score_trace(name="completion", value=1, comment="Agent completed successfully")
                return assistant.text

            results = tuple(self._execute(call) for call in calls)
            self._turns.append(ToolResultTurn(results))

    @traced("ToolCall")
    def _execute(self, call: ToolCallSegment) -> ToolResultEntry:
        update_span(metadata={"tool": call.tool_name, "call_id": call.call_id})
        if self.on_tool_call is not None:
            self.on_tool_call(call)

        tool = self.registry.get(call.tool_name)
        if tool is None:
            return ToolResultEntry(
                call.call_id, f'Error: unknown tool "{call.tool_name}"', is_error=True
            )

        try:
            output = tool.execute(self.context, **call.input)
        except Exception as e:
            return ToolResultEntry(
                call.call_id,
                f'Error executing tool "{call.tool_name}": {e}',
                is_error=True,
            )
        return ToolResultEntry(call.call_id, output)
