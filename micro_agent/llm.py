"""
Conversation data model and the Anthropic provider gateway.

The transcript is a list of turns:

    UserTurn(text)                    - what the operator typed
    AssistantTurn(segments)           - text / tool-call segments, in order
    ToolResultTurn(results)           - one entry per tool call of the
                                        preceding assistant turn

The gateway recasts that transcript into the Messages API wire format,
performs exactly one request and normalizes the reply back into
segments. It never retries: any failure surfaces as ProviderError.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence, Union

from anthropic import Anthropic, APIError

from .config import AgentConfig
from .errors import ProviderError
from .tools import ToolDescriptor
from .tracing import log_api_call, log_api_response


# =============================================================================
# Segments and turns
# =============================================================================

@dataclass(frozen=True)
class TextSegment:
    text: str


@dataclass(frozen=True)
class ToolCallSegment:
    call_id: str
    tool_name: str
    input: dict


Segment = Union[TextSegment, ToolCallSegment]


@dataclass(frozen=True)
class ToolResultEntry:
    call_id: str
    text: str
    is_error: bool = False


@dataclass(frozen=True)
class UserTurn:
    text: str


@dataclass(frozen=True)
class AssistantTurn:
    segments: tuple[Segment, ...]

    @property
    def tool_calls(self) -> list[ToolCallSegment]:
        return [s for s in self.segments if isinstance(s, ToolCallSegment)]

    @property
    def text(self) -> str:
        """All text segments, in order, joined by a newline."""
        return "\n".join(s.text for s in self.segments if isinstance(s, TextSegment))


@dataclass(frozen=True)
class ToolResultTurn:
    results: tuple[ToolResultEntry, ...]


Turn = Union[UserTurn, AssistantTurn, ToolResultTurn]


class StopReason(Enum):
    END_TURN = "end_turn"
    TOOL_USE = "tool_use"
    OTHER = "other"

    @classmethod
    def from_wire(cls, value: str | None) -> "StopReason":
        if value == "end_turn":
            return cls.END_TURN
        if value == "tool_use":
            return cls.TOOL_USE
        return cls.OTHER


@dataclass(frozen=True)
class ProviderResponse:
    segments: tuple[Segment, ...]
    stop_reason: StopReason


class ProviderGateway(Protocol):
    """One request in, one normalized response out."""

    def send(
        self,
        system: str,
        turns: Sequence[Turn],
        tools: Sequence[ToolDescriptor],
    ) -> ProviderResponse: ...


# =============================================================================
# Wire format
# =============================================================================

def to_anthropic_tools(tools: Sequence[ToolDescriptor]) -> list[dict]:
    """Tool descriptors -> Messages API tool schemas."""
    return [
        {
            "name": t.name,
            "description": t.description,
            "input_schema": {"type": "object", **t.input_schema},
        }
        for t in tools
    ]


def _segment_to_block(segment: Segment) -> dict:
    if isinstance(segment, TextSegment):
        return {"type": "text", "text": segment.text}
    return {
        "type": "tool_use",
        "id": segment.call_id,
        "name": segment.tool_name,
        "input": segment.input,
    }


def _result_to_block(entry: ToolResultEntry) -> dict:
    block = {
        "type": "tool_result",
        "tool_use_id": entry.call_id,
        "content": entry.text,
    }
    if entry.is_error:
        block["is_error"] = True
    return block


def to_anthropic_messages(turns: Sequence[Turn]) -> list[dict]:
    """Transcript -> Messages API message list. Tool results travel as user messages."""
    messages = []
    for turn in turns:
        if isinstance(turn, UserTurn):
            messages.append({"role": "user", "content": turn.text})
        elif isinstance(turn, AssistantTurn):
            messages.append({
                "role": "assistant",
                "content": [_segment_to_block(s) for s in turn.segments],
            })
        elif isinstance(turn, ToolResultTurn):
            messages.append({
                "role": "user",
                "content": [_result_to_block(r) for r in turn.results],
            })
        else:
            raise TypeError(f"Not a conversation turn: {turn!r}")
    return messages


def from_anthropic_response(message) -> ProviderResponse:
    """Messages API response -> ProviderResponse, preserving block order."""
    content = getattr(message, "content", None)
    if content is None:
        raise ProviderError("Malformed provider response: missing content")

    segments: list[Segment] = []
    for block in content:
        block_type = getattr(block, "type", None)
        if block_type == "text":
            segments.append(TextSegment(block.text))
        elif block_type == "tool_use":
            call_id = getattr(block, "id", None)
            tool_name = getattr(block, "name", None)
            if not call_id or not tool_name:
                raise ProviderError("Malformed tool_use block: missing id or name")
            tool_input = getattr(block, "input", None)
            if tool_input is None:
                tool_input = {}
            if not isinstance(tool_input, dict):
                raise ProviderError(f"Malformed tool input for call {call_id!r}")
            segments.append(ToolCallSegment(call_id, tool_name, dict(tool_input)))
        else:
            raise ProviderError(f"Unsupported content block type: {block_type!r}")

    return ProviderResponse(tuple(segments), StopReason.from_wire(message.stop_reason))


# =============================================================================
# Gateway
# =============================================================================

def create_client(api_key: str, base_url: str | None = None) -> Anthropic:
    return Anthropic(api_key=api_key, base_url=base_url)


class AnthropicGateway:
    """ProviderGateway backed by the Anthropic Messages API."""

    def __init__(self, client: Anthropic, model: str, max_tokens: int):
        self._client = client
        self.model = model
        self.max_tokens = max_tokens

    @classmethod
    def from_config(cls, config: AgentConfig) -> "AnthropicGateway":
        return cls(
            create_client(config.api_key, config.base_url),
            config.model,
            config.max_tokens,
        )

    def send(
        self,
        system: str,
        turns: Sequence[Turn],
        tools: Sequence[ToolDescriptor],
    ) -> ProviderResponse:
        messages = to_anthropic_messages(turns)
        tool_schemas = to_anthropic_tools(tools)

        request = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "system": system,
            "messages": messages,
        }
        if tool_schemas:
            request["tools"] = tool_schemas

        log_api_call("agent", system, messages, tool_schemas)
        try:
            response = self._client.messages.create(**request)
        except APIError as e:
            raise ProviderError(str(e)) from e
        log_api_response("agent", response)

        return from_anthropic_response(response)
