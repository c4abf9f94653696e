"""Hand-written stand-ins for the provider side of the loop."""

from types import SimpleNamespace

from micro_agent.llm import (
    ProviderResponse,
    StopReason,
    TextSegment,
    ToolCallSegment,
)


class ScriptedGateway:
    """Returns (or raises) the scripted items in order and records every call."""

    def __init__(self, *script):
        self.script = list(script)
        self.calls = []

    def send(self, system, turns, tools):
        self.calls.append(SimpleNamespace(system=system, turns=tuple(turns), tools=tuple(tools)))
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


def text_response(*texts) -> ProviderResponse:
    return ProviderResponse(tuple(TextSegment(t) for t in texts), StopReason.END_TURN)


def tool_response(*calls, texts=()) -> ProviderResponse:
    """calls are (call_id, tool_name, input) triples."""
    segments = [TextSegment(t) for t in texts]
    segments += [ToolCallSegment(cid, name, dict(inp)) for cid, name, inp in calls]
    return ProviderResponse(tuple(segments), StopReason.TOOL_USE)


class FakeMessages:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeAnthropicClient:
    def __init__(self, response=None, error=None):
        self.messages = FakeMessages(response, error)


def text_block(text):
    return SimpleNamespace(type="text", text=text)


def tool_use_block(id, name, input):
    return SimpleNamespace(type="tool_use", id=id, name=name, input=input)


def api_message(*blocks, stop_reason="end_turn"):
    return SimpleNamespace(content=list(blocks), stop_reason=stop_reason)
