"""
Interactive REPL.

Usage:
    micro-agent
    python -m micro_agent
"""

import sys
import uuid
from typing import Callable

from .agent import Agent
from .bash_tool import bash_tool
from .config import load_config
from .errors import ConfigError
from .llm import ToolCallSegment
from .prompts import SYSTEM_PROMPT

BUILTIN_TOOLS = [bash_tool]


def print_tool_call(call: ToolCallSegment):
    print(f"\n> {call.tool_name}")


def repl(agent: Agent, input_fn: Callable[[str], str] | None = None):
    """Read one utterance at a time until exit/quit or end of input."""
    input_fn = input_fn or input
    while True:
        try:
            user_input = input_fn("you> ").strip()
        except (EOFError, KeyboardInterrupt):
            break

        if user_input in ("exit", "quit"):
            break
        if not user_input:
            continue

        try:
            response = agent.run(user_input)
        except Exception as e:
            print(f"\nError: {e}\n")
            continue

        print(f"\nassistant> {response}\n")


def main() -> int:
    try:
        config = load_config(BUILTIN_TOOLS, SYSTEM_PROMPT)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    agent = Agent(config, on_tool_call=print_tool_call, session_id=str(uuid.uuid4()))

    print("micro-agent (type 'exit' to quit)")
    print(f"Tools: {', '.join(agent.registry.list_names())}\n")

    repl(agent)
    return 0


if __name__ == "__main__":
    sys.exit(main())
