"""Shell execution tool."""

import subprocess
import sys

from .tools import ToolContext, tool

TIMEOUT_SECONDS = 30


def _shell_command(command: str) -> list[str]:
    if sys.platform == "win32":
        return ["cmd.exe", "/c", command]
    return ["bash", "-c", command]


def _as_text(data) -> str:
    # TimeoutExpired carries bytes even in text mode
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


@tool(
    name="bash",
    description="Execute a bash command and return its output (stdout + stderr).",
    schema={
        "type": "object",
        "properties": {
            "command": {
                "type": "string",
                "description": "The bash command to execute",
            },
        },
        "required": ["command"],
    },
)
def bash_tool(context: ToolContext, command: str) -> str:
    """Run a command. A failing command is reported in the text, not raised."""
    try:
        r = subprocess.run(
            _shell_command(command), cwd=context.workdir,
            capture_output=True, text=True, timeout=TIMEOUT_SECONDS,
        )
    except subprocess.TimeoutExpired as e:
        output = _as_text(e.stdout) + _as_text(e.stderr)
        return f"{output}\n[timed out after {TIMEOUT_SECONDS}s]"

    output = r.stdout + r.stderr
    if r.returncode != 0:
        return f"{output}\n[exit code {r.returncode}]"
    return output.rstrip()
