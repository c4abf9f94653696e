import sys

import pytest

from micro_agent import bash_tool as bash_module
from micro_agent.bash_tool import bash_tool
from micro_agent.tools import ToolContext

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="uses bash syntax")


@pytest.fixture
def context(tmp_path):
    return ToolContext(workdir=tmp_path)


def test_descriptor():
    assert bash_tool.name == "bash"
    assert bash_tool.input_schema["required"] == ["command"]


def test_success_output_is_right_stripped(context):
    assert bash_tool.execute(context, command="echo hello world") == "hello world"


def test_stderr_is_included(context):
    assert bash_tool.execute(context, command="echo out; echo err 1>&2") == "out\nerr"


def test_non_zero_exit_is_reported_as_text(context):
    result = bash_tool.execute(context, command="echo partial; exit 3")
    assert result == "partial\n\n[exit code 3]"


def test_runs_in_context_workdir(context, tmp_path):
    (tmp_path / "marker.txt").write_text("x")
    assert bash_tool.execute(context, command="ls") == "marker.txt"


def test_timeout_is_reported_as_text(context, monkeypatch):
    monkeypatch.setattr(bash_module, "TIMEOUT_SECONDS", 1)
    result = bash_tool.execute(context, command="echo started; sleep 5")
    assert result.endswith("\n[timed out after 1s]")


def test_missing_command_argument_raises(context):
    with pytest.raises(TypeError):
        bash_tool.execute(context)
