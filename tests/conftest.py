import pytest


@pytest.fixture(autouse=True)
def quiet_env(monkeypatch):
    """No debug dumps or LangFuse traffic unless a test asks for it."""
    for name in ("DEBUG_LOG", "LANGFUSE_PUBLIC_KEY", "LANGFUSE_SECRET_KEY"):
        monkeypatch.delenv(name, raising=False)
