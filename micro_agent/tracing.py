"""
Debug dumps and LangFuse tracing.

Both are switched by environment variables and cost nothing when off:

    DEBUG_LOG=true                              # dump every API call
    LANGFUSE_PUBLIC_KEY=... LANGFUSE_SECRET_KEY=...   # trace to LangFuse
"""

import json
import os
from functools import wraps

from langfuse import get_client, observe

from . import config  # noqa: F401  (loads .env before the flags are read)


def _flag(name: str) -> bool:
    return os.getenv(name, "false").lower() == "true"


def debug_enabled() -> bool:
    return _flag("DEBUG_LOG")


def langfuse_enabled() -> bool:
    return bool(
        os.getenv("LANGFUSE_SECRET_KEY") and os.getenv("LANGFUSE_PUBLIC_KEY")
    )


# =============================================================================
# Debug dumps
# =============================================================================

def log_api_call(caller: str, system: str, messages: list, tools: list):
    if not debug_enabled():
        return
    print("\n" + "=" * 80)
    print(f"[API CALL] from: {caller}")
    print("=" * 80)
    print(json.dumps({
        "system": system,
        "messages": messages,
        "tools": tools
    }, ensure_ascii=False, indent=2, default=str))
    print("=" * 80 + "\n")


def log_api_response(caller: str, response):
    if not debug_enabled():
        return
    print("\n" + "=" * 80)
    print(f"[API RESPONSE] from: {caller}")
    print("=" * 80)
    print(response)
    print("=" * 80 + "\n")


# =============================================================================
# LangFuse
# =============================================================================

def traced(name: str):
    """observe(name=...) when LangFuse is configured, otherwise a no-op.

    The check happens per call so the decision follows the environment
    of the running process rather than the one at import time.
    """
    def decorator(fn):
        observed = observe(name=name)(fn)

        @wraps(fn)
        def wrapper(*args, **kwargs):
            if langfuse_enabled():
                return observed(*args, **kwargs)
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def update_trace(**kwargs):
    if langfuse_enabled():
        get_client().update_current_trace(**kwargs)


def update_span(**kwargs):
    if langfuse_enabled():
        get_client().update_current_span(**kwargs)


def score_trace(**kwargs):
    if langfuse_enabled():
        get_client().score_current_trace(**kwargs)
