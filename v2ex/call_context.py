"""Correlation ID for the API call in progress.

Each client call sets a fresh ID for its duration, and the client attaches
it as ``call_id`` to every log record it emits for that call.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar

call_id_var: ContextVar[str] = ContextVar("call_id", default="")


def generate_call_id() -> str:
    """Return a new 32-character hex call ID."""
    return uuid.uuid4().hex


def get_call_id() -> str:
    """ID of the call running in this context, or ``""`` outside a call."""
    return call_id_var.get()
