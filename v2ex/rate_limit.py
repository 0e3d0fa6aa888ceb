"""Rate-limit state observed from API response headers."""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

LIMIT_HEADER = "X-Rate-Limit-Limit"
REMAINING_HEADER = "X-Rate-Limit-Remaining"
RESET_HEADER = "X-Rate-Limit-Reset"

_UINT16_RANGE = (0, 2**16 - 1)
_INT64_RANGE = (-(2**63), 2**63 - 1)

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class RateLimitInfo:
    """Point-in-time copy of the tracker's three values."""

    limit: int
    remaining: int
    reset: int


def parse_header_value(raw: str | None, bounds: tuple[int, int]) -> int | None:
    """Parse a decimal header value, returning *None* if absent or invalid."""
    low, high = bounds
    pattern = _SIGNED_RE if low < 0 else _UNSIGNED_RE
    if raw is None or not pattern.fullmatch(raw):
        return None
    value = int(raw)
    if value < low or value > high:
        return None
    return value


class _Cell:
    """A single integer guarded by its own lock."""

    __slots__ = ("_value", "_lock")

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> int:
        with self._lock:
            return self._value

    def set(self, value: int) -> None:
        with self._lock:
            self._value = value


class RateLimitTracker:
    """Thread-safe holder of the API's current throttling window.

    ``limit``, ``remaining`` and ``reset`` live in separate cells, each with
    its own lock, so concurrent calls never contend on a shared lock and a
    response missing one header still updates the other two. Readers may
    see cells that come from different responses.
    """

    def __init__(self) -> None:
        self._limit = _Cell()
        self._remaining = _Cell()
        self._reset = _Cell()

    def limit(self) -> int:
        """Maximum requests allowed per window."""
        return self._limit.get()

    def remaining(self) -> int:
        """Requests left in the current window."""
        return self._remaining.get()

    def reset(self) -> int:
        """Seconds until the window resets."""
        return self._reset.get()

    def snapshot(self) -> RateLimitInfo:
        return RateLimitInfo(
            limit=self.limit(),
            remaining=self.remaining(),
            reset=self.reset(),
        )

    def update(self, headers: Mapping[str, str]) -> None:
        """Store every rate-limit header in *headers* that parses cleanly.

        Absent or malformed headers leave their cell untouched.
        """
        for name, cell, bounds in (
            (LIMIT_HEADER, self._limit, _UINT16_RANGE),
            (REMAINING_HEADER, self._remaining, _UINT16_RANGE),
            (RESET_HEADER, self._reset, _INT64_RANGE),
        ):
            raw = headers.get(name)
            value = parse_header_value(raw, bounds)
            if value is None:
                if raw is not None:
                    logger.debug("Ignoring unparseable %s header: %r", name, raw)
                continue
            cell.set(value)
