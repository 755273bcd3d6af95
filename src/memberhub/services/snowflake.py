"""Snowflake-style identifier generator.

Identifiers pack a millisecond timestamp (relative to ``EPOCH_MS``), a worker
id and a per-millisecond sequence into a 63-bit integer, rendered as a decimal
string. Values issued by one generator are strictly increasing.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

# 2020-01-01T00:00:00Z
EPOCH_MS = 1_577_836_800_000

WORKER_ID_BITS = 10
SEQUENCE_BITS = 12
MAX_WORKER_ID = (1 << WORKER_ID_BITS) - 1
SEQUENCE_MASK = (1 << SEQUENCE_BITS) - 1


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class SnowflakeGenerator:
    """Thread-safe generator of time-ordered identifiers."""

    def __init__(
        self,
        worker_id: int = 0,
        *,
        clock: Callable[[], int] = _wall_clock_ms,
    ) -> None:
        if not 0 <= worker_id <= MAX_WORKER_ID:
            raise ValueError(f"worker_id must be between 0 and {MAX_WORKER_ID}")
        self.worker_id = worker_id
        self._clock = clock
        self._lock = threading.Lock()
        self._last_ms = -1
        self._sequence = 0

    def next_int(self) -> int:
        """Return the next identifier as an integer."""
        with self._lock:
            now_ms = max(self._clock() - EPOCH_MS, self._last_ms)
            if now_ms == self._last_ms:
                self._sequence = (self._sequence + 1) & SEQUENCE_MASK
                if self._sequence == 0:
                    # Sequence exhausted for this millisecond; borrow the next one.
                    now_ms += 1
            else:
                self._sequence = 0
            self._last_ms = now_ms
            return (
                (now_ms << (WORKER_ID_BITS + SEQUENCE_BITS))
                | (self.worker_id << SEQUENCE_BITS)
                | self._sequence
            )

    def next_id(self) -> str:
        """Return the next identifier as a decimal string."""
        return str(self.next_int())


_GENERATOR = SnowflakeGenerator()


def generate_id() -> str:
    """Return a new process-unique identifier."""
    return _GENERATOR.next_id()
