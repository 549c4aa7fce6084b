"""
Identity generation for tasks and comments.

Two generators share one interface (``next_id(prefix)``):
  - TimestampIdGenerator  - sortable ms timestamp + random hex (default)
  - SequentialIdGenerator - monotonic counter, deterministic for tests/demos
"""
import time
import uuid
from typing import Dict


class TimestampIdGenerator:
    """Generate sortable unique IDs (ms-precision timestamp + random hex)."""

    def next_id(self, prefix: str = "task") -> str:
        ts = int(time.time() * 1000)
        rand = uuid.uuid4().hex[:8]
        return f"{prefix}-{ts}-{rand}"


class SequentialIdGenerator:
    """Counter-based IDs, one counter per prefix (e.g. task-001, comment-001)."""

    def __init__(self, start: int = 1):
        self._start = start
        self._counters: Dict[str, int] = {}

    def next_id(self, prefix: str = "task") -> str:
        num = self._counters.get(prefix, self._start)
        self._counters[prefix] = num + 1
        return f"{prefix}-{num:03d}"
