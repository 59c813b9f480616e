"""
output.py — Line sinks that receive rendered notifications.

A sink is any callable taking one line of text. Channels never touch
``sys.stdout`` directly, so callers and tests can swap the destination.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Protocol, TextIO


class LineWriter(Protocol):
    def __call__(self, line: str) -> None: ...


class ConsoleSink:
    """Write lines to a text stream (``sys.stdout`` unless given)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def __call__(self, line: str) -> None:
        # Resolved per call so a redirected sys.stdout is honoured
        stream = self._stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()


class MemorySink:
    """Collect lines in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()
