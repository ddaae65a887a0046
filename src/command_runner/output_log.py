"""Append-only transcript of output lines.

The dispatcher appends; the output view reads. All mutation happens on the
application's event loop, so each call is applied whole before the next.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class OutputLog:
    """Ordered sequence of text lines, cleared only explicitly.

    ``max_lines`` turns the log into a ring buffer that drops the oldest lines;
    None keeps every line for the whole session.

    ``total_appended`` counts every line ever appended and ``generation`` is
    bumped by ``clear()``. Together they let a renderer draw only what is new.
    """

    def __init__(self, max_lines: int | None = None):
        if max_lines is not None and max_lines <= 0:
            raise ValueError("max_lines must be positive or None")
        self._lines: deque[str] = deque(maxlen=max_lines)
        self.total_appended = 0
        self.generation = 0

    @property
    def max_lines(self) -> int | None:
        return self._lines.maxlen

    def append(self, line: str) -> None:
        self._lines.append(line)
        self.total_appended += 1

    def append_many(self, lines: Iterable[str]) -> None:
        batch = list(lines)
        self._lines.extend(batch)
        self.total_appended += len(batch)

    def clear(self) -> None:
        self._lines.clear()
        self.generation += 1

    def lines(self) -> list[str]:
        """Snapshot of the retained lines in insertion order."""
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self):
        return iter(list(self._lines))
