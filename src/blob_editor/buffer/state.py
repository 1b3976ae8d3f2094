"""Editor state: the line sequence plus its start and cursor references."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .line import Line
from .sequence import LineHandle, LineSequence
from .validation import check_links, ensure_cursor


@dataclass(slots=True)
class EditorState:
    """Owns the buffer and tracks where the user is in it.

    ``start`` always mirrors the sequence's first handle, so it is updated
    for free when the first line is deleted. ``cursor`` is ``None`` only for
    an empty buffer.
    """

    path: str
    lines: LineSequence = field(default_factory=LineSequence)
    cursor: Optional[LineHandle] = None

    @classmethod
    def from_lines(cls, path: str, lines: LineSequence) -> "EditorState":
        return cls(path=path, lines=lines, cursor=lines.first)

    @property
    def start(self) -> Optional[LineHandle]:
        return self.lines.first

    @property
    def is_empty(self) -> bool:
        return self.start is None

    def current_line(self) -> Optional[Line]:
        if self.cursor is None:
            return None
        return self.lines.get(self.cursor)

    def iter_lines(self) -> Iterator[Line]:
        return iter(self.lines)

    def advance(self) -> LineHandle:
        self.cursor = self.lines.advance(self.cursor)
        return self.cursor

    def retreat(self) -> LineHandle:
        self.cursor = self.lines.retreat(self.cursor)
        return self.cursor

    def insert(self, line: Line) -> LineHandle:
        self.cursor = self.lines.insert_after(self.cursor, line)
        return self.cursor

    def delete(self) -> Optional[LineHandle]:
        self.cursor = self.lines.remove(self.cursor)
        return self.cursor

    def check(self) -> None:
        check_links(self.lines)
        ensure_cursor(self.lines, self.cursor)

    def release(self) -> None:
        self.lines.clear()
        self.cursor = None


__all__ = ["EditorState"]
