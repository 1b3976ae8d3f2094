"""Doubly linked line storage addressed by stable integer handles."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Dict, Iterable, Iterator, Optional

from .line import Line
from .validation import BufferValidationError

LineHandle = int


class BoundaryError(LookupError):
    """Raised when navigation would leave the buffer."""

    token = "BOUNDARY"

    def __init__(self, handle: Optional[LineHandle] = None) -> None:
        super().__init__(self.token)
        self.handle = handle


class AtStart(BoundaryError):
    token = "START"


class AtEnd(BoundaryError):
    token = "EOF"


@dataclass(slots=True)
class _Node:
    line: Line
    prev: Optional[LineHandle] = None
    next: Optional[LineHandle] = None


class LineSequence:
    """Ordered lines with O(1) insert/remove at a handle.

    Nodes live in an arena keyed by handle. Handles are never reused, so a
    handle kept past ``remove`` fails lookups instead of aliasing a new line.
    """

    def __init__(self, lines: Iterable[Line] = ()) -> None:
        self._nodes: Dict[LineHandle, _Node] = {}
        self._first: Optional[LineHandle] = None
        self._last: Optional[LineHandle] = None
        self._ids = count(1)
        for line in lines:
            self.append(line)

    @property
    def first(self) -> Optional[LineHandle]:
        return self._first

    @property
    def last(self) -> Optional[LineHandle]:
        return self._last

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, handle: object) -> bool:
        return handle in self._nodes

    def __iter__(self) -> Iterator[Line]:
        for handle in self.handles():
            yield self._nodes[handle].line

    def handles(self) -> Iterator[LineHandle]:
        current = self._first
        while current is not None:
            node = self._nodes[current]
            yield current
            current = node.next

    def get(self, handle: LineHandle) -> Line:
        return self._node(handle).line

    def successor(self, handle: LineHandle) -> Optional[LineHandle]:
        return self._node(handle).next

    def predecessor(self, handle: LineHandle) -> Optional[LineHandle]:
        return self._node(handle).prev

    def append(self, line: Line) -> LineHandle:
        return self.insert_after(self._last, line)

    def insert_after(self, cursor: Optional[LineHandle], line: Line) -> LineHandle:
        """Link ``line`` right after ``cursor`` and return its handle.

        ``cursor`` may only be ``None`` when the sequence is empty; the new
        line then becomes both first and last.
        """

        if cursor is None:
            if self._nodes:
                raise BufferValidationError("Cannot insert without a cursor")
            handle = next(self._ids)
            self._nodes[handle] = _Node(line)
            self._first = self._last = handle
            return handle

        anchor = self._node(cursor)
        handle = next(self._ids)
        node = _Node(line, prev=cursor, next=anchor.next)
        self._nodes[handle] = node
        if anchor.next is not None:
            self._nodes[anchor.next].prev = handle
        else:
            self._last = handle
        anchor.next = handle
        return handle

    def remove(self, cursor: Optional[LineHandle]) -> Optional[LineHandle]:
        """Unlink ``cursor`` and return the handle the cursor should move to.

        The successor wins when there is one, then the predecessor; ``None``
        means the sequence is now empty.
        """

        if cursor is None:
            return None

        node = self._node(cursor)
        if node.prev is not None:
            self._nodes[node.prev].next = node.next
        else:
            self._first = node.next
        if node.next is not None:
            self._nodes[node.next].prev = node.prev
        else:
            self._last = node.prev
        del self._nodes[cursor]

        return node.next if node.next is not None else node.prev

    def advance(self, cursor: Optional[LineHandle]) -> LineHandle:
        if cursor is None:
            raise AtEnd(cursor)
        following = self._node(cursor).next
        if following is None:
            raise AtEnd(cursor)
        return following

    def retreat(self, cursor: Optional[LineHandle]) -> LineHandle:
        if cursor is None:
            raise AtStart(cursor)
        preceding = self._node(cursor).prev
        if preceding is None:
            raise AtStart(cursor)
        return preceding

    def clear(self) -> None:
        self._nodes.clear()
        self._first = self._last = None

    def _node(self, handle: LineHandle) -> _Node:
        try:
            return self._nodes[handle]
        except KeyError as exc:
            raise BufferValidationError(
                f"Line handle {handle!r} is not live", handle=handle
            ) from exc


__all__ = ["AtEnd", "AtStart", "BoundaryError", "LineHandle", "LineSequence"]
