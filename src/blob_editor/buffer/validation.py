"""Invariant checks shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .sequence import LineHandle, LineSequence


class BufferValidationError(RuntimeError):
    """Raised when a handle or link no longer describes a live line."""

    def __init__(self, message: str, *, handle: Optional[int] = None) -> None:
        super().__init__(message)
        self.handle = handle


def ensure_cursor(
    sequence: "LineSequence", cursor: Optional["LineHandle"]
) -> Optional["LineHandle"]:
    """Return ``cursor`` if it is valid for ``sequence``.

    ``None`` is only valid for an empty sequence; any other value must be a
    live handle.
    """

    if cursor is None:
        if len(sequence):
            raise BufferValidationError("Cursor is unset on a non-empty buffer")
        return None
    if cursor not in sequence:
        raise BufferValidationError(
            "Cursor does not reference a live line", handle=cursor
        )
    return cursor


def check_links(sequence: "LineSequence") -> None:
    """Walk the sequence and verify predecessor/successor consistency."""

    first = sequence.first
    if first is None:
        if len(sequence) or sequence.last is not None:
            raise BufferValidationError("Empty buffer has dangling endpoints")
        return

    if sequence.predecessor(first) is not None:
        raise BufferValidationError("First line has a predecessor", handle=first)

    seen = 0
    previous: Optional[int] = None
    current: Optional[int] = first
    while current is not None:
        if sequence.predecessor(current) != previous:
            raise BufferValidationError("Broken back-link", handle=current)
        seen += 1
        if seen > len(sequence):
            raise BufferValidationError("Cycle detected", handle=current)
        previous = current
        current = sequence.successor(current)

    if previous != sequence.last:
        raise BufferValidationError("Last line is not reachable", handle=previous)
    if seen != len(sequence):
        raise BufferValidationError("Unreachable lines in buffer")


__all__ = ["BufferValidationError", "ensure_cursor", "check_links"]
