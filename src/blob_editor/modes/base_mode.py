"""Shared context, result variants and I/O protocols for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Optional, Protocol, Union

from blob_editor.buffer import DEFAULT_CODEC, EditorState, TextCodec
from blob_editor.runtime.cancel import CancellationToken

if TYPE_CHECKING:
    from blob_editor.keymaps import KeymapRegistry


class LineSource(Protocol):
    """Blocking line reader; an empty result means end of input."""

    def readline(self) -> bytes:
        ...


class ByteSink(Protocol):
    def write(self, data: bytes) -> int:
        ...

    def flush(self) -> None:
        ...


class InputExhausted(EOFError):
    """Raised when the interactive input stream reaches end of file."""


@dataclass(frozen=True, slots=True)
class Continue:
    """The whole command line ran; ``executed`` counts the bound letters."""

    executed: int = 0
    status: ClassVar[str] = "continue"


@dataclass(frozen=True, slots=True)
class AtEndResult:
    """``n`` hit the last line at ``column``; the rest of the line was skipped."""

    column: int
    status: ClassVar[str] = "eof"
    token: ClassVar[bytes] = b"EOF"


@dataclass(frozen=True, slots=True)
class AtStartResult:
    """``b`` hit the first line at ``column``; the rest of the line was skipped."""

    column: int
    status: ClassVar[str] = "start"
    token: ClassVar[bytes] = b"START"


@dataclass(frozen=True, slots=True)
class Quit:
    status: ClassVar[str] = "quit"


CommandResult = Union[Continue, AtEndResult, AtStartResult, Quit]
BoundaryResult = Union[AtEndResult, AtStartResult]


@dataclass(slots=True)
class ModeContext:
    """Services every mode and action can reach."""

    state: EditorState
    keymaps: "KeymapRegistry"
    source: LineSource
    output: ByteSink
    errors: ByteSink
    token: CancellationToken = field(default_factory=CancellationToken)
    codec: TextCodec = DEFAULT_CODEC


class Mode:
    """Base class for the command interpreter and insert mode."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def state(self) -> EditorState:
        return self.context.state

    def read_line(self) -> Optional[bytes]:
        raw = self.context.source.readline()
        return raw or None


__all__ = [
    "AtEndResult",
    "AtStartResult",
    "BoundaryResult",
    "ByteSink",
    "CommandResult",
    "Continue",
    "InputExhausted",
    "LineSource",
    "Mode",
    "ModeContext",
    "Quit",
]
