"""Command interpreter, insert mode, and their shared context."""

from .base_mode import (
    AtEndResult,
    AtStartResult,
    ByteSink,
    CommandResult,
    Continue,
    InputExhausted,
    LineSource,
    Mode,
    ModeContext,
    Quit,
)
from .insert_mode import InsertMode
from .command_mode import CommandMode

__all__ = [
    "AtEndResult",
    "AtStartResult",
    "ByteSink",
    "CommandMode",
    "CommandResult",
    "Continue",
    "InputExhausted",
    "InsertMode",
    "LineSource",
    "Mode",
    "ModeContext",
    "Quit",
]
