"""Buffer commands bound to single letters."""

from __future__ import annotations

from blob_editor.buffer import save
from blob_editor.modes.base_mode import ModeContext, Quit
from blob_editor.modes.insert_mode import InsertMode

from .help import render_usage

BLANK_LINE = b"\n"


def next_line(context: ModeContext) -> None:
    context.state.advance()


def previous_line(context: ModeContext) -> None:
    context.state.retreat()


def print_line(context: ModeContext) -> None:
    line = context.state.current_line()
    if line is None:
        context.output.write(BLANK_LINE)
        return
    context.output.write(context.codec.encode(line))


def insert_lines(context: ModeContext) -> int:
    return InsertMode(context).run()


def list_buffer(context: ModeContext) -> None:
    context.output.write(context.codec.encode_lines(context.state.iter_lines()))


def delete_line(context: ModeContext) -> None:
    context.state.delete()


def quit_editor(context: ModeContext) -> Quit:
    del context
    return Quit()


def write_buffer(context: ModeContext) -> int:
    state = context.state
    return save(state.path, state.iter_lines(), context.codec)


def show_help(context: ModeContext) -> None:
    context.errors.write(render_usage(context.keymaps).encode("utf-8"))
    context.errors.flush()


__all__ = [
    "delete_line",
    "insert_lines",
    "list_buffer",
    "next_line",
    "previous_line",
    "print_line",
    "quit_editor",
    "show_help",
    "write_buffer",
]
