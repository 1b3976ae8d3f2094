"""Editing verbs invoked by the command interpreter."""

from .core import (
    delete_line,
    insert_lines,
    list_buffer,
    next_line,
    previous_line,
    print_line,
    quit_editor,
    show_help,
    write_buffer,
)
from .help import render_usage

__all__ = [
    "delete_line",
    "insert_lines",
    "list_buffer",
    "next_line",
    "previous_line",
    "print_line",
    "quit_editor",
    "render_usage",
    "show_help",
    "write_buffer",
]
