"""Minimal line-oriented text editor."""

__all__ = [
    "actions",
    "buffer",
    "keymaps",
    "modes",
    "runtime",
    "session",
]

__version__ = "0.1.0"
